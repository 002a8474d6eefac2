"""Index-by-index classification of two byte sequences."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from hexdiff.algorithms.base import ByteDiffer
from hexdiff.types import Diff, DiffResult


def compare(a: Sequence[int], b: Sequence[int]) -> Tuple[List[Diff], List[Diff]]:
    """Classify both sequences position by position.

    Bytes at the same index in both sequences are SAME or DIFFERENT by
    equality. Once the shorter sequence is exhausted, every remaining byte of
    the longer one is NO_OTHER and the shorter one gets no further entries.

    Returns:
        (diffs_a, diffs_b) with len(diffs_a) == len(a) and len(diffs_b) == len(b)
    """
    overlap = min(len(a), len(b))
    diffs_a: List[Diff] = []
    diffs_b: List[Diff] = []

    for i in range(overlap):
        verdict = Diff.SAME if a[i] == b[i] else Diff.DIFFERENT
        diffs_a.append(verdict)
        diffs_b.append(verdict)

    diffs_a.extend([Diff.NO_OTHER] * (len(a) - overlap))
    diffs_b.extend([Diff.NO_OTHER] * (len(b) - overlap))
    return diffs_a, diffs_b


class PositionalDiffer(ByteDiffer):
    """Positional differ: no insertion/deletion handling, no resynchronization."""

    def diff(self, a: Sequence[int], b: Sequence[int]) -> DiffResult:
        diffs_a, diffs_b = compare(a, b)
        return DiffResult(diffs_a=tuple(diffs_a), diffs_b=tuple(diffs_b))


__all__ = ["PositionalDiffer", "compare"]
