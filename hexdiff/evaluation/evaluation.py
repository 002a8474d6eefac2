"""Summaries and reports for a finished comparison."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from hexdiff.evaluation.metrics import (
    count_diffs,
    difference_offsets,
    first_difference,
    match_ratio,
)
from hexdiff.types import Diff, DiffResult, DiffSummary

DifferenceRow = Tuple[int, Optional[int], Optional[int]]


def _check_lengths(a: Sequence[int], b: Sequence[int], result: DiffResult) -> None:
    """Validate that the result was computed from these sequences."""
    if (len(a), len(b)) != (len(result.diffs_a), len(result.diffs_b)):
        raise ValueError(
            "Byte sequences and classifications have inconsistent lengths: "
            f"{(len(a), len(b))} vs {(len(result.diffs_a), len(result.diffs_b))}"
        )


def summarize(result: DiffResult) -> DiffSummary:
    """Aggregate the classifications of both sides."""
    counts_a = count_diffs(result.diffs_a)
    counts_b = count_diffs(result.diffs_b)

    return DiffSummary(
        len_a=len(result.diffs_a),
        len_b=len(result.diffs_b),
        same=counts_a[Diff.SAME],
        different=counts_a[Diff.DIFFERENT],
        no_other_a=counts_a[Diff.NO_OTHER],
        no_other_b=counts_b[Diff.NO_OTHER],
        match_ratio=match_ratio(result),
        first_difference=first_difference(result),
    )


def difference_table(
    a: Sequence[int], b: Sequence[int], result: DiffResult
) -> List[DifferenceRow]:
    """Return (offset, byte_a, byte_b) for each differing offset.

    A side with no byte at the offset is reported as None.
    """
    _check_lengths(a, b, result)
    return [
        (
            offset,
            a[offset] if offset < len(a) else None,
            b[offset] if offset < len(b) else None,
        )
        for offset in difference_offsets(result)
    ]


__all__ = ["summarize", "difference_table"]
