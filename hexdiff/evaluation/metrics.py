"""Counting helpers over classification sequences."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from hexdiff.types import Diff, DiffResult


def _safe_divide(numerator: float, denominator: float, default: float) -> float:
    """Divide with zero-denominator protection."""
    return numerator / denominator if denominator else default


def count_diffs(diffs: Iterable[Diff]) -> Dict[Diff, int]:
    """Count each classification; every variant is present in the result."""
    counts = {variant: 0 for variant in Diff}
    for diff in diffs:
        counts[diff] += 1
    return counts


def difference_offsets(result: DiffResult) -> List[int]:
    """Return every offset that is not SAME on the longer side.

    This covers DIFFERENT offsets in the overlap and the NO_OTHER tail.
    """
    longer = (
        result.diffs_a
        if len(result.diffs_a) >= len(result.diffs_b)
        else result.diffs_b
    )
    return [offset for offset, diff in enumerate(longer) if diff is not Diff.SAME]


def first_difference(result: DiffResult) -> Optional[int]:
    """Offset of the first non-SAME position, or None for identical blobs."""
    offsets = difference_offsets(result)
    return offsets[0] if offsets else None


def match_ratio(result: DiffResult) -> float:
    """Fraction of SAME positions over the longer blob (1.0 when both are empty)."""
    same = count_diffs(result.diffs_a)[Diff.SAME]
    return _safe_divide(same, result.span, 1.0)


__all__ = [
    "count_diffs",
    "difference_offsets",
    "first_difference",
    "match_ratio",
]
