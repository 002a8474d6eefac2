"""Diff summary data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DiffSummary:
    """Aggregate counts for one comparison."""

    len_a: int
    len_b: int
    same: int
    different: int
    no_other_a: int
    no_other_b: int
    match_ratio: float
    first_difference: Optional[int]

    @property
    def identical(self) -> bool:
        """True when both blobs have the same length and every byte matches."""
        return self.first_difference is None


__all__ = ["DiffSummary"]
