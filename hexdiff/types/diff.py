"""Classification types."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Diff(Enum):
    """Per-position verdict of a byte against the byte at the same index of the other blob."""

    SAME = "same"
    DIFFERENT = "different"
    NO_OTHER = "no_other"  # the other blob is shorter


@dataclass(frozen=True)
class DiffResult:
    """Classifications of both blobs from a single comparison pass.

    Attributes:
        diffs_a: One classification per byte of the first blob
        diffs_b: One classification per byte of the second blob
    """

    diffs_a: Tuple[Diff, ...]
    diffs_b: Tuple[Diff, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "diffs_a", tuple(self.diffs_a))
        object.__setattr__(self, "diffs_b", tuple(self.diffs_b))

    @property
    def overlap(self) -> int:
        """Number of indices present in both blobs."""
        return min(len(self.diffs_a), len(self.diffs_b))

    @property
    def span(self) -> int:
        """Number of indices present in at least one blob."""
        return max(len(self.diffs_a), len(self.diffs_b))

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        return (
            f"{class_name} (\n"
            f"   a: {len(self.diffs_a)} bytes\n"
            f"   b: {len(self.diffs_b)} bytes\n"
            f"   overlap: {self.overlap}\n"
            f")"
        )


__all__ = ["Diff", "DiffResult"]
