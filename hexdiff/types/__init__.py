"""Types for the project."""

from .diff import Diff, DiffResult
from .blob import ByteBlob
from .evaluation import DiffSummary
from .palette import DiffPalette, DEFAULT_PALETTE


__all__ = [
    "Diff",
    "DiffResult",
    "ByteBlob",
    "DiffSummary",
    "DiffPalette",
    "DEFAULT_PALETTE",
]
