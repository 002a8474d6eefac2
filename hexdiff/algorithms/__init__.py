"""Algorithms for the project."""

from .base import ByteDiffer
from .positional import PositionalDiffer, compare


__all__ = [
    "ByteDiffer",
    "PositionalDiffer",
    "compare",
]
