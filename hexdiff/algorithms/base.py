"""Shared interfaces for byte diff algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from hexdiff.types import DiffResult


class ByteDiffer(ABC):
    """Abstract base class for algorithms classifying two byte sequences."""

    @abstractmethod
    def diff(self, a: Sequence[int], b: Sequence[int]) -> DiffResult:
        """Classify every byte of both sequences."""
        raise NotImplementedError


__all__ = ["ByteDiffer"]
