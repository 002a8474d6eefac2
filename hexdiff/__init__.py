"""Side-by-side hex diff of two byte blobs."""

from .algorithms import compare

__all__ = ["compare"]
