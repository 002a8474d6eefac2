"""Evaluation module for the project."""

from .evaluation import summarize, difference_table

__all__ = [
    "summarize",
    "difference_table",
    "metrics",
]
