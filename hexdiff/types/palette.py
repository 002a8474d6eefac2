"""
This module defines the style palette used to draw classified cells: one HTML
color and one ANSI SGR code per classification variant, keyed by the variant's
value so the palette can be stored as plain YAML.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from .diff import Diff

DIFF_KEYS: Tuple[str, ...] = tuple(variant.value for variant in Diff)


def _validate_keys(
    data: Mapping[str, object], expected: Sequence[str], context: str
) -> None:
    missing = [k for k in expected if k not in data]
    if missing:
        raise ValueError(f"{context} missing keys: {missing}")
    unexpected = [k for k in data if k not in expected]
    if unexpected:
        raise ValueError(f"{context} has unexpected keys: {unexpected}")


@dataclass(frozen=True)
class DiffPalette:
    """Per-classification cell styles; the style tables are read-only."""

    colors: Mapping[str, str]
    ansi: Mapping[str, str]

    def __post_init__(self) -> None:
        _validate_keys(self.colors, DIFF_KEYS, "palette colors")
        _validate_keys(self.ansi, DIFF_KEYS, "palette ansi codes")
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))
        object.__setattr__(self, "ansi", MappingProxyType(dict(self.ansi)))

    def __hash__(self) -> int:
        return hash(
            (tuple(sorted(self.colors.items())), tuple(sorted(self.ansi.items())))
        )

    def color(self, diff: Diff) -> str:
        """HTML background color for a classification."""
        return self.colors[diff.value]

    def ansi_code(self, diff: Diff) -> str:
        """ANSI SGR parameters for a classification."""
        return self.ansi[diff.value]


DEFAULT_PALETTE = DiffPalette(
    colors={
        Diff.SAME.value: "white",
        Diff.DIFFERENT.value: "red",
        Diff.NO_OTHER.value: "gray",
    },
    ansi={
        Diff.SAME.value: "0",
        Diff.DIFFERENT.value: "97;41",
        Diff.NO_OTHER.value: "30;47",
    },
)


__all__ = ["DiffPalette", "DEFAULT_PALETTE", "DIFF_KEYS"]
