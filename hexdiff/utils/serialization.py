"""Serialization utilities for palettes (load and save) and diff results."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml

from hexdiff.types import DiffPalette, DiffResult


def palette_to_dict(palette: DiffPalette) -> Dict[str, Any]:
    """
    Convert a DiffPalette dataclass into a plain dictionary suitable for YAML.
    """
    return {"colors": dict(palette.colors), "ansi": dict(palette.ansi)}


def load_palette(yaml_path: Path) -> DiffPalette:
    """Load a DiffPalette from a YAML file."""
    with yaml_path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}

    palette_dict = payload.get("palette", payload)
    # YAML reads bare SGR codes like 0 as integers
    return DiffPalette(
        colors={key: str(val) for key, val in palette_dict.get("colors", {}).items()},
        ansi={key: str(val) for key, val in palette_dict.get("ansi", {}).items()},
    )


def save_palette(palette: DiffPalette, yaml_path: Path) -> None:
    """Write a DiffPalette to a YAML file, creating parent folders."""
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with yaml_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump({"palette": palette_to_dict(palette)}, handle, sort_keys=False)


def result_to_dict(result: DiffResult) -> Dict[str, List[str]]:
    """Convert a DiffResult into lists of classification values."""
    return {
        "diffs_a": [diff.value for diff in result.diffs_a],
        "diffs_b": [diff.value for diff in result.diffs_b],
    }


__all__ = ["palette_to_dict", "load_palette", "save_palette", "result_to_dict"]
