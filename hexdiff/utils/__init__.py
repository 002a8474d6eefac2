"""Utility functions for the project."""

from .loader import read_blob, random_blob
from .serialization import (
    palette_to_dict,
    load_palette,
    save_palette,
    result_to_dict,
)
from .render import (
    address_labels,
    hex_cell,
    ascii_cell,
    chunk_rows,
    classification_grid,
    render_terminal,
    render_html,
)

__all__ = [
    "read_blob",
    "random_blob",
    "palette_to_dict",
    "load_palette",
    "save_palette",
    "result_to_dict",
    "address_labels",
    "hex_cell",
    "ascii_cell",
    "chunk_rows",
    "classification_grid",
    "render_terminal",
    "render_html",
]
