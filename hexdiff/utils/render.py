"""Hex/ASCII grid rendering of classified byte sequences (terminal and HTML)."""

from __future__ import annotations

import html
from typing import List, Optional, Sequence, Tuple

import numpy as np

from hexdiff.types import DEFAULT_PALETTE, Diff, DiffPalette

ROW_WIDTH = 16
ANSI_RESET = "\x1b[0m"

Cell = Tuple[int, Diff]
Panel = Tuple[str, Sequence[int], Sequence[Diff]]
EMPTY_CODE = -1
DIFF_CODES = {variant: code for code, variant in enumerate(Diff)}


def _check_row_width(row_width: int) -> None:
    if row_width <= 0:
        raise ValueError(f"Row width must be positive, got {row_width}.")


def address_labels(length: int, row_width: int = ROW_WIDTH) -> List[str]:
    """Return one offset label per row needed to hold `length` bytes.

    Labels stop at the data extent: 17 bytes give two rows, 0 bytes give none.
    """
    _check_row_width(row_width)
    rows = -(-length // row_width)
    return [f"{row * row_width:08X}" for row in range(rows)]


def hex_cell(byte: int) -> str:
    """Two-digit uppercase hex text for a byte."""
    return f"{byte:02X}"


def ascii_cell(byte: int) -> str:
    """Printable ASCII character for a byte, '.' otherwise."""
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def chunk_rows(
    data: Sequence[int], diffs: Sequence[Diff], row_width: int = ROW_WIDTH
) -> List[List[Cell]]:
    """Pair each byte with its classification and split the pairs into rows.

    Pairing stops at the shorter input, so bytes without a classification
    are not drawn.
    """
    _check_row_width(row_width)
    cells = list(zip(data, diffs))
    return [cells[i : i + row_width] for i in range(0, len(cells), row_width)]


# ============================================================================
# Classification matrix
# ============================================================================


def classification_grid(
    diffs: Sequence[Diff], row_width: int = ROW_WIDTH, rows: Optional[int] = None
) -> np.ndarray:
    """Lay classifications out as a (rows, row_width) integer matrix.

    Cells hold the variant's position in `Diff`; cells past the end hold
    EMPTY_CODE. `rows` defaults to the number of rows the diffs need.
    """
    _check_row_width(row_width)
    needed = len(address_labels(len(diffs), row_width))
    rows = needed if rows is None else rows
    if rows < needed:
        raise ValueError(f"{len(diffs)} classifications do not fit in {rows} rows.")

    grid = np.full(rows * row_width, EMPTY_CODE, dtype=int)
    grid[: len(diffs)] = [DIFF_CODES[diff] for diff in diffs]
    return grid.reshape(rows, row_width)


# ============================================================================
# Terminal
# ============================================================================


def _styled(text: str, code: str, color: bool) -> str:
    return f"\x1b[{code}m{text}{ANSI_RESET}" if color else text


def _terminal_side(
    row: List[Cell], palette: DiffPalette, row_width: int, color: bool
) -> str:
    """Hex block then ASCII block for one row of one side, padded to row_width."""
    padding = row_width - len(row)
    hex_part = "".join(
        f" {_styled(hex_cell(byte), palette.ansi_code(diff), color)}"
        for byte, diff in row
    )
    ascii_part = "".join(
        _styled(ascii_cell(byte), palette.ansi_code(diff), color)
        for byte, diff in row
    )
    return f"{hex_part}{'   ' * padding}  {ascii_part}{' ' * padding}"


def render_terminal(
    left: Sequence[int],
    diffs_left: Sequence[Diff],
    right: Sequence[int],
    diffs_right: Sequence[Diff],
    palette: DiffPalette = DEFAULT_PALETTE,
    row_width: int = ROW_WIDTH,
    color: bool = True,
) -> str:
    """Render both sides next to each other, one line per row of bytes.

    Each line is ``ADDRESS:  <left hex> <left ascii>  |  <right hex> <right ascii>``.
    The shorter side is padded with blanks so the columns stay aligned.
    """
    rows_left = chunk_rows(left, diffs_left, row_width)
    rows_right = chunk_rows(right, diffs_right, row_width)
    num_rows = max(len(rows_left), len(rows_right))

    lines = []
    for row_index, label in enumerate(address_labels(num_rows * row_width, row_width)):
        row_left = rows_left[row_index] if row_index < len(rows_left) else []
        row_right = rows_right[row_index] if row_index < len(rows_right) else []
        lines.append(
            f"{label}: "
            f"{_terminal_side(row_left, palette, row_width, color)}  | "
            f"{_terminal_side(row_right, palette, row_width, color)}".rstrip()
        )
    return "\n".join(lines)


# ============================================================================
# HTML
# ============================================================================

_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: monospace; }}
.hex-container {{ display: flex; gap: 2em; }}
.grid-container {{ display: flex; gap: 1em; }}
.address-column {{ display: grid; grid-auto-rows: 1.4em; }}
.hex-grid {{ display: grid; grid-template-columns: repeat({row_width}, 2em); grid-auto-rows: 1.4em; }}
.ascii-grid {{ display: grid; grid-template-columns: repeat({row_width}, 1em); grid-auto-rows: 1.4em; }}
.hex-cell, .ascii-cell, .address-cell {{ text-align: center; }}
</style>
</head>
<body>
<h1>{title}</h1>
<div class="hex-container">
{panels}
</div>
</body>
</html>
"""


def _html_cells(
    data: Sequence[int], diffs: Sequence[Diff], palette: DiffPalette, ascii: bool
) -> str:
    css_class = "ascii-cell" if ascii else "hex-cell"
    render_cell = ascii_cell if ascii else hex_cell
    return "".join(
        f'<div class="{css_class}" style="background-color: {palette.color(diff)}">'
        f"{html.escape(render_cell(byte))}</div>"
        for byte, diff in zip(data, diffs)
    )


def _html_panel(
    panel: Panel, labels: List[str], palette: DiffPalette
) -> str:
    name, data, diffs = panel
    address_cells = "".join(
        f'<div class="address-cell" style="background-color: gray">{label}</div>'
        for label in labels
    )
    return (
        "<div>\n"
        f'<span class="file-name">{html.escape(name)}</span>\n'
        '<div class="grid-container">\n'
        f'<div class="address-column">{address_cells}</div>\n'
        f'<div class="hex-grid">{_html_cells(data, diffs, palette, ascii=False)}</div>\n'
        f'<div class="ascii-grid">{_html_cells(data, diffs, palette, ascii=True)}</div>\n'
        "</div>\n"
        "</div>"
    )


def render_html(
    panels: Sequence[Panel],
    palette: DiffPalette = DEFAULT_PALETTE,
    title: str = "hex diff",
    row_width: int = ROW_WIDTH,
) -> str:
    """Render a standalone HTML page with one hex/ASCII grid per panel.

    A panel is ``(name, data, diffs)``. Every panel gets the same address
    column, sized for the longest data, so the grids line up.
    """
    longest = max((len(data) for _, data, _ in panels), default=0)
    labels = address_labels(longest, row_width)
    return _HTML_TEMPLATE.format(
        title=html.escape(title),
        row_width=row_width,
        panels="\n".join(_html_panel(panel, labels, palette) for panel in panels),
    )


__all__ = [
    "ROW_WIDTH",
    "address_labels",
    "hex_cell",
    "ascii_cell",
    "chunk_rows",
    "classification_grid",
    "render_terminal",
    "render_html",
    "DIFF_CODES",
    "EMPTY_CODE",
]
