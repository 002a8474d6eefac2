#!/usr/bin/env python3
"""Plot the classification grids of two blobs side by side."""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

from .constants import (
    DIFF_PLOT_COLORS,
    FIGURES_FOLDER,
    PLOT_DPI,
    PLOT_TITLE_FONTSIZE,
    ROW_WIDTH,
)
from .inputs import add_input_arguments, build_session

from hexdiff.session import SIDES, DiffSession
from hexdiff.types import Diff
from hexdiff.utils import address_labels, classification_grid
from hexdiff.utils.render import DIFF_CODES, EMPTY_CODE


def _colormap() -> tuple[ListedColormap, BoundaryNorm]:
    """Colormap indexed by EMPTY_CODE followed by each Diff code."""
    ordered = [DIFF_PLOT_COLORS["empty"]] + [
        DIFF_PLOT_COLORS[variant.value]
        for variant in sorted(Diff, key=DIFF_CODES.__getitem__)
    ]
    bounds = [code - 0.5 for code in range(EMPTY_CODE, len(Diff) + 1)]
    cmap = ListedColormap(ordered)
    return cmap, BoundaryNorm(bounds, cmap.N)


def plot_session(session: DiffSession, output_path: Path) -> None:
    """Draw both sides' classification grids with a shared address axis."""
    longest = max(len(session.data(side)) for side in SIDES)
    labels = address_labels(longest, ROW_WIDTH)
    rows = max(len(labels), 1)
    cmap, norm = _colormap()

    fig, axes = plt.subplots(1, 2, figsize=(12, max(4, rows * 0.2)), sharey=True)
    for ax, side in zip(axes, SIDES):
        grid = classification_grid(session.diffs(side), ROW_WIDTH, rows=rows)
        ax.imshow(grid, cmap=cmap, norm=norm, aspect="auto", interpolation="nearest")
        ax.set_title(
            f"{side}: {session.name(side)}", fontsize=PLOT_TITLE_FONTSIZE
        )
        ax.set_xticks(range(ROW_WIDTH))
        ax.set_xticklabels([f"{col:X}" for col in range(ROW_WIDTH)])

    step = max(1, len(labels) // 20)
    axes[0].set_yticks(range(0, len(labels), step))
    axes[0].set_yticklabels(labels[::step])

    legend = [
        Patch(facecolor=DIFF_PLOT_COLORS[variant.value], edgecolor="black", label=variant.value)
        for variant in Diff
    ]
    fig.legend(handles=legend, loc="lower center", ncol=len(legend))
    fig.tight_layout(rect=(0, 0.05, 1, 1))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=PLOT_DPI)
    plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Plot the classification grids of two blobs."
    )
    add_input_arguments(parser)
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=FIGURES_FOLDER / "hexdiff.png",
        help="Destination PNG file.",
    )
    args = parser.parse_args()

    session = build_session(args)
    plot_session(session, args.output)
    print(f"Saved classification grids to {args.output}")


if __name__ == "__main__":
    main()
