#!/usr/bin/env python3
"""Write a standalone HTML page showing both blobs as classified hex/ASCII grids."""

from __future__ import annotations

import argparse
from pathlib import Path

from .constants import HTML_FOLDER, ROW_WIDTH
from .inputs import add_input_arguments, build_session, resolve_palette

from hexdiff.utils import render_html


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a hex diff as HTML.")
    add_input_arguments(parser)
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=HTML_FOLDER / "hexdiff.html",
        help="Destination HTML file.",
    )
    parser.add_argument(
        "--title",
        type=str,
        default="hex diff",
        help="Page title.",
    )
    args = parser.parse_args()

    session = build_session(args)
    page = render_html(
        session.panels(),
        palette=resolve_palette(args),
        title=args.title,
        row_width=ROW_WIDTH,
    )

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(page, encoding="utf-8")
    print(f"Wrote {session.name('left')} vs {session.name('right')} to {args.output}")


if __name__ == "__main__":
    main()
