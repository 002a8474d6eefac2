#!/usr/bin/env python3
"""Compare two blobs and print a colored side-by-side hex grid with a summary."""

from __future__ import annotations

import argparse

from .constants import ROW_WIDTH
from .inputs import add_input_arguments, build_session, resolve_palette

from hexdiff.evaluation import summarize
from hexdiff.session import DiffSession
from hexdiff.utils import render_terminal


def format_header(session: DiffSession) -> str:
    """Return a one-line description of both sides."""
    return (
        f"left: {session.name('left')} ({len(session.data('left'))} bytes)   "
        f"right: {session.name('right')} ({len(session.data('right'))} bytes)"
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Print a side-by-side hex diff of two blobs."
    )
    add_input_arguments(parser)
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors (classifications are not visible then).",
    )
    args = parser.parse_args()

    session = build_session(args)
    palette = resolve_palette(args)

    print(format_header(session))
    print()
    print(
        render_terminal(
            session.data("left"),
            session.diffs("left"),
            session.data("right"),
            session.diffs("right"),
            palette=palette,
            row_width=ROW_WIDTH,
            color=not args.no_color,
        )
    )

    summary = summarize(session.result)
    print("\n ======================== Summary ========================")
    print(f"same: {summary.same}")
    print(f"different: {summary.different}")
    print(f"left only: {summary.no_other_a}")
    print(f"right only: {summary.no_other_b}")
    print(f"match ratio: {summary.match_ratio:.4f}")
    if summary.identical:
        print("The blobs are identical.")
    else:
        print(f"First difference at offset 0x{summary.first_difference:08X}")


if __name__ == "__main__":
    main()
