#!/usr/bin/env python3
"""Write the per-offset difference table of two blobs to CSV."""

from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd

from .constants import REPORTS_FOLDER
from .inputs import add_input_arguments, build_session

from hexdiff.evaluation import difference_table, summarize


def _hex_or_empty(value):
    return f"{value:02X}" if value is not None else ""


def build_report(session) -> pd.DataFrame:
    """One row per differing offset: offset, left byte, right byte."""
    rows = difference_table(
        session.data("left"), session.data("right"), session.result
    )
    return pd.DataFrame(
        [
            {
                "Offset": f"{offset:08X}",
                "Left": _hex_or_empty(left),
                "Right": _hex_or_empty(right),
            }
            for offset, left, right in rows
        ],
        columns=["Offset", "Left", "Right"],
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Write the differing offsets of two blobs to CSV."
    )
    add_input_arguments(parser)
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=REPORTS_FOLDER / "differences.csv",
        help="Destination CSV file.",
    )
    args = parser.parse_args()

    session = build_session(args)
    report = build_report(session)
    summary = summarize(session.result)

    aggregate_df = pd.DataFrame(
        [
            {"Class": "same", "Count": summary.same},
            {"Class": "different", "Count": summary.different},
            {"Class": "left only", "Count": summary.no_other_a},
            {"Class": "right only", "Count": summary.no_other_b},
        ]
    )
    print("\nAggregate counts:")
    print(aggregate_df.to_string(index=False))

    args.output.parent.mkdir(parents=True, exist_ok=True)
    report.to_csv(args.output, index=False)
    print(f"\nWrote {len(report)} differing offsets to {args.output}")


if __name__ == "__main__":
    main()
