"""Shared command-line inputs: two sides, each a file or random test data."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .constants import PALETTE_YAML, RANDOM_BLOB_SIZE

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from hexdiff.session import DiffSession  # pylint: disable=C0413
from hexdiff.types import DEFAULT_PALETTE, DiffPalette  # pylint: disable=C0413
from hexdiff.utils import load_palette, read_blob  # pylint: disable=C0413


def add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Register --left/--right/--size/--seed/--palette on a parser."""
    parser.add_argument(
        "-l",
        "--left",
        type=Path,
        default=None,
        help="File for the left side (default: random test data).",
    )
    parser.add_argument(
        "-r",
        "--right",
        type=Path,
        default=None,
        help="File for the right side (default: random test data).",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=RANDOM_BLOB_SIZE,
        help=f"Size of random test data in bytes (default: {RANDOM_BLOB_SIZE}).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random test data; the right side uses seed + 1.",
    )
    parser.add_argument(
        "--palette",
        type=Path,
        default=None,
        help=f"YAML palette file (default: {PALETTE_YAML} if it exists).",
    )


def build_session(args: argparse.Namespace) -> DiffSession:
    """Load both sides named by the parsed arguments."""
    session = DiffSession()
    for offset, (side, path) in enumerate((("left", args.left), ("right", args.right))):
        if path is not None:
            session.load(side, read_blob(path))
        else:
            seed = None if args.seed is None else args.seed + offset
            session.randomize(side, size=args.size, seed=seed)
    return session


def resolve_palette(args: argparse.Namespace) -> DiffPalette:
    """Palette from --palette, else the project palette file, else the default."""
    if args.palette is not None:
        if not args.palette.exists():
            raise FileNotFoundError(f"Palette file not found: {args.palette}")
        return load_palette(args.palette)
    if PALETTE_YAML.exists():
        return load_palette(PALETTE_YAML)
    return DEFAULT_PALETTE


__all__ = ["add_input_arguments", "build_session", "resolve_palette"]
