"""Command-line entry point for re-tiling sprite sheets."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .core import ChopSettings
from .core.errors import DecodeError, EncodeError, GeometryError, ValidationError
from .core.pipeline import chop_sheet
from .utils import validators

PROG = "frame_chopper"
POSITIONAL_COUNT = 6
FLAGS = {"--dry-run", "--ignore-save-errors", "-v", "--verbose"}
USAGE = (
    f"{PROG} file_with_frames.png horizontal_frame_number vertical_frame_number "
    "output_file.png max_horizontal_frame_number frame_counter_step"
)
EXAMPLE = f"Example of keeping every other frame: {PROG} big.png 10 10 not_so_big.png 10 2"


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Cut a sprite sheet into frames and pack every Nth frame into a new sheet.",
    )
    parser.add_argument("input", type=Path, help="Sprite sheet to read")
    parser.add_argument("columns", help="Number of frames per row in the input sheet")
    parser.add_argument("rows", help="Number of frame rows in the input sheet")
    parser.add_argument("output", type=Path, help="Destination sprite sheet path (PNG)")
    parser.add_argument("max_columns", help="Maximum number of frames per row in the output sheet")
    parser.add_argument("step", help="Keep every STEP-th frame, starting with the first")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Load the input and show the output layout without writing anything",
    )
    parser.add_argument(
        "--ignore-save-errors",
        action="store_true",
        help="Log a failed save instead of exiting with an error",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def print_usage() -> None:
    print(f"{PROG} {__version__}")
    print(f"Usage: {USAGE}")
    print(EXAMPLE)


def settings_from_args(args: argparse.Namespace) -> ChopSettings:
    """Turn parsed arguments into validated settings."""

    return ChopSettings(
        input_path=args.input,
        output_path=args.output,
        columns=validators.parse_positive_int(args.columns, "Horizontal frame number"),
        rows=validators.parse_positive_int(args.rows, "Vertical frame number"),
        max_output_columns=validators.parse_positive_int(args.max_columns, "Max horizontal frame number"),
        frame_step=validators.parse_positive_int(args.step, "Frame counter step"),
        strict_save=not args.ignore_save_errors,
        dry_run=args.dry_run,
    )


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()
    if "-h" in argv or "--help" in argv:
        parser.parse_args(["--help"])

    options = [token for token in argv if token in FLAGS]
    positionals = [token for token in argv if token not in FLAGS]
    unknown_options = [token for token in positionals if token.startswith("--")]
    if unknown_options or len(positionals) != POSITIONAL_COUNT:
        print_usage()
        return 0

    # Everything after "--" is positional, so paths like "-out.png" are kept verbatim.
    args = parser.parse_args(options + ["--"] + positionals)
    configure_logging(args.verbose)

    try:
        chop_sheet(settings_from_args(args))
    except (DecodeError, GeometryError, ValidationError, EncodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
