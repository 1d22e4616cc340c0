"""Command line entry point."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from .fmt import format_path


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command line."""
    parser = argparse.ArgumentParser(prog="goboscript")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True
    fmt = commands.add_parser("fmt", help="Format a goboscript project.")
    fmt.add_argument(
        "-i",
        "--input",
        type=Path,
        default=None,
        help="Project directory or file, if not given, the current directory is used.",
    )
    return parser


def _run_fmt(args: argparse.Namespace) -> int:
    try:
        format_path(args.input)
    except OSError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = build_parser().parse_args(argv)
    begin = time.perf_counter()
    status = _run_fmt(args)
    elapsed = time.perf_counter() - begin
    print(f"Finished in {elapsed:.3f}s", file=sys.stderr)
    return status


if __name__ == "__main__":
    sys.exit(main())