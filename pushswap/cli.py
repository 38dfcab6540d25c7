"""Command line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .args import ArgumentError, parse_args
from .sorter import solve


def run(args: Sequence[str]) -> list[str]:
    """Validate the arguments and return the operations that sort them."""
    if not args:
        return []
    numbers, _ = parse_args(args)
    return solve(numbers)


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print "Error" to stderr on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        moves = run(args)
    except ArgumentError:
        sys.stderr.write("Error")
        sys.stderr.flush()
        return 0
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())