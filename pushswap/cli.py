"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import push_swap


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; on bad input print Error to stderr."""
    args = sys.argv[1:] if argv is None else argv
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for operation in push_swap(numbers):
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())