"""Command that prints the moves sorting the numbers given as arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Optional

from pushswap.indexing import has_duplicates, is_sorted, normalize
from pushswap.parsing import ParseError, parse_arguments
from pushswap.sorting import sort_stacks
from pushswap.stacks import Stacks


def _plan_moves(numbers: Sequence[int]) -> list[str]:
    if not has_duplicates(numbers) and not is_sorted(numbers):
        stacks = Stacks(normalize(numbers))
        sort_stacks(stacks)
        return stacks.moves
    if not is_sorted(numbers):
        raise ParseError("duplicate numbers")
    return []


def solve(args: Iterable[str]) -> list[str]:
    """Return the moves that sort the numbers held in ``args``.

    An input that is already in order needs no moves.  Raises ParseError
    for malformed arguments and for unsorted input with repeated numbers.
    """
    return _plan_moves(parse_arguments(args))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one move per line, or ``Error`` when the input is invalid."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_arguments(args)
    except ParseError:
        sys.stdout.write("Error\n")
        return 1
    try:
        moves = _plan_moves(numbers)
    except ParseError:
        sys.stdout.write("Error\n")
        return 0
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())