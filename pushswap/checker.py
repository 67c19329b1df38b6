"""Command that checks whether a list of moves sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Optional

from pushswap.indexing import has_duplicates, is_sorted
from pushswap.parsing import ParseError, parse_arguments
from pushswap.stacks import Stacks

_COMMANDS: dict[str, Callable[[Stacks], None]] = {
    "sa": Stacks.sa,
    "sb": Stacks.sb,
    "ss": Stacks.ss,
    "pa": Stacks.pa,
    "pb": Stacks.pb,
    "ra": Stacks.ra,
    "rb": Stacks.rb,
    "rr": Stacks.rr,
    "rra": Stacks.rra,
    "rrb": Stacks.rrb,
    "rrr": Stacks.rrr,
}


def apply_command(stacks: Stacks, line: str) -> None:
    """Apply one move given as a line ending in a newline.

    Raises ValueError when the line is not exactly a known move followed
    by a newline.
    """
    if not line.endswith("\n"):
        raise ValueError(f"invalid command {line!r}")
    command = _COMMANDS.get(line[:-1])
    if command is None:
        raise ValueError(f"invalid command {line!r}")
    command(stacks)


def check(
    args: Iterable[str],
    lines: Iterable[str],
    output: Optional[Callable[[str], object]] = None,
) -> Optional[str]:
    """Run the moves in ``lines`` on the numbers in ``args``.

    Returns ``"OK"`` when stack ``a`` ends sorted and holds every number,
    ``"KO"`` otherwise, and ``"Error"`` for an unknown move or unsorted
    input with repeated numbers.  Input already in order gives None and
    no moves are read.  Every move applied and the verdict are passed to
    ``output``.  Raises ParseError for malformed arguments.
    """
    args = list(args)
    if not args:
        return None
    numbers = parse_arguments(args)

    def emit(text: str) -> None:
        if output is not None:
            output(text)

    if has_duplicates(numbers) or is_sorted(numbers):
        if is_sorted(numbers):
            return None
        emit("Error")
        return "Error"

    stacks = Stacks(numbers, output)
    size = len(stacks.a)
    verdict: str
    for line in lines:
        try:
            apply_command(stacks, line)
        except ValueError:
            verdict = "Error"
            break
    else:
        in_order = is_sorted(list(stacks.a))
        verdict = "OK" if in_order and len(stacks.a) == size else "KO"
    emit(verdict)
    return verdict


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read moves from standard input and print OK, KO or Error."""
    args = sys.argv[1:] if argv is None else list(argv)

    def write(text: str) -> None:
        sys.stdout.write(f"{text}\n")

    try:
        check(args, sys.stdin, write)
    except ParseError:
        write("Error")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())