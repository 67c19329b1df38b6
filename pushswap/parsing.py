"""Reading the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

SEPARATORS = frozenset(",; \f\n\r\t\v")
INT_MIN = -2147483648
INT_MAX = 2147483647


class ParseError(ValueError):
    """An argument is not a valid list of numbers."""


def detect_separator(text: str) -> Optional[str]:
    """Return the one separator used in ``text``, or None if there is none.

    Raises ParseError when two different separators are mixed or when a
    character is neither a separator, a digit nor a sign.
    """
    separator: Optional[str] = None
    for char in text:
        if char in SEPARATORS:
            if separator is not None and separator != char:
                raise ParseError(f"mixed separators {separator!r} and {char!r}")
            separator = char
        elif not (char in "0123456789" or char in "+-"):
            raise ParseError(f"unexpected character {char!r}")
    return separator


def parse_number(text: str) -> int:
    """Read an optional sign and the digits after it; stop at anything else."""
    negative = False
    rest = text
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for char in rest:
        if not char.isascii() or not char.isdigit():
            break
        value = value * 10 + int(char)
    return -value if negative else value


def split_argument(text: str, separator: Optional[str]) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces.

    With no separator the whole text is one piece, unless it is empty.
    """
    if separator is None:
        return [text] if text else []
    return [piece for piece in text.split(separator) if piece]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the arguments into the list of numbers they hold, in order.

    Raises ParseError for malformed arguments and for numbers that do not
    fit in a 32-bit signed integer.
    """
    numbers: list[int] = []
    for arg in args:
        for piece in split_argument(arg, detect_separator(arg)):
            number = parse_number(piece)
            if not INT_MIN <= number <= INT_MAX:
                raise ParseError(f"{piece} is out of range")
            numbers.append(number)
    return numbers