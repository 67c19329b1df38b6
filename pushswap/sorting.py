"""Sorting stack ``a`` of normalised ranks with the puzzle's moves."""

from __future__ import annotations

from pushswap.stacks import Stacks


def _sort_three(stacks: Stacks) -> None:
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[-1]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def _sort_four_five(stacks: Stacks, median: int) -> None:
    pushed = 0
    while pushed < median:
        if stacks.a[0] < median:
            stacks.pb()
            pushed += 1
        else:
            stacks.rra()
    _sort_three(stacks)
    if median > 1:
        if stacks.b[0] < stacks.b[-1]:
            stacks.sb()
        stacks.pa()
    stacks.pa()


def sort_small(stacks: Stacks) -> None:
    """Sort a stack of at most five ranks 0..n-1."""
    size = len(stacks.a)
    if size == 2 and stacks.a[0] > stacks.a[-1]:
        stacks.ra()
    elif size == 3:
        _sort_three(stacks)
    elif size == 4:
        _sort_four_five(stacks, 1)
    elif size == 5:
        _sort_four_five(stacks, 2)


def sort_big(stacks: Stacks) -> None:
    """Sort ranks 0..n-1 with a binary radix sort, one pass per bit."""
    size = len(stacks.a)
    max_bits = (size - 1).bit_length() if size > 0 else 0
    for bit in range(max_bits):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def sort_stacks(stacks: Stacks) -> None:
    """Pick the sort that suits the size of stack ``a``."""
    if len(stacks.a) > 5:
        sort_big(stacks)
    else:
        sort_small(stacks)