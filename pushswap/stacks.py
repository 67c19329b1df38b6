"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import Optional

Output = Optional[Callable[[str], object]]


class Stacks:
    """Stack ``a`` holding the numbers and an initially empty stack ``b``.

    The top of each stack is its first element.  Every move that changes
    something reports its name: it is appended to :attr:`moves` and passed
    to ``output`` when one is given.  The combined moves ``ss``, ``rr`` and
    ``rrr`` report the single moves they are made of, then their own name.
    """

    def __init__(self, values: Iterable[int] = (), output: Output = None) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.moves: list[str] = []
        self._output = output

    def _emit(self, name: str) -> None:
        self.moves.append(name)
        if self._output is not None:
            self._output(name)

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    @staticmethod
    def _rotate(stack: deque[int], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if self._swap(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        if self._swap(self.b):
            self._emit("sb")

    def ss(self) -> None:
        """Do ``sa`` and ``sb``."""
        self.sa()
        self.sb()
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self._push(self.b, self.a):
            self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self._push(self.a, self.b):
            self._emit("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: the top element goes to the bottom."""
        if self._rotate(self.a, -1):
            self._emit("ra")

    def rb(self) -> None:
        """Rotate ``b`` up: the top element goes to the bottom."""
        if self._rotate(self.b, -1):
            self._emit("rb")

    def rr(self) -> None:
        """Do ``ra`` and ``rb``."""
        self.ra()
        self.rb()
        self._emit("rr")

    def rra(self) -> None:
        """Rotate ``a`` down: the bottom element goes to the top."""
        if self._rotate(self.a, 1):
            self._emit("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: the bottom element goes to the top."""
        if self._rotate(self.b, 1):
            self._emit("rrb")

    def rrr(self) -> None:
        """Do ``rra`` and ``rrb``."""
        self.rra()
        self.rrb()
        self._emit("rrr")

    def state(self) -> str:
        """Return a readable picture of both stacks and their sizes."""

        def line(label: str, stack: deque[int]) -> str:
            items = "".join(f"{value} " for value in stack)
            return f"{label} : {items}// Size = {len(stack)}\n"

        return (
            "---=== STACK STATE ===---\n"
            + line("A", self.a)
            + line("B", self.b)
            + "---------------------------\n"
        )