"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, List, Optional, TextIO


@dataclass
class Node:
    """One element of a stack: its value and its rank among all values."""

    value: int
    index: int = 0


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, with the top of each at the left end.

    Every move that changes something is appended to ``moves`` and, when a
    ``stream`` is given, written to it on a line of its own.
    """

    a: Deque[Node] = field(default_factory=deque)
    b: Deque[Node] = field(default_factory=deque)
    stream: Optional[TextIO] = None
    moves: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.a = deque(self.a)
        self.b = deque(self.b)

    def _emit(self, name: str) -> None:
        self.moves.append(name)
        if self.stream is not None:
            self.stream.write(f"{name}\n")

    @staticmethod
    def _swap(stack: Deque[Node]) -> bool:
        if len(stack) < 2:
            return False
        # Only the values change places; each node keeps its rank.
        stack[0].value, stack[1].value = stack[1].value, stack[0].value
        return True

    @staticmethod
    def _push(source: Deque[Node], target: Deque[Node]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    @staticmethod
    def _rotate(stack: Deque[Node], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    def sa(self) -> None:
        """Swap the two top values of ``a``."""
        if self._swap(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the two top values of ``b``."""
        if self._swap(self.b):
            self._emit("sb")

    def ss(self) -> None:
        """Do ``sa`` and ``sb``, then announce ``ss``."""
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
        """Move the top of ``a`` to its bottom."""
        if self._rotate(self.a, -1):
            self._emit("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        if self._rotate(self.b, -1):
            self._emit("rb")

    def rr(self) -> None:
        """Do ``ra`` and ``rb``, then announce ``rr``."""
        self.ra()
        self.rb()
        self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        if self._rotate(self.a, 1):
            self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        if self._rotate(self.b, 1):
            self._emit("rrb")

    def rrr(self) -> None:
        """Do ``rra`` and ``rrb``, then announce ``rrr``."""
        self.rra()
        self.rrb()
        self._emit("rrr")


def _nodes(values: Iterable[int]) -> List[Node]:
    return [Node(value, rank) for rank, value in enumerate(values)]