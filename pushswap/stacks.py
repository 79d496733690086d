"""The two stacks of the puzzle and the operations that move items between them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass
class Item:
    """A number on a stack together with its rank among all the numbers."""

    value: int
    rank: int = 0


def _print_operation(name: str) -> None:
    sys.stdout.write(name + "\n")


class Stacks:
    """Stacks ``a`` and ``b``; the top of each stack is its first element.

    Every operation that changes a stack reports its name through ``emit``.
    An operation with nothing to act on does nothing and reports nothing.
    """

    def __init__(
        self,
        items: Iterable[Item],
        emit: Callable[[str], None] | None = None,
    ) -> None:
        self.a: deque[Item] = deque(items)
        self.b: deque[Item] = deque()
        self._emit = emit if emit is not None else _print_operation

    def sa(self) -> None:
        """Swap the two items at the top of ``a``."""
        if len(self.a) < 2:
            return
        first = self.a.popleft()
        second = self.a.popleft()
        self.a.appendleft(first)
        self.a.appendleft(second)
        self._emit("sa")

    def ra(self) -> None:
        """Move the top item of ``a`` to its bottom."""
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        self._emit("ra")

    def rra(self) -> None:
        """Move the bottom item of ``a`` to its top."""
        if len(self.a) < 2:
            return
        self.a.rotate(1)
        self._emit("rra")

    def pa(self) -> None:
        """Move the top item of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def pb(self) -> None:
        """Move the top item of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def ranks_a(self) -> list[int]:
        """Ranks of the items in ``a``, from top to bottom."""
        return [item.rank for item in self.a]