"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

Deleter = Callable[[Any], None]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list whose front is its first element."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Put ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Put ``content`` at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def last(self) -> Node | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def pop_front(self, delete: Deleter | None = None) -> Any:
        """Remove the front node and return its content.

        ``delete``, when given, is called on the content first. Raises
        IndexError when the list is empty.
        """
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter | None = None) -> None:
        """Remove every node, calling ``delete`` on each content in order."""
        while self.head is not None:
            self.pop_front(delete)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content, front to back."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Deleter | None = None
    ) -> LinkedList:
        """A new list of ``func(content)`` for each content.

        If ``func`` raises, the contents mapped so far are passed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result