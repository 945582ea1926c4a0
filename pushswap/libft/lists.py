"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class ListNode:
    """One link of a ``LinkedList``."""

    content: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """A singly linked list whose head is the first element."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> ListNode:
        """Put ``content`` in a new node at the head; return the node."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> ListNode:
        """Put ``content`` in a new node at the end; return the node."""
        node = ListNode(content)
        end = self.last()
        if end is None:
            self.head = node
        else:
            end.next = node
        return node

    def last(self) -> Optional[ListNode]:
        """The final node, or ``None`` for an empty list."""
        end = None
        for end in self._nodes():
            pass
        return end

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each content to ``delete`` first."""
        while self.head is not None:
            node = self.head
            self.head = node.next
            if delete is not None:
                delete(node.content)

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content, head first."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding ``func(content)`` for each content."""
        return LinkedList(func(content) for content in self)