"""A singly linked list of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: a value, an index and the following node."""

    value: Any
    index: int = 0
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with appending at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> Node:
        """Add value at the end of the list and return its node."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def prepend(self, value: Any) -> Node:
        """Add value at the front of the list and return its node."""
        node = Node(value, next=self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def last(self) -> Node:
        """Return the last node; raise IndexError when the list is empty."""
        if self._tail is None:
            raise IndexError("last() of an empty list")
        return self._tail

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding func applied to every value, in order."""
        return LinkedList(func(value) for value in self)