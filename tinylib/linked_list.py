"""A doubly linked list whose nodes can be held and removed directly."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One element of a :class:`LinkedList`."""

    data: Any
    prev: Optional[Node] = field(default=None, repr=False)
    next: Optional[Node] = field(default=None, repr=False)
    _owner: Optional[LinkedList] = field(default=None, init=False, repr=False)


class LinkedList:
    """A doubly linked list of arbitrary values."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.append(item)

    def _adopt(self, data: Any) -> Node:
        node = Node(data)
        node._owner = self
        self._size += 1
        return node

    def append(self, data: Any) -> Node:
        """Add ``data`` at the back and return its node."""
        node = self._adopt(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        return node

    def prepend(self, data: Any) -> Node:
        """Add ``data`` at the front and return its node."""
        node = self._adopt(data)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        return node

    def remove(self, node: Node) -> Optional[Node]:
        """Unlink ``node`` from the list.

        Returns the node before it, or the node after it when it was the
        first one (None when the list is now empty).
        """
        if node._owner is not self:
            raise ValueError("node does not belong to this list")
        if node.prev is not None:
            node.prev.next = node.next
            neighbour = node.prev
        else:
            self._head = node.next
            neighbour = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        node._owner = None
        self._size -= 1
        return neighbour

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each value front to back to ``delete`` if given."""
        node = self._head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.data)
            node.prev = node.next = None
            node._owner = None
            node = following
        self._head = self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value, front to back."""
        for data in self:
            func(data)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func`` applied to every value."""
        return LinkedList(func(data) for data in self)

    def first(self) -> Optional[Node]:
        """Return the first node, or None when empty."""
        return self._head

    def last(self) -> Optional[Node]:
        """Return the last node, or None when empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            following = node.next
            yield node.data
            node = following

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"