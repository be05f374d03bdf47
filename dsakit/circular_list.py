"""A doubly linked circular list built around a sentinel node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class CircularList:
    """Doubly linked circular list with O(1) operations at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._sentinel = _Node(None)
        self._count = 0
        for item in items:
            self.push_back(item)

    def _link_after(self, node: _Node, value: Any) -> None:
        new = _Node(value)
        new.prev = node
        new.next = node.next
        node.next.prev = new
        node.next = new
        self._count += 1

    def _unlink(self, node: _Node) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._count -= 1
        return node.value

    def _nodes(self) -> Iterator[_Node]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node
            node = node.next

    def push_front(self, value: Any) -> None:
        """Insert value at the head."""
        self._link_after(self._sentinel, value)

    def push_back(self, value: Any) -> None:
        """Insert value at the tail."""
        self._link_after(self._sentinel.prev, value)

    def pop_front(self) -> Any:
        """Remove and return the head value."""
        if not self._count:
            raise IndexError("pop from empty list")
        return self._unlink(self._sentinel.next)

    def pop_back(self) -> Any:
        """Remove and return the tail value."""
        if not self._count:
            raise IndexError("pop from empty list")
        return self._unlink(self._sentinel.prev)

    def find(self, value: Any) -> int:
        """Return the zero-based index of the first match, or -1."""
        for index, node in enumerate(self._nodes()):
            if node.value == value:
                return index
        return -1

    def position(self, value: Any) -> int:
        """Return the one-based position of the first match."""
        index = self.find(value)
        if index < 0:
            raise ValueError(f"{value!r} is not in the list")
        return index + 1

    def clear(self) -> None:
        """Remove every value."""
        self._sentinel.next = self._sentinel.prev = self._sentinel
        self._count = 0

    def __contains__(self, value: Any) -> bool:
        return self.find(value) >= 0

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"