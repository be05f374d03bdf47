"""A double-ended queue on a doubly linked list with front and rear sentinels."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import suppress
from typing import Any


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: _Node | None = None
        self.next: _Node | None = None


class Deque:
    """Double-ended queue; values sit between a front and a rear sentinel."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._front = _Node(None)
        self._rear = _Node(None)
        self._front.next = self._rear
        self._rear.prev = self._front
        self._size = 0
        for item in items:
            self.push_back(item)

    def _add_after(self, node: _Node, data: Any) -> None:
        new = _Node(data)
        new.next = node.next
        new.prev = node
        node.next.prev = new
        node.next = new
        self._size += 1

    def _remove(self, node: _Node) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.data

    def push_front(self, data: Any) -> None:
        """Insert data right after the front sentinel."""
        self._add_after(self._front, data)

    def push_back(self, data: Any) -> None:
        """Insert data right before the rear sentinel."""
        self._add_after(self._rear.prev, data)

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if not self._size:
            raise IndexError("pop from empty deque")
        return self._remove(self._front.next)

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if not self._size:
            raise IndexError("pop from empty deque")
        return self._remove(self._rear.prev)

    def last(self) -> Any:
        """Return the last value, or None when the deque is empty."""
        if not self._size:
            return None
        return self._rear.prev.data

    def clear(self) -> None:
        """Remove every value."""
        self._front.next = self._rear
        self._rear.prev = self._front
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        node = self._front.next
        while node is not self._rear:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"


def _show(nodes: Deque) -> None:
    print()
    print("Nodes:")
    for data in nodes:
        print(data)


def main(argv: list[str] | None = None) -> int:
    """Exercise both ends of a deque and print its contents along the way."""
    nodes = Deque()
    for data in "CBA":
        nodes.push_front(data)
    _show(nodes)
    for data in "EFG":
        nodes.push_back(data)
    _show(nodes)
    for _ in range(4):
        nodes.pop_front()
    _show(nodes)
    for _ in range(3):
        with suppress(IndexError):
            nodes.pop_back()
    _show(nodes)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())