"""A FIFO queue backed by a growable array with a moving front index."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import suppress
from typing import Any


class ArrayQueue:
    """First-in first-out queue stored in a list; the front moves forward on dequeue."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._front = 0

    def enqueue(self, data: Any) -> None:
        """Add data at the rear."""
        self._items.append(data)

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if not len(self):
            raise IndexError("peek from empty queue")
        return self._items[self._front]

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        value = self.peek()
        self._items[self._front] = None
        self._front += 1
        if self._front * 2 >= len(self._items):
            del self._items[: self._front]
            self._front = 0
        return value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items[self._front :])

    def __len__(self) -> int:
        return len(self._items) - self._front

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self)!r})"


def _display(queue: ArrayQueue) -> None:
    print()
    print("Queue contents:")
    if not len(queue):
        print("The queue is empty.")
        return
    for data in queue:
        print(data)


def main(argv: list[str] | None = None) -> int:
    """Enqueue five letters, peek, and dequeue past the end."""
    queue = ArrayQueue()
    for data in "ABCDE":
        queue.enqueue(data)
    _display(queue)
    print()
    print(f"peek: {queue.peek()}")
    for _ in range(3):
        queue.dequeue()
    _display(queue)
    for _ in range(3):
        with suppress(IndexError):
            queue.dequeue()
    _display(queue)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())