"""A first-in first-out queue of linked nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class LinkedQueue:
    """FIFO queue: values join at the rear and leave from the front."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._nodes: deque[Any] = deque(items)

    def enqueue(self, value: Any) -> None:
        """Add value at the rear."""
        self._nodes.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._nodes:
            raise IndexError("dequeue from empty queue")
        return self._nodes.popleft()

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if not self._nodes:
            raise IndexError("peek from empty queue")
        return self._nodes[0]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._nodes))

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self._nodes)!r})"