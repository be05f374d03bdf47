"""A bounded binary min-heap stored in a 1-based integer array."""

from __future__ import annotations

MAX_SIZE = 100


class MinHeap:
    """Min-heap of integers; slot 0 of the backing array is never used.

    ``capacity`` is the number of array slots, so at most ``capacity - 1``
    keys fit. Unused slots hold 0.
    """

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._slots = [0] * capacity
        self._size = 0

    def push(self, key: int) -> None:
        """Insert key, moving larger parents down into the hole."""
        if self._size + 1 >= len(self._slots):
            raise OverflowError("heap is full")
        slots = self._slots
        self._size += 1
        index = self._size
        while index != 1 and key < slots[index // 2]:
            slots[index] = slots[index // 2]
            index //= 2
        slots[index] = key

    def pop(self) -> int:
        """Remove and return the smallest key."""
        if not self._size:
            raise IndexError("pop from empty heap")
        slots = self._slots
        root = slots[1]
        slots[1] = slots[self._size]
        self._size -= 1
        parent = 1
        while True:
            child = parent * 2
            if child + 1 <= self._size and slots[child] > slots[child + 1]:
                child += 1
            if child > self._size or slots[child] > slots[parent]:
                break
            slots[parent], slots[child] = slots[child], slots[parent]
            parent = child
        slots[self._size + 1] = 0
        return root

    def slots(self, count: int | None = None) -> list[int]:
        """Return a copy of the first ``count`` raw array slots (all by default)."""
        return self._slots[:count]

    def __len__(self) -> int:
        return self._size


def _row(values: list[int]) -> str:
    return " ".join(str(value) for value in values)


def main(argv: list[str] | None = None) -> int:
    """Fill a heap with a few keys, then show its array before and after one pop."""
    heap = MinHeap()
    for key in (33, 22, 44, 11, 55):
        heap.push(key)
    print(_row(heap.slots(10)))
    print(heap.pop())
    print(_row(heap.slots(10)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())