"""A binary min-heap laid out in a 1-based array."""

from __future__ import annotations


class ArrayMinHeap:
    """Min-heap of integers holding at most ``capacity`` keys."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._slots: list[int] = [0]

    def insert(self, key: int) -> None:
        """Add key and swap it upward while its parent is larger."""
        if len(self) >= self._capacity:
            raise OverflowError("heap is full")
        slots = self._slots
        slots.append(key)
        index = len(slots) - 1
        while index != 1 and slots[index // 2] > slots[index]:
            slots[index // 2], slots[index] = slots[index], slots[index // 2]
            index //= 2

    def delete(self) -> int:
        """Remove and return the smallest key."""
        if not len(self):
            raise IndexError("delete from empty heap")
        slots = self._slots
        root = slots[1]
        last = slots.pop()
        if len(slots) > 1:
            slots[1] = last
            self._sift_down(1)
        return root

    def _sift_down(self, index: int) -> None:
        slots = self._slots
        size = len(slots) - 1
        while True:
            left = index * 2
            if left > size:
                return
            child = left
            if left + 1 <= size and slots[left + 1] < slots[left]:
                child = left + 1
            if slots[index] <= slots[child]:
                return
            slots[index], slots[child] = slots[child], slots[index]
            index = child

    def items(self) -> list[int]:
        """Return the keys in array order, root first."""
        return self._slots[1:]

    def __len__(self) -> int:
        return len(self._slots) - 1

    def __repr__(self) -> str:
        return f"ArrayMinHeap({self.items()!r})"