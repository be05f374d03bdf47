"""A fixed-size array whose slots shift on insertion and removal."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

SIZE = 5


class FixedArray:
    """An array with a fixed number of slots; empty slots hold ``None``."""

    def __init__(self, size: int = SIZE) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._slots: list[Any] = [None] * size

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise IndexError(
                f"index {index} out of range for array of size {len(self._slots)}"
            )

    def push(self, index: int, content: Any) -> None:
        """Insert content at index, shifting later slots right.

        The content of the last slot falls off the end.
        """
        self._check(index)
        self._slots.insert(index, content)
        self._slots.pop()

    def replace(self, index: int, content: Any) -> None:
        """Overwrite the content stored at index."""
        self._check(index)
        self._slots[index] = content

    def pop(self, index: int) -> Any:
        """Remove and return the content at index, shifting later slots left.

        The freed last slot becomes ``None``.
        """
        self._check(index)
        content = self._slots.pop(index)
        self._slots.append(None)
        return content

    def __getitem__(self, index: int) -> Any:
        self._check(index)
        return self._slots[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._slots))

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"FixedArray({self._slots!r})"