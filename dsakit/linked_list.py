"""A singly linked list with node-relative insertion and removal."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """One link of a singly linked list."""

    content: Any
    next: ListNode | None = None


class LinkedList:
    """A singly linked list reachable from ``head``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        tail: ListNode | None = None
        for item in items:
            node = ListNode(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def last(self) -> ListNode | None:
        """Return the last node, or None when the list is empty."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def append(self, content: Any) -> ListNode:
        """Add content at the end and return its node."""
        node = ListNode(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def prepend(self, content: Any) -> ListNode:
        """Add content at the front and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def pop_after(self, node: ListNode) -> ListNode | None:
        """Unlink and return the node following ``node``, or None if there is none."""
        removed = node.next
        if removed is None:
            return None
        node.next = removed.next
        removed.next = None
        return removed

    def push_after(self, node: ListNode, content: Any) -> ListNode:
        """Insert content right after ``node`` and return the new node."""
        new = ListNode(content, node.next)
        node.next = new
        return new

    def delete_after(self, node: ListNode) -> None:
        """Remove the node following ``node``."""
        if node.next is None:
            raise ValueError("no node follows the given node")
        node.next = node.next.next

    def clear(self) -> None:
        """Remove every node."""
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node, front to back."""
        for content in self:
            func(content)

    def nodes(self) -> Iterator[ListNode]:
        """Yield the nodes from front to back."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self.nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"