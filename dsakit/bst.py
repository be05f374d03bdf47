"""An unbalanced binary search tree of unique keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class DuplicateKeyError(ValueError):
    """Raised when inserting a key the tree already holds."""


@dataclass(eq=False)
class BSTNode:
    """One node of a binary search tree."""

    key: Any
    left: BSTNode | None = None
    right: BSTNode | None = None


def _leftmost(node: BSTNode) -> BSTNode:
    while node.left is not None:
        node = node.left
    return node


class BinarySearchTree:
    """Binary search tree: smaller keys go left, larger keys go right."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: BSTNode | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add key; raise DuplicateKeyError if it is already present."""
        if self.root is None:
            self.root = BSTNode(key)
            self._size += 1
            return
        node = self.root
        while True:
            if key > node.key:
                if node.right is None:
                    node.right = BSTNode(key)
                    break
                node = node.right
            elif key < node.key:
                if node.left is None:
                    node.left = BSTNode(key)
                    break
                node = node.left
            else:
                raise DuplicateKeyError(f"key {key!r} already exists")
        self._size += 1

    def delete(self, key: Any) -> None:
        """Remove key; a node with two children takes its in-order successor's key."""
        self.root = self._delete(self.root, key)
        self._size -= 1

    def _delete(self, node: BSTNode | None, key: Any) -> BSTNode | None:
        if node is None:
            raise KeyError(key)
        if key > node.key:
            node.right = self._delete(node.right, key)
        elif key < node.key:
            node.left = self._delete(node.left, key)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            successor = _leftmost(node.right)
            node.key = successor.key
            node.right = self._delete(node.right, successor.key)
        return node

    def minimum(self) -> Any:
        """Return the smallest key."""
        if self.root is None:
            raise ValueError("minimum of empty tree")
        return _leftmost(self.root).key

    def __contains__(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key > node.key:
                node = node.right
            elif key < node.key:
                node = node.left
            else:
                return True
        return False

    def __iter__(self) -> Iterator[Any]:
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"


def main(argv: list[str] | None = None) -> int:
    """Build a sample tree, delete one key, and print the result and its shape."""
    tree = BinarySearchTree([20, 5, 1, 15, 9, 7, 12, 30, 40, 82, 95])
    tree.delete(5)
    print(" ".join(str(key) for key in tree))
    root = tree.root
    print(root.key, root.left.key, root.left.left.key)
    inner = root.left.right
    print(inner.key, inner.left.key, inner.left.right.key)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())