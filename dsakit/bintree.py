"""A plain binary tree with explicit child insertion and depth-first walks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding one value."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def insert_left(self, data: Any) -> TreeNode:
        """Set a new childless left child holding data; return this node."""
        self.left = TreeNode(data)
        return self

    def insert_right(self, data: Any) -> TreeNode:
        """Set a new childless right child holding data; return this node."""
        self.right = TreeNode(data)
        return self


def preorder(node: TreeNode | None) -> Iterator[Any]:
    """Yield values node first, then left subtree, then right subtree."""
    if node is not None:
        yield node.data
        yield from preorder(node.left)
        yield from preorder(node.right)


def inorder(node: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree first, then node, then right subtree."""
    if node is not None:
        yield from inorder(node.left)
        yield node.data
        yield from inorder(node.right)


def postorder(node: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree first, then right subtree, then node."""
    if node is not None:
        yield from postorder(node.left)
        yield from postorder(node.right)
        yield node.data


def postorder_release(node: TreeNode | None) -> Iterator[Any]:
    """Detach every node bottom-up, yielding each value as it is released."""
    if node is not None:
        yield from postorder_release(node.left)
        yield from postorder_release(node.right)
        node.left = None
        node.right = None
        yield node.data


def build_sample_tree() -> TreeNode:
    """Return the four-level sample tree with root ``A`` and nodes ``B`` to ``M``."""
    root = TreeNode("A")
    root.insert_left("B").insert_right("C")
    root.left.insert_left("D").insert_right("E")
    root.right.insert_left("F").insert_right("G")
    root.left.left.insert_left("H").insert_right("I")
    root.left.right.insert_left("J")
    root.right.left.insert_right("K")
    root.right.right.insert_left("L").insert_right("M")
    return root


def _levels(root: TreeNode) -> Iterator[list[Any]]:
    level = [root]
    while level:
        yield [node.data for node in level]
        level = [child for node in level for child in (node.left, node.right) if child]


def _walk(values: Iterator[Any]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Build the sample tree, print it by level, walk it three ways, then release it."""
    root = build_sample_tree()
    for depth, values in enumerate(_levels(root), start=1):
        print(f"{'  '.join(str(v) for v in values)}\tlevel {depth}")
    print(f"\nroot : {root.data}")
    print("\n+++++ Tree Traversal +++++")
    for label, walk in (("preOrder", preorder), ("inOrder", inorder), ("postOrder", postorder)):
        print(f"\n====== {label} ======")
        print(_walk(walk(root)))
        print("======================")
    print("\n+++++ Delete Tree +++++")
    for value in postorder_release(root):
        print(f"{value} free")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())