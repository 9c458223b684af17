"""Binary tree nodes and the basic operations on single nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

__all__ = [
    "Node",
    "binary_tree_node",
    "insert_left",
    "insert_right",
    "delete",
    "is_leaf",
    "is_root",
    "depth",
    "sibling",
    "uncle",
    "ancestor",
]


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer and links to its relatives."""

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)

    def ancestors(self) -> Iterator[Node]:
        """Yield the parent, grandparent and so on up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent


def binary_tree_node(parent: Optional[Node], value: int) -> Node:
    """Create a node whose parent is ``parent``; the parent is not modified."""
    return Node(value, parent)


def _require(parent: Optional[Node]) -> Node:
    if parent is None:
        raise ValueError("parent must be a node")
    return parent


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child, pushing any old left child below it."""
    parent = _require(parent)
    new_node = Node(value, parent, left=parent.left)
    if parent.left is not None:
        parent.left.parent = new_node
    parent.left = new_node
    return new_node


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child, pushing any old right child below it."""
    parent = _require(parent)
    new_node = Node(value, parent, right=parent.right)
    if parent.right is not None:
        parent.right.parent = new_node
    parent.right = new_node
    return new_node


def delete(tree: Optional[Node]) -> None:
    """Dismantle a whole subtree, unlinking it and all its nodes."""
    if tree is None:
        return
    owner = tree.parent
    if owner is not None:
        if owner.left is tree:
            owner.left = None
        if owner.right is tree:
            owner.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if the node exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if the node exists and has no parent."""
    return node is not None and node.parent is None


def depth(tree: Optional[Node]) -> int:
    """Return the number of edges between the node and its root."""
    if tree is None:
        return 0
    return sum(1 for _ in tree.ancestors())


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of the node's parent, if any."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    return parent.right if parent.left is node else parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of the node's parent, if any."""
    if node is None:
        return None
    return sibling(node.parent)


def _path_from_root(node: Node) -> list[Node]:
    path = [node, *node.ancestors()]
    path.reverse()
    return path


def ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the lowest common ancestor of two nodes, or None if unrelated."""
    if first is None or second is None:
        return None
    common = None
    for a, b in zip(_path_from_root(first), _path_from_root(second)):
        if a is b:
            common = a
    return common