"""AVL trees: validation, balanced insertion and removal, and bulk construction."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from binarytrees.bst import bst_insert, bst_search, is_bst
from binarytrees.metrics import balance
from binarytrees.node import Node
from binarytrees.rotate import rotate_left, rotate_right

__all__ = [
    "is_avl",
    "avl_insert",
    "array_to_avl",
    "avl_remove",
    "sorted_array_to_avl",
]


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if the tree is a search tree whose every node is balanced."""
    if not is_bst(tree):
        return False
    return all(-1 <= balance(node) <= 1 for node in _nodes(tree))


def _rebalance(node: Node) -> Node:
    """Restore balance at ``node`` by rotation; return the subtree's new root."""
    factor = balance(node)
    if factor > 1:
        assert node.left is not None
        if balance(node.left) < 0:
            rotate_left(node.left)
        pivot = rotate_right(node)
    elif factor < -1:
        assert node.right is not None
        if balance(node.right) > 0:
            rotate_right(node.right)
        pivot = rotate_left(node)
    else:
        return node
    assert pivot is not None
    return pivot


def _rebalance_upward(start: Optional[Node]) -> Optional[Node]:
    """Rebalance from ``start`` up to the root and return the root."""
    node = start
    top = start
    while node is not None:
        node = _rebalance(node)
        top = node
        node = node.parent
    return top


def avl_insert(root: Optional[Node], value: int) -> Optional[Node]:
    """Insert ``value``, rebalancing the tree, and return the new node.

    The tree's root may change; follow the new node's parents to find it.
    A value already present is not inserted and None is returned.
    """
    node = bst_insert(root, value)
    if node is not None:
        _rebalance_upward(node)
    return node


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting the values in order; return its root."""
    root: Optional[Node] = None
    for value in values:
        node = avl_insert(root, value)
        if node is not None:
            root = node
            for root in node.ancestors():
                pass
    return root


def _replace_in_parent(old: Node, new: Optional[Node]) -> None:
    owner = old.parent
    if owner is not None:
        if owner.left is old:
            owner.left = new
        elif owner.right is old:
            owner.right = new
    if new is not None:
        new.parent = owner


def _detach(node: Node) -> tuple[Optional[Node], Optional[Node]]:
    """Unlink ``node``; return where rebalancing starts and what took its place."""
    if node.left is not None and node.right is not None:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        if successor is node.right:
            start: Optional[Node] = successor
        else:
            holder = successor.parent
            assert holder is not None
            start = holder
            holder.left = successor.right
            if successor.right is not None:
                successor.right.parent = holder
            successor.right = node.right
            node.right.parent = successor
        successor.left = node.left
        node.left.parent = successor
        replacement: Optional[Node] = successor
    else:
        replacement = node.left if node.left is not None else node.right
        start = node.parent
    _replace_in_parent(node, replacement)
    node.parent = node.left = node.right = None
    return start, replacement


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove the node holding ``value``, rebalance, and return the tree's root.

    A node with two children is replaced by its in-order successor.
    """
    node = bst_search(root, value)
    if node is None:
        return root
    start, replacement = _detach(node)
    top = _rebalance_upward(start)
    return replacement if top is None else top


def _build(parent: Optional[Node], values: Sequence[int]) -> Optional[Node]:
    if not values:
        return None
    middle = (len(values) - 1) // 2
    node = Node(values[middle], parent)
    node.left = _build(node, values[:middle])
    node.right = _build(node, values[middle + 1 :])
    return node


def sorted_array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build a balanced tree from sorted values, the lower middle value at each root."""
    return _build(None, list(values))