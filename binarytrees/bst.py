"""Binary search trees: validation, insertion, lookup and removal."""

from __future__ import annotations

from typing import Iterable, Optional

from binarytrees.node import Node

__all__ = ["is_bst", "bst_insert", "array_to_bst", "bst_search", "bst_remove"]


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if every node is strictly between its left and right subtrees."""
    if tree is None:
        return False
    stack: list[tuple[Optional[Node], Optional[int], Optional[int]]] = [
        (tree, None, None)
    ]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        stack.append((node.left, low, node.value))
        stack.append((node.right, node.value, high))
    return True


def bst_insert(root: Optional[Node], value: int) -> Optional[Node]:
    """Insert ``value`` and return the new node.

    With an empty tree the returned node is the new root. A value already
    present is not inserted and None is returned.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value, node)
                return node.left
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value, node)
                return node.right
            node = node.right
        else:
            return None


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a search tree by inserting the values in order; return its root."""
    root: Optional[Node] = None
    for value in values:
        node = bst_insert(root, value)
        if root is None:
            root = node
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value``, or None."""
    node = tree
    while node is not None and node.value != value:
        node = node.right if node.value < value else node.left
    return node


def _replace_in_parent(old: Node, new: Optional[Node]) -> None:
    owner = old.parent
    if owner is not None:
        if owner.left is old:
            owner.left = new
        elif owner.right is old:
            owner.right = new
    if new is not None:
        new.parent = owner


def _splice_successor(node: Node) -> Node:
    successor = node.right
    assert successor is not None
    while successor.left is not None:
        successor = successor.left
    if successor is not node.right:
        holder = successor.parent
        assert holder is not None
        holder.left = successor.right
        if successor.right is not None:
            successor.right.parent = holder
        successor.right = node.right
        successor.right.parent = successor
    successor.left = node.left
    if successor.left is not None:
        successor.left.parent = successor
    return successor


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove the node holding ``value`` and return the tree's root.

    A node with two children is replaced by its in-order successor.
    """
    node = bst_search(root, value)
    if node is None:
        return root
    if node.left is not None and node.right is not None:
        replacement: Optional[Node] = _splice_successor(node)
    else:
        replacement = node.left if node.left is not None else node.right
    was_root = node.parent is None
    _replace_in_parent(node, replacement)
    node.parent = node.left = node.right = None
    return replacement if was_root else root