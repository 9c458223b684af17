"""Left and right rotations of a binary tree node."""

from __future__ import annotations

from typing import Optional

from binarytrees.node import Node

__all__ = ["rotate_left", "rotate_right"]


def _relink_parent(old: Node, new: Node) -> None:
    owner = old.parent
    if owner is not None:
        if owner.left is old:
            owner.left = new
        if owner.right is old:
            owner.right = new


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate ``tree`` to the left and return the new subtree root.

    Returns None, leaving the tree untouched, when there is no right child.
    """
    if tree is None or tree.right is None:
        return None
    pivot = tree.right
    inner = pivot.left
    pivot.parent = tree.parent
    pivot.left = tree
    _relink_parent(tree, pivot)
    tree.right = inner
    tree.parent = pivot
    if inner is not None:
        inner.parent = tree
    return pivot


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate ``tree`` to the right and return the new subtree root.

    Returns None, leaving the tree untouched, when there is no left child.
    """
    if tree is None or tree.left is None:
        return None
    pivot = tree.left
    inner = pivot.right
    pivot.parent = tree.parent
    pivot.right = tree
    _relink_parent(tree, pivot)
    tree.left = inner
    tree.parent = pivot
    if inner is not None:
        inner.parent = tree
    return pivot