"""Measurements and shape checks over whole binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from binarytrees.node import Node

__all__ = [
    "height",
    "size",
    "leaves",
    "internal_nodes",
    "balance",
    "is_full",
    "is_perfect",
    "is_complete",
]


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _leaf_depths(tree: Optional[Node]) -> Iterator[int]:
    stack = [(tree, 0)] if tree is not None else []
    while stack:
        node, level = stack.pop()
        children = [child for child in (node.right, node.left) if child is not None]
        if not children:
            yield level
        stack.extend((child, level + 1) for child in children)


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest path from ``tree`` to a leaf."""
    return max(_leaf_depths(tree), default=0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for _ in _leaf_depths(tree))


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(
        1 for node in _nodes(tree) if node.left is not None or node.right is not None
    )


def _levels(tree: Optional[Node]) -> int:
    return 0 if tree is None else height(tree) + 1


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right one."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either no children or two."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if all leaves share the same depth and every inner node has two children."""
    depths = list(_leaf_depths(tree))
    return len(depths) == 1 << max(depths, default=0)


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except the last, which fills from the left."""
    if tree is None:
        return False
    queue: deque[Optional[Node]] = deque([tree])
    seen_gap = False
    while queue:
        node = queue.popleft()
        if node is None:
            seen_gap = True
            continue
        if seen_gap:
            return False
        queue.append(node.left)
        queue.append(node.right)
    return True