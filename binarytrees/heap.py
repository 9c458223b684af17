"""Max binary heaps stored as complete binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Optional

from binarytrees.metrics import is_complete
from binarytrees.node import Node

__all__ = [
    "is_heap",
    "heap_insert",
    "array_to_heap",
    "heap_extract",
    "heap_to_sorted_array",
]


def _breadth_first(tree: Optional[Node]) -> Iterator[Node]:
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(child for child in (node.left, node.right) if child is not None)


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is complete and no child exceeds its parent."""
    if not is_complete(tree):
        return False
    return all(
        child.value <= node.value
        for node in _breadth_first(tree)
        for child in (node.left, node.right)
        if child is not None
    )


def _insertion_parent(root: Node) -> Node:
    """Return the first node, in level order, that lacks a child."""
    for node in _breadth_first(root):
        if node.left is None or node.right is None:
            return node
    raise AssertionError("a finite tree always has a node with a free slot")


def _swap_values(a: Node, b: Node) -> None:
    a.value, b.value = b.value, a.value


def heap_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the heap and return the node that ends up holding it.

    With an empty heap the returned node is the new root; otherwise the root
    node stays the root of the heap.
    """
    if root is None:
        return Node(value)
    parent = _insertion_parent(root)
    node = Node(value, parent)
    if parent.left is None:
        parent.left = node
    else:
        parent.right = node
    while node.parent is not None and node.value > node.parent.value:
        _swap_values(node, node.parent)
        node = node.parent
    return node


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting the values in order; return its root."""
    root: Optional[Node] = None
    for value in values:
        node = heap_insert(root, value)
        if root is None:
            root = node
    return root


def _last_node(root: Node) -> Node:
    last = root
    for last in _breadth_first(root):
        pass
    return last


def _sift_down(node: Node) -> None:
    while True:
        left_value = node.left.value if node.left is not None else node.value
        right_value = node.right.value if node.right is not None else node.value
        child = node.left if left_value > right_value else node.right
        if child is None or child.value <= node.value:
            return
        _swap_values(node, child)
        node = child


def heap_extract(root: Optional[Node]) -> tuple[int, Optional[Node]]:
    """Remove the heap's maximum; return it together with the heap's new root.

    Raises IndexError when the heap is empty.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    top = root.value
    last = _last_node(root)
    owner = last.parent
    if owner is None:
        return top, None
    if owner.left is last:
        owner.left = None
    else:
        owner.right = None
    last.parent = None
    root.value = last.value
    _sift_down(root)
    return top, root


def heap_to_sorted_array(heap: Optional[Node]) -> list[int]:
    """Empty the heap, returning its values from largest to smallest."""
    result: list[int] = []
    root = heap
    while root is not None:
        value, root = heap_extract(root)
        result.append(value)
    return result