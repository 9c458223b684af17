"""ASCII drawing of a binary tree."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from binarytrees.node import Node

__all__ = ["render", "print_tree"]


class _Canvas:
    """Rows of characters that grow as text is placed on them."""

    def __init__(self) -> None:
        self.rows: list[list[str]] = []

    def put(self, row: int, col: int, text: str) -> None:
        if col < 0:
            text = text[-col:]
            col = 0
        while len(self.rows) <= row:
            self.rows.append([])
        line = self.rows[row]
        end = col + len(text)
        if len(line) < end:
            line.extend(" " * (end - len(line)))
        line[col:end] = text

    def lines(self) -> list[str]:
        return ["".join(row).rstrip(" ") for row in self.rows]


def _layout(node: Optional[Node], offset: int, depth: int, canvas: _Canvas) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, depth + 1, canvas)
    right = _layout(node.right, offset + left + width, depth + 1, canvas)
    canvas.put(depth, offset + left, label)
    if depth:
        anchor = offset + left + width // 2
        if is_left:
            canvas.put(depth - 1, anchor, "-" * (width + right))
        else:
            canvas.put(depth - 1, offset - width // 2, "-" * (left + width))
        canvas.put(depth - 1, anchor, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree``, one newline-terminated line per level."""
    if tree is None:
        return ""
    canvas = _Canvas()
    _layout(tree, 0, 0, canvas)
    return "".join(f"{line}\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))