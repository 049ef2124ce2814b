"""Text rendering of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from treekit.node import Node


def _put(row: list[str], start: int, text: str) -> None:
    if start < 0:
        text = text[-start:]
        start = 0
    end = start + len(text)
    if len(row) < end:
        row.extend(" " * (end - len(row)))
    row[start:end] = text


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _fill(node: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _fill(node.left, offset, depth + 1, rows)
    right = _fill(node.right, offset + left + width, depth + 1, rows)
    _put(rows[depth], offset + left, label)
    if depth:
        if is_left:
            _put(rows[depth - 1], offset + left + width // 2, "-" * (width + right))
        else:
            _put(rows[depth - 1], offset - width // 2, "-" * (left + width))
        _put(rows[depth - 1], offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree``, each level on its own newline-terminated line."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(_height(tree) + 1)]
    _fill(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row).ljust(2)
        lines.append(text[:2] + text[2:].rstrip(" "))
    return "".join(line + "\n" for line in lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    (sys.stdout if file is None else file).write(render(tree))