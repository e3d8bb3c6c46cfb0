"""Text rendering of binary trees."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, TextIO

from arbor.metrics import height

if TYPE_CHECKING:
    from arbor.tree import Node


def _put(row: list[str], position: int, char: str) -> None:
    if position < 0:
        return
    if position >= len(row):
        row.extend(" " * (position + 1 - len(row)))
    row[position] = char


def _fill(node: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw the subtree into the rows and return the width it takes."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _fill(node.left, offset, depth + 1, rows)
    right = _fill(node.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            for i in range(width + right):
                _put(above, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return a drawing of the tree, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _fill(tree, 0, 0, rows)
    lines = ["".join(row).rstrip(" ").ljust(2) for row in rows]
    return "".join(line + "\n" for line in lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to the file (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))