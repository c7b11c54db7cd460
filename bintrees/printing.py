"""ASCII rendering of binary trees."""

from __future__ import annotations

from bintrees.node import Node


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _put(row: list[str], index: int, char: str) -> None:
    if index >= len(row):
        row.extend(" " * (index + 1 - len(row)))
    row[index] = char


def _draw(tree: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = "(%03d)" % tree.value
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, rows)
    right = _draw(tree.right, offset + left + width, depth + 1, rows)
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


def render(tree: Node | None) -> str:
    """Return the tree drawn as text lines joined by newlines."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(_height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    return "\n".join("".join(row).rstrip(" ") for row in rows)


def print_tree(tree: Node | None) -> None:
    """Print the tree drawing to standard output."""
    if tree is None:
        return
    print(render(tree))