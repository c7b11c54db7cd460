"""Structural queries and rotations on binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from bintrees.node import Node


def _lineage(node: Node | None) -> Iterator[Node]:
    while node is not None:
        yield node
        node = node.parent


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the deepest node that is an ancestor of both nodes, or None."""
    if first is None or second is None:
        return None
    seen = set(_lineage(first))
    for node in _lineage(second):
        if node in seen:
            return node
    return None


def is_complete(tree: Node | None) -> bool:
    """Return True if every level is full except possibly the last, filled from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap = True
            elif gap:
                return False
            else:
                queue.append(child)
    return True


def _reattach(old: Node, new: Node) -> None:
    parent = old.parent
    old.parent = new
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new


def rotate_left(tree: Node | None) -> Node | None:
    """Left-rotate around the node; return the new subtree root, or None if impossible."""
    if tree is None or tree.right is None:
        return None
    pivot = tree.right
    inner = pivot.left
    pivot.left = tree
    tree.right = inner
    if inner is not None:
        inner.parent = tree
    _reattach(tree, pivot)
    return pivot


def rotate_right(tree: Node | None) -> Node | None:
    """Right-rotate around the node; return the new subtree root, or None if impossible."""
    if tree is None or tree.left is None:
        return None
    pivot = tree.left
    inner = pivot.right
    pivot.right = tree
    tree.left = inner
    if inner is not None:
        inner.parent = tree
    _reattach(tree, pivot)
    return pivot