"""Depth-first and breadth-first traversals yielding node values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from bintrees.node import Node


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    stack: list[tuple[Node, bool]] = [(tree, False)] if tree is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.value
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield values level by level, left to right."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)