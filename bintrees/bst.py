"""Binary search tree operations on nodes with unique integer values."""

from __future__ import annotations

from collections.abc import Iterable

from bintrees.node import Node


def is_bst(tree: Node | None) -> bool:
    """Return True if the tree is a binary search tree with no duplicate values."""
    if tree is None:
        return False
    stack: list[tuple[Node, int | None, int | None]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def insert(root: Node | None, value: int) -> Node | None:
    """Insert a value and return its new node; None if the value is already present.

    With an empty tree the returned node is the new root.
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


def from_values(values: Iterable[int]) -> Node | None:
    """Build a binary search tree by inserting values in order, skipping repeats."""
    root: Node | None = None
    for value in values:
        node = insert(root, value)
        if root is None:
            root = node
    return root


def search(tree: Node | None, value: int) -> Node | None:
    """Return the node holding the value, or None."""
    node = tree
    while node is not None:
        if node.value == value:
            return node
        node = node.left if value < node.value else node.right
    return None


def _delete(root: Node, node: Node) -> Node | None:
    while node.left is not None and node.right is not None:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node = successor
    child = node.left if node.left is not None else node.right
    parent = node.parent
    if child is not None:
        child.parent = parent
    node.parent = node.left = node.right = None
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root


def remove(root: Node | None, value: int) -> Node | None:
    """Remove the value and return the new root.

    A node with two children takes its in-order successor's value.
    Raises KeyError if the value is not in a non-empty tree.
    """
    if root is None:
        return None
    node = search(root, value)
    if node is None:
        raise KeyError(value)
    return _delete(root, node)