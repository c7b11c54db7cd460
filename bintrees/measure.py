"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from bintrees.node import Node


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest path down from the node."""
    if tree is None:
        return 0
    left = 1 + height(tree.left) if tree.left is not None else 0
    right = 1 + height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _levels(tree: Node | None) -> int:
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Node | None) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.left is None and tree.right is None:
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None:
        return 0
    own = 0 if tree.left is None and tree.right is None else 1
    return own + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Node | None) -> int:
    """Return the left subtree height minus the right subtree height."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def _full(tree: Node | None) -> bool:
    if tree is None:
        return True
    if (tree.left is None) != (tree.right is None):
        return False
    return _full(tree.left) and _full(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node has zero or two children."""
    if tree is None:
        return False
    return _full(tree)


def _perfect(tree: Node, leaf_depth: int, level: int) -> bool:
    if tree.left is None and tree.right is None:
        return level == leaf_depth
    if tree.left is None or tree.right is None:
        return False
    return _perfect(tree.left, leaf_depth, level + 1) and _perfect(
        tree.right, leaf_depth, level + 1
    )


def is_perfect(tree: Node | None) -> bool:
    """Return True if all internal nodes have two children and all leaves share a level."""
    if tree is None:
        return False
    leaf_depth = 0
    node = tree
    while node.left is not None or node.right is not None:
        node = node.left if node.left is not None else node.right
        leaf_depth += 1
    return _perfect(tree, leaf_depth, 0)