"""AVL tree operations built on parent-linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from bintrees.bst import search
from bintrees.measure import balance
from bintrees.node import Node
from bintrees.structure import rotate_left, rotate_right


def _avl(node: Node | None, low: int | None, high: int | None) -> bool:
    if node is None:
        return True
    if (low is not None and node.value <= low) or (
        high is not None and node.value >= high
    ):
        return False
    if abs(balance(node)) > 1:
        return False
    return _avl(node.left, low, node.value) and _avl(node.right, node.value, high)


def is_avl(tree: Node | None) -> bool:
    """Return True if the tree is a duplicate-free BST whose every node is height balanced."""
    if tree is None:
        return False
    return _avl(tree, None, None)


def _insert(
    node: Node | None, parent: Node | None, value: int
) -> tuple[Node, Node | None]:
    if node is None:
        new = Node(value, parent)
        return new, new
    if value < node.value:
        node.left, new = _insert(node.left, node, value)
    elif value > node.value:
        node.right, new = _insert(node.right, node, value)
    else:
        return node, None

    factor = balance(node)
    if factor > 1 and value < node.left.value:
        node = rotate_right(node)
    elif factor < -1 and value > node.right.value:
        node = rotate_left(node)
    elif factor > 1 and value > node.left.value:
        node.left = rotate_left(node.left)
        node = rotate_right(node)
    elif factor < -1 and value < node.right.value:
        node.right = rotate_right(node.right)
        node = rotate_left(node)
    return node, new


def insert(root: Node | None, value: int) -> tuple[Node, Node | None]:
    """Insert a value, rebalancing on the way up.

    Returns the new root and the inserted node; the node is None when the
    value was already present.
    """
    if root is None:
        node = Node(value)
        return node, node
    return _insert(root, None, value)


def from_values(values: Iterable[int]) -> Node | None:
    """Build an AVL tree by inserting values in order, skipping repeats."""
    root: Node | None = None
    for value in values:
        root, _ = insert(root, value)
    return root


def _rebalance(node: Node | None) -> Node | None:
    if node is None or node.is_leaf():
        return node
    _rebalance(node.left)
    _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        return rotate_right(node)
    if factor < -1:
        return rotate_left(node)
    return node


def remove(root: Node | None, value: int) -> Node | None:
    """Remove the value if present, rebalance the tree and return its root.

    A node with two children takes its in-order successor's value.
    """
    if root is None:
        return None
    node = search(root, value)
    if node is not None:
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None
    return _rebalance(root)


def _build(values: Sequence[int], parent: Node | None) -> Node | None:
    if not values:
        return None
    middle = (len(values) - 1) // 2
    node = Node(values[middle], parent)
    node.left = _build(values[:middle], node)
    node.right = _build(values[middle + 1 :], node)
    return node


def from_sorted(values: Iterable[int]) -> Node | None:
    """Build a balanced tree from sorted values, rooting each part at its middle."""
    return _build(list(values), None)