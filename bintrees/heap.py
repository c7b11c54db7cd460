"""Max binary heap operations on complete parent-linked trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from bintrees.measure import size
from bintrees.node import Node
from bintrees.structure import is_complete


def _max_ordered(tree: Node) -> bool:
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if node.value <= child.value:
                    return False
                stack.append(child)
    return True


def is_heap(tree: Node | None) -> bool:
    """Return True if the tree is complete and every parent exceeds its children."""
    if tree is None:
        return False
    return is_complete(tree) and _max_ordered(tree)


def insert(root: Node | None, value: int) -> Node:
    """Insert a value into the heap and return the node it settles in.

    With an empty heap the returned node is the new root.
    """
    if root is None:
        return Node(value)
    path = bin(size(root) + 1)[3:]
    node = root
    for step in path[:-1]:
        node = node.right if step == "1" else node.left
    new = Node(value, node)
    if path[-1] == "1":
        node.right = new
    else:
        node.left = new
    while new.parent is not None and new.value > new.parent.value:
        new.value, new.parent.value = new.parent.value, new.value
        new = new.parent
    return new


def from_values(values: Iterable[int]) -> Node | None:
    """Build a max heap by inserting values in order."""
    root: Node | None = None
    for value in values:
        node = insert(root, value)
        if root is None:
            root = node
    return root


def _last_node(root: Node) -> Node:
    queue = deque([root])
    last = root
    while queue:
        last = queue.popleft()
        if last.left is not None:
            queue.append(last.left)
        if last.right is not None:
            queue.append(last.right)
    return last


def _sift_down(node: Node) -> None:
    while node.left is not None:
        if node.right is None or node.left.value > node.right.value:
            child = node.left
        else:
            child = node.right
        if node.value > child.value:
            break
        node.value, child.value = child.value, node.value
        node = child


def extract(root: Node | None) -> tuple[int, Node | None]:
    """Remove the maximum value; return it with the heap's root afterwards.

    Raises IndexError if the heap is empty.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    value = root.value
    if root.is_leaf():
        return value, None
    last = _last_node(root)
    root.value = last.value
    parent = last.parent
    if parent.right is last:
        parent.right = None
    else:
        parent.left = None
    last.parent = None
    _sift_down(root)
    return value, root


def to_sorted_list(heap: Node | None) -> list[int]:
    """Drain the heap into a list in descending order."""
    result: list[int] = []
    while heap is not None:
        value, heap = extract(heap)
        result.append(value)
    return result