"""Binary tree node with parent links."""

from __future__ import annotations


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves under it."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves under it."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Node | None:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()