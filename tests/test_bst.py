import pytest

from bintrees import bst
from bintrees.node import Node
from bintrees.traversal import inorder, preorder

ARRAY = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def _check_parents(node):
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
            _check_parents(child)


def test_is_bst_sequence():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root)
    root.left.left = Node(10, root.left)
    assert bst.is_bst(root) is True
    assert bst.is_bst(root.left) is True

    root.right.left = Node(97, root.right)
    assert bst.is_bst(root) is False


def test_is_bst_none_and_duplicates():
    assert bst.is_bst(None) is False
    root = Node(5)
    root.left = Node(5, root)
    assert bst.is_bst(root) is False


def test_insert_sequence():
    root = bst.insert(None, 98)
    assert root.value == 98
    assert root.parent is None
    for value in (402, 12, 46, 128, 256, 512, 1):
        node = bst.insert(root, value)
        assert node.value == value
    assert bst.insert(root, 128) is None
    assert list(preorder(root)) == [98, 12, 1, 46, 402, 128, 256, 512]
    _check_parents(root)


def test_from_values():
    tree = bst.from_values(ARRAY)
    assert list(preorder(tree)) == [
        79, 47, 21, 2, 1, 20, 32, 22, 34, 68, 62, 87, 84, 91, 98, 95,
    ]
    assert list(inorder(tree)) == sorted(ARRAY)
    assert bst.is_bst(tree) is True
    _check_parents(tree)


def test_from_values_skips_repeats_and_empty():
    tree = bst.from_values([3, 1, 3, 2, 1])
    assert list(preorder(tree)) == [3, 1, 2]
    assert bst.from_values([]) is None


def test_search():
    tree = bst.from_values(ARRAY)
    node = bst.search(tree, 32)
    assert node.value == 32
    assert list(preorder(node)) == [32, 22, 34]
    assert bst.search(tree, 512) is None
    assert bst.search(None, 1) is None


def test_remove_sequence():
    tree = bst.from_values(ARRAY)

    tree = bst.remove(tree, 79)
    assert tree.value == 84
    assert list(preorder(tree)) == [
        84, 47, 21, 2, 1, 20, 32, 22, 34, 68, 62, 87, 91, 98, 95,
    ]

    tree = bst.remove(tree, 21)
    assert list(preorder(tree)) == [
        84, 47, 22, 2, 1, 20, 32, 34, 68, 62, 87, 91, 98, 95,
    ]

    tree = bst.remove(tree, 68)
    assert list(preorder(tree)) == [
        84, 47, 22, 2, 1, 20, 32, 34, 62, 87, 91, 98, 95,
    ]
    assert bst.is_bst(tree) is True
    _check_parents(tree)


def test_remove_root_with_single_child():
    root = bst.from_values([1, 2, 3])
    new_root = bst.remove(root, 1)
    assert new_root.value == 2
    assert new_root.parent is None
    assert list(preorder(new_root)) == [2, 3]


def test_remove_last_node():
    root = bst.from_values([7])
    assert bst.remove(root, 7) is None


def test_remove_missing_raises():
    tree = bst.from_values(ARRAY)
    with pytest.raises(KeyError):
        bst.remove(tree, 512)
    assert bst.remove(None, 1) is None


def test_remove_every_value_keeps_order():
    tree = bst.from_values(ARRAY)
    remaining = sorted(ARRAY)
    for value in ARRAY:
        tree = bst.remove(tree, value)
        remaining.remove(value)
        assert list(inorder(tree)) == remaining
    assert tree is None