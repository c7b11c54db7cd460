from bintrees.node import Node


def _tree_54_128():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _family_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_new_node_links():
    parent = Node(1)
    child = Node(2, parent)
    assert child.parent is parent
    assert child.left is None and child.right is None
    assert child.value == 2


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    new_right_left = root.right.insert_left(128)
    new_left = root.insert_left(54)
    assert new_right_left.value == 128
    assert root.right.left is new_right_left
    assert new_right_left.parent is root.right
    assert root.left is new_left
    assert new_left.value == 54
    assert new_left.left.value == 12
    assert new_left.left.parent is new_left
    assert new_left.parent is root


def test_insert_right_pushes_existing_child_down():
    root = _tree_54_128()
    assert root.left.right.value == 54
    assert root.right.value == 128
    assert root.right.right.value == 402
    assert root.right.right.parent is root.right
    assert root.right.parent is root


def test_is_leaf():
    root = _tree_54_128()
    assert root.is_leaf() is False
    assert root.right.is_leaf() is False
    assert root.right.right.is_leaf() is True


def test_is_root():
    root = _tree_54_128()
    assert root.is_root() is True
    assert root.right.is_root() is False
    assert root.right.right.is_root() is False


def test_depth():
    root = _tree_54_128()
    assert root.depth() == 0
    assert root.right.depth() == 1
    assert root.left.right.depth() == 2


def test_sibling():
    root = _family_tree()
    assert root.left.sibling().value == 128
    assert root.right.left.sibling().value == 402
    assert root.left.right.sibling().value == 10
    assert root.sibling() is None


def test_sibling_missing():
    root = Node(1)
    only = root.insert_left(2)
    assert only.sibling() is None


def test_uncle():
    root = _family_tree()
    assert root.right.left.uncle().value == 12
    assert root.left.right.uncle().value == 128
    assert root.left.uncle() is None
    assert root.uncle() is None