# bintrees

Binary trees made of parent-linked nodes holding integers, with the usual
operations on them: building and linking nodes, traversals, measurements,
structural checks, rotations, binary search trees, AVL trees and max binary
heaps. Trees can also be drawn as text.

It is a library only: there is no command-line tool, and trees live in
memory only; nothing is saved or loaded.

## Installing

```
pip install .
```

## Building a tree by hand

```python
from bintrees.node import Node
from bintrees.printing import print_tree

root = Node(98)
root.left = Node(12, root)
root.right = Node(402, root)
root.left.insert_right(54)
root.insert_right(128)            # 128 now sits between 98 and 402

print_tree(root)
print(root.right.right.depth())   # 2
print(root.left.sibling().value)  # 128
```

A `Node` has the attributes `value`, `parent`, `left` and `right`, and the
methods:

- `insert_left(value)` / `insert_right(value)`: add a new child on that
  side and return it; a child already there moves down under the new node.
- `is_leaf()`, `is_root()`
- `depth()`: number of edges up to the root.
- `sibling()`, `uncle()`: the related node, or `None`.

## Traversals

The functions in `bintrees.traversal` are generators of node values:

```python
from bintrees import traversal

list(traversal.preorder(root))
list(traversal.inorder(root))
list(traversal.postorder(root))
list(traversal.levelorder(root))
```

An empty tree (`None`) yields nothing.

## Measurements

```python
from bintrees import measure

measure.height(root)          # edges on the longest downward path
measure.size(root)            # number of nodes
measure.leaves(root)          # nodes without children
measure.internal_nodes(root)  # nodes with at least one child
measure.balance(root)         # left subtree height minus right subtree height
measure.is_full(root)         # every node has zero or two children
measure.is_perfect(root)      # full, with all leaves on one level
```

`is_full` and `is_perfect` return `False` for `None`.

## Structure

`bintrees.structure` provides:

- `lowest_common_ancestor(first, second)`: the deepest node that is an
  ancestor of both (a node counts as its own ancestor), or `None`.
- `is_complete(tree)`: every level full except possibly the last, which is
  filled from the left.
- `rotate_left(tree)` / `rotate_right(tree)`: rotate in place and return the
  new subtree root, or `None` if the rotation is impossible. The parent's
  link is updated.

## Binary search trees

```python
from bintrees import bst

root = bst.from_values([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
node = bst.search(root, 32)
root = bst.remove(root, 79)
bst.is_bst(root)
```

- `insert(root, value)` returns the new node, or `None` if the value is
  already present. With `root=None` it returns a fresh node that is the new
  root.
- `from_values(values)` inserts values in order, skipping repeats.
- `remove(root, value)` returns the new root; a node with two children takes
  its in-order successor's value. It raises `KeyError` if the value is not
  in a non-empty tree.

## AVL trees

```python
from bintrees import avl

root, node = avl.insert(None, 98)
root, node = avl.insert(root, 402)
root = avl.from_values([79, 47, 68, 87, 84])
root = avl.remove(root, 47)
root = avl.from_sorted([1, 2, 20, 21, 22, 32])
avl.is_avl(root)
```

`insert` returns a pair: the new root and the inserted node (`None` when the
value was already present). `remove` does nothing to the tree's contents if
the value is absent, and rebalances it either way. Insertions and removals
may change the root, so always keep the root that is handed back.
`from_sorted` roots each part at its middle value.

## Max binary heaps

```python
from bintrees import heap

root = heap.from_values([79, 47, 68, 87, 84, 91, 21])
heap.is_heap(root)
value, root = heap.extract(root)      # 91
ordered = heap.to_sorted_list(root)   # largest first; empties the heap
```

- `insert(root, value)` adds a value at the next free place, sifts it up and
  returns the node where it settles. With `root=None` the returned node is
  the new root.
- `extract(root)` returns the largest value and the heap's root afterwards
  (`None` once empty); it raises `IndexError` on an empty heap.
- `is_heap(tree)` checks that the tree is complete and every parent is
  strictly greater than its children.

## Drawing

`bintrees.printing.render(tree)` returns the drawing as a string (empty for
`None`), and `print_tree(tree)` writes it to standard output:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## Running the tests

```
pip install .[test]
pytest
```