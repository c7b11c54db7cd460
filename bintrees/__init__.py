"""Parent-linked binary trees: traversals, measurements, BSTs, AVL trees and max heaps."""

__version__ = "0.1.0"
__all__ = ["node", "printing", "traversal", "measure", "structure", "bst", "avl", "heap"]