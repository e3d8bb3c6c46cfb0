"""Binary trees of linked nodes: traversals, metrics, printing, search trees, AVL trees and max heaps."""

__version__ = "0.1.0"

__all__ = ["avl", "bst", "display", "heap", "metrics", "traversal", "tree"]