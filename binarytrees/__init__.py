"""Binary trees of integers with parent links: nodes, traversals, metrics, rotations, search trees, AVL trees, max heaps and an ASCII printer."""

__version__ = "0.1.0"

__all__ = ["avl", "bst", "heap", "metrics", "node", "printer", "rotate", "traversal"]