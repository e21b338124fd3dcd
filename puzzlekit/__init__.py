"""Array, matrix, linked-list and tree algorithm puzzles."""

__version__ = "0.1.0"
__all__ = ["arrays", "binary_tree", "bst", "nodes", "spiral"]