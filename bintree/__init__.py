"""Link-based binary trees, binary search trees and a command that compares sample trees."""

__version__ = "0.1.0"
__all__ = ["errors", "node", "node_tree", "bst", "cli"]