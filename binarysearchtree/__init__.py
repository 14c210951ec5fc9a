"""Binary trees and binary search trees with parent links, Graphviz dot export and a demonstration command."""

__version__ = "0.1.0"
__all__ = ["tree", "bst", "dot", "cli"]