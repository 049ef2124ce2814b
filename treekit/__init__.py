"""Binary trees: nodes, traversals, properties, search trees and rendering."""

__version__ = "0.1.0"

__all__ = ["bst", "node", "printing", "properties", "traversal"]