"""Binary tree nodes and the basic operations on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node only records its parent; attaching it to the parent's
    ``left`` or ``right`` slot is left to the caller, or done by
    :meth:`insert_left` and :meth:`insert_right`.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, init=False, repr=False)
    right: Optional[Node] = field(default=None, init=False, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child becomes its left child."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child becomes its right child."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None


def delete(tree: Optional[Node]) -> int:
    """Tear down the subtree rooted at ``tree`` and return how many nodes it held.

    The subtree is detached from its parent and every link inside it is
    cleared. Passing ``None`` does nothing and returns 0.
    """
    if tree is None:
        return 0
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        if parent.right is tree:
            parent.right = None
    count = 0
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.left = node.right = node.parent = None
        count += 1
    return count