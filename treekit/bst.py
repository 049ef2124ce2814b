"""Binary search tree checks, insertion and lookup."""

from __future__ import annotations

from typing import Optional

from treekit.node import Node


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a binary search tree.

    Every value in a left subtree must be strictly smaller and every value in
    a right subtree strictly larger than the node above, so duplicates make a
    tree invalid. An empty tree is not a BST.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value <= low) or (high is not None and node.value >= high):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def bst_insert(root: Optional[Node], value: int) -> Optional[Node]:
    """Insert ``value`` into the BST rooted at ``root`` and return the new node.

    With ``root`` None the new node is returned as the root of a new tree.
    If the value is already present nothing is inserted and None is returned.
    """
    if root is None:
        return Node(value)
    current = root
    while True:
        if value == current.value:
            return None
        side = "left" if value < current.value else "right"
        child = getattr(current, side)
        if child is None:
            node = Node(value, current)
            setattr(current, side, node)
            return node
        current = child


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value`` in the BST ``tree``, or None."""
    node = tree
    while node is not None:
        if value == node.value:
            return node
        node = node.left if value < node.value else node.right
    return None