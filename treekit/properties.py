"""Measurements and relationships within a binary tree."""

from __future__ import annotations

from typing import Iterator, Optional

from treekit.node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _children(node: Node) -> list[Node]:
    return [child for child in (node.left, node.right) if child is not None]


def _levels(tree: Optional[Node]) -> int:
    """Number of levels in the tree, counting nodes (0 for an empty tree)."""
    count = 0
    level = [tree] if tree is not None else []
    while level:
        count += 1
        level = [child for node in level for child in _children(node)]
    return count


def height(tree: Optional[Node]) -> int:
    """Return the height of ``tree`` in edges; 0 for ``None`` or a single node."""
    if tree is None:
        return 0
    return _levels(tree) - 1


def depth(node: Optional[Node]) -> int:
    """Return the number of edges from ``node`` up to its root; 0 for ``None``."""
    count = 0
    while node is not None and node.parent is not None:
        node = node.parent
        count += 1
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in ``tree``."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def inner_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right; 0 for ``None``."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children.

    An empty tree is not full.
    """
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of ``node``'s parent, or ``None``."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    return parent.left if node is parent.right else parent.right


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of ``node``'s parent, or ``None``."""
    if node is None or node.parent is None or node.parent.parent is None:
        return None
    return sibling(node.parent)


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the lowest node that is an ancestor of both (a node is its own ancestor).

    Returns ``None`` if either node is ``None`` or they share no root.
    """
    first_depth, second_depth = depth(first), depth(second)
    while first is not None and second is not None:
        if first_depth > second_depth:
            first = first.parent
            first_depth -= 1
        elif second_depth > first_depth:
            second = second.parent
            second_depth -= 1
        elif first is second:
            return first
        else:
            first, second = first.parent, second.parent
            first_depth -= 1
            second_depth -= 1
    return None