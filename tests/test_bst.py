import pytest

from treekit.bst import bst_insert, bst_search, is_bst
from treekit.node import Node
from treekit.traversal import inorder

INSERT_VALUES = [98, 402, 12, 46, 128, 256, 512, 1]
SEARCH_VALUES = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def _build(values):
    root = None
    for value in values:
        node = bst_insert(root, value)
        if root is None:
            root = node
    return root


def _attach(parent, value, side):
    child = Node(value, parent)
    setattr(parent, side, child)
    return child


def test_insert_into_empty_returns_root():
    root = bst_insert(None, 98)
    assert root.value == 98
    assert root.is_root()
    assert root.is_leaf()


def test_insert_returns_new_nodes():
    root = bst_insert(None, INSERT_VALUES[0])
    for value in INSERT_VALUES[1:]:
        node = bst_insert(root, value)
        assert node.value == value
        assert node.is_leaf()
        assert node.parent.left is node or node.parent.right is node


def test_insert_duplicate_returns_none():
    root = _build(INSERT_VALUES)
    assert bst_insert(root, 128) is None
    assert list(inorder(root)) == sorted(INSERT_VALUES)


def test_insert_keeps_root_and_order():
    root = _build(INSERT_VALUES)
    assert root.value == INSERT_VALUES[0]
    assert root.is_root()
    assert list(inorder(root)) == sorted(INSERT_VALUES)
    assert is_bst(root) is True


def test_insert_places_children_by_comparison():
    root = _build([98, 402, 12])
    assert root.left.value == 12
    assert root.right.value == 402
    assert root.left.parent is root
    assert root.right.parent is root


def test_search_missing():
    tree = _build(SEARCH_VALUES)
    assert bst_search(tree, 512) is None
    assert bst_search(None, 32) is None


@pytest.mark.parametrize("value", SEARCH_VALUES)
def test_search_finds_every_inserted_value(value):
    tree = _build(SEARCH_VALUES)
    node = bst_search(tree, value)
    assert node.value == value


def test_search_on_subtree_only_sees_subtree():
    tree = _build(SEARCH_VALUES)
    assert bst_search(tree.left, 98) is None
    assert bst_search(tree.right, 98).value == 98


def test_is_bst_example():
    root = Node(98)
    _attach(root, 12, "left")
    _attach(root, 128, "right")
    _attach(root.left, 54, "right")
    _attach(root.right, 402, "right")
    _attach(root.left, 10, "left")
    assert is_bst(root) is True
    assert is_bst(root.left) is True
    _attach(root.right, 97, "left")
    assert is_bst(root) is False
    assert is_bst(root.right) is True


def test_is_bst_rejects_duplicates():
    root = Node(5)
    _attach(root, 5, "right")
    assert is_bst(root) is False


def test_is_bst_checks_deep_descendants():
    root = Node(50)
    left = _attach(root, 30, "left")
    _attach(left, 60, "right")
    assert is_bst(left) is True
    assert is_bst(root) is False


def test_is_bst_empty_and_single():
    assert is_bst(None) is False
    assert is_bst(Node(-7)) is True


def test_is_bst_with_negative_values():
    root = _build([-3, -5, -1, -10])
    assert is_bst(root) is True
    assert list(inorder(root)) == sorted([-3, -5, -1, -10])


def test_sorted_inserts_build_deep_tree():
    values = list(range(3000))
    root = _build(values)
    assert is_bst(root) is True
    assert bst_search(root, values[-1]).value == values[-1]
    assert list(inorder(root)) == values