# treekit

A small library for working with binary trees of integers: building nodes,
walking them, measuring them, treating them as binary search trees and
drawing them as ASCII art. It has no dependencies outside the standard
library.

## Installation

```
pip install treekit
```

To run the tests:

```
pip install treekit[test]
pytest
```

## Building a tree

```python
from treekit.node import Node, delete

root = Node(98)
root.left = Node(12, parent=root)
root.right = Node(402, parent=root)

root.left.insert_right(54)   # new node takes over any existing right child
root.insert_right(128)       # 402 becomes the right child of 128

root.is_root()          # True
root.right.is_leaf()    # False
```

A `Node` has `value`, `parent`, `left` and `right` attributes. Creating a
node with a `parent` only records the parent; putting the node in the
parent's `left` or `right` slot is up to you.

`insert_left` and `insert_right` put the new node between a parent and its
current child, so the old child moves down one level, and return the new
node.

`delete(tree)` detaches a subtree from its parent, clears every link inside
it and returns the number of nodes it held. `delete(None)` returns 0.

## Traversals

```python
from treekit.traversal import preorder, inorder, postorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
```

Each function is a generator yielding the node values in its order. An empty
tree (`None`) yields nothing.

## Properties

```python
from treekit.properties import (
    height, depth, size, leaves, inner_nodes, balance,
    is_full, sibling, uncle, lowest_common_ancestor,
)

height(root)                 # edges on the longest downward path; 0 for None or a single node
depth(root.left.right)       # edges up to the root
size(root)                   # number of nodes
leaves(root)                 # nodes with no children
inner_nodes(root)            # nodes with at least one child
balance(root)                # height of left subtree minus height of right
is_full(root)                # every node has zero or two children (False for None)
sibling(root.left)           # the other child of the same parent, or None
uncle(root.left.right)       # sibling of the parent, or None
lowest_common_ancestor(root.left, root.right)
```

`lowest_common_ancestor` counts a node as its own ancestor and returns
`None` if either argument is `None` or the two nodes are in different trees.

## Binary search trees

```python
from treekit.bst import bst_insert, bst_search, is_bst

root = bst_insert(None, 98)      # with no root, the new node is the root
for value in (402, 12, 46, 128, 256, 512, 1):
    bst_insert(root, value)

bst_insert(root, 128)   # None: the value is already present
is_bst(root)            # True
bst_search(root, 128)   # the node holding 128
bst_search(root, 7)     # None
```

`bst_insert` returns the newly created node, or `None` when the value is
already in the tree. `is_bst` requires values in a left subtree to be
strictly smaller and values in a right subtree strictly larger than the node
above; an empty tree is not a BST.

## Printing

```python
from treekit.printing import render, print_tree

text = render(root)
print_tree(root)
```

Each node is drawn as its value padded to three digits in brackets, with
dashes and dots linking it to its children:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

`render` returns the drawing as a string, one newline-terminated line per
level (an empty string for `None`); `print_tree(tree, file=None)` writes it
to a file, standard output by default.

## What it does not do

treekit is a library only: it has no command-line tool. Its trees hold
integers, and the binary search tree functions do no rebalancing.