# binarytrees

Binary trees of integers in which every node keeps a link to its parent.
The package offers:

- building trees and inserting nodes (`binarytrees.node`);
- walking trees in preorder, inorder, postorder or level order
  (`binarytrees.traversal`);
- measuring trees and checking their shape (`binarytrees.metrics`);
- rotating nodes (`binarytrees.rotate`);
- binary search trees (`binarytrees.bst`), AVL trees (`binarytrees.avl`)
  and max binary heaps (`binarytrees.heap`);
- drawing a tree as ASCII art (`binarytrees.printer`).

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Nodes

`Node` is a dataclass with the fields `value`, `parent`, `left` and
`right`. Nodes compare by identity. `Node.ancestors()` yields the parent,
grandparent and so on up to the root.

```python
from binarytrees.node import (
    binary_tree_node, insert_left, insert_right,
    is_leaf, is_root, depth, sibling, uncle, ancestor, delete,
)
from binarytrees.printer import print_tree

root = binary_tree_node(None, 98)
root.left = binary_tree_node(root, 12)
root.right = binary_tree_node(root, 402)
insert_right(root.left, 54)
insert_right(root, 128)

print_tree(root)
depth(root.left.right)            # 2
sibling(root.left).value          # 402
uncle(root.left.right).value      # 128
ancestor(root.left, root.right)   # root
is_root(root), is_leaf(root)      # (True, False)
```

- `binary_tree_node(parent, value)` creates a node pointing to `parent`
  but does not attach it; assign it to `parent.left` or `parent.right`.
- `insert_left` and `insert_right` put the new node between the parent
  and the child already on that side, so the old child becomes a child of
  the new node. They raise `ValueError` when the parent is `None`.
- `sibling` and `uncle` return `None` when there is no such node;
  `ancestor` returns the lowest common ancestor, or `None` when the nodes
  share none.
- `delete(tree)` detaches a subtree from its parent and unlinks all of its
  nodes.

## Traversals

Each traversal is a generator of node values:

```python
from binarytrees.traversal import preorder, inorder, postorder, levelorder

list(preorder(root))
list(levelorder(root))
```

## Metrics and shape checks

```python
from binarytrees.metrics import height, size, leaves, internal_nodes, balance
from binarytrees.metrics import is_full, is_perfect, is_complete

height(root)          # edges on the longest path down to a leaf
size(root)            # number of nodes
leaves(root)          # nodes without children
internal_nodes(root)  # nodes with at least one child
balance(root)         # height of left subtree minus height of right subtree
is_complete(root)
```

The `is_*` checks return `bool`; `is_full` and `is_complete` are `False`
for an empty tree.

## Rotations

`rotate_left(node)` and `rotate_right(node)` from `binarytrees.rotate`
rotate a node and return the node that takes its place, relinking the
parent. When there is no child to rotate with, they return `None` and
leave the tree untouched.

## Binary search trees

```python
from binarytrees.bst import array_to_bst, bst_insert, bst_search, bst_remove, is_bst

tree = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95])
bst_search(tree, 32).value    # 32
bst_search(tree, 512)         # None
tree = bst_remove(tree, 79)   # returns the (possibly new) root
is_bst(tree)                  # True
```

`bst_insert(root, value)` returns the new node; with an empty tree
(`root` is `None`) that node is the new root. A value already present is
not inserted and `None` is returned. `bst_remove` replaces a node with two
children by its in-order successor.

## AVL trees

```python
from binarytrees.avl import avl_insert, array_to_avl, avl_remove, sorted_array_to_avl, is_avl

tree = array_to_avl([79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95])
tree = avl_remove(tree, 47)
is_avl(tree)   # True

balanced = sorted_array_to_avl([1, 2, 20, 21, 22, 32, 34])
```

`avl_insert(root, value)` rebalances with rotations and returns the new
node (or `None` for a duplicate). Since the root may change, find it by
following the new node's `ancestors()`. `avl_remove` returns the root
after rebalancing. `sorted_array_to_avl` builds a balanced tree directly
from sorted values, putting the lower middle value at each subtree's root.

## Max binary heaps

```python
from binarytrees.heap import array_to_heap, heap_insert, heap_extract, heap_to_sorted_array, is_heap

heap = array_to_heap([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
is_heap(heap)                   # True
top, heap = heap_extract(heap)  # top == 91
heap_to_sorted_array(heap)      # remaining values, largest first
```

A heap is kept as a complete tree of linked nodes. `heap_insert(root,
value)` returns the node that ends up holding the value; with an empty
heap that node is the new root, otherwise the root node stays the root.
`heap_extract(root)` returns a `(value, new_root)` pair and raises
`IndexError` on an empty heap. `heap_to_sorted_array` empties the heap
into a list in descending order.

## Printing

`render(tree)` returns the drawing as a string, one newline-terminated
line per level, and an empty string for `None`. `print_tree(tree, file)`
writes it to a stream, or to standard output when no stream is given.
Each node is shown as `(nnn)`, with the value zero-padded to three digits:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## What it does not do

The package is a library only: it has no command-line tool, and trees
live in memory only, with no saving or loading.