# arbor

Binary trees made of linked nodes, and the algorithms that go with them:
plain binary trees, binary search trees, AVL trees and max binary heaps.

Every node holds an integer `value`, a `parent` and two children, `left`
and `right`. The functions in this package work on those nodes directly,
so you can build a tree by hand, inspect it and restructure it.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install .[test]
pytest
```

## Building trees by hand (`arbor.tree`)

```python
from arbor.tree import Node, lowest_common_ancestor, rotate_left, rotate_right

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)

left.is_leaf()          # False
root.is_root()          # True
left.right.depth()      # 2
left.sibling() is right # True
left.right.uncle() is right  # True

lowest_common_ancestor(left.right, right) is root  # True

new_root = rotate_left(root)  # returns the new subtree root
```

- `Node(value, parent=None)` creates a node. Giving a parent does not
  attach the node to it; `insert_left` and `insert_right` do that, and
  push any existing child down one level below the new node.
- `delete()` detaches the subtree from its parent and unlinks every node
  in it.
- `depth()` counts the edges up to the root; `sibling()` and `uncle()`
  return `None` when there is no such node.
- `lowest_common_ancestor(first, second)` treats a node as its own
  ancestor and returns `None` if either argument is `None` or the nodes
  share no ancestor.
- `rotate_left(tree)` and `rotate_right(tree)` return the new root of the
  subtree, relinking it into the old parent. A node without the needed
  child is returned unchanged; `None` gives `None`.

## Traversals (`arbor.traversal`)

```python
from arbor.traversal import preorder, inorder, postorder, levelorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
list(levelorder(root))
```

Each traversal is a generator of node values in the given order; an
empty tree (`None`) yields nothing.

## Measuring a tree (`arbor.metrics`)

```python
from arbor.metrics import (
    height, size, leaves, internal_nodes, balance,
    is_full, is_perfect, is_complete,
)
```

- `height` is the number of edges on the longest downward path (0 for a
  single node or an empty tree).
- `size`, `leaves` and `internal_nodes` count all nodes, nodes without
  children, and nodes with at least one child.
- `balance` is the height of the left subtree minus that of the right,
  counting an empty subtree as height 0 and a single node as 1.
- `is_full`, `is_perfect` and `is_complete` return `True` or `False`,
  and `False` for an empty tree.

## Printing (`arbor.display`)

```python
from arbor.display import render, print_tree

text = render(root)     # one line per level, each ending in a newline
print_tree(root)        # writes the same drawing to standard output
print_tree(root, file)  # or to any text file object
```

Values are drawn zero-padded to three digits, as `(098)`, with dashes and
a dot joining each parent to its children. An empty tree renders as an
empty string.

## Binary search trees (`arbor.bst`)

```python
from arbor.bst import array_to_bst, bst_insert, bst_search, bst_remove, is_bst

root = array_to_bst([98, 402, 12, 46, 128, 256, 512, 50])
node = bst_insert(root, 7)   # the new node, or None if 7 is already present
bst_search(root, 46)         # the node holding 46, or None
root = bst_remove(root, 98)  # returns the (possibly new) root
is_bst(root)                 # True
```

`bst_insert` on an empty tree (`None`) returns a new node, which is the
new root. Duplicate values are ignored, both by `bst_insert` and by
`array_to_bst`. Removing a value that is not present leaves the tree
unchanged. `is_bst` requires all values to be distinct.

## AVL trees (`arbor.avl`)

```python
from arbor.avl import array_to_avl, sorted_array_to_avl, avl_insert, avl_remove, is_avl

root = array_to_avl([98, 402, 12, 46, 128, 256, 512, 50])
root, node = avl_insert(root, 7)  # node is None if 7 was already present
root = avl_remove(root, 98)
root = sorted_array_to_avl([1, 2, 3, 4, 5, 6, 7])
is_avl(root)
```

`avl_insert` rebalances with single and double rotations and returns the
tree's root after rebalancing together with the new node.
`sorted_array_to_avl` builds a balanced tree from already sorted values
by always taking the middle value as the root, with no rotations.
`avl_remove` rebalances the tree bottom-up with single rotations.
`is_avl` checks both the search-tree ordering and that every node's
balance is -1, 0 or 1.

## Max binary heaps (`arbor.heap`)

```python
from arbor.heap import array_to_heap, heap_insert, heap_extract, heap_to_sorted_array, is_heap

heap = array_to_heap([98, 402, 12, 46, 128, 256, 512, 50])
heap, node = heap_insert(heap, 300)  # node is where the value settled
heap, top = heap_extract(heap)       # top == 512
heap_to_sorted_array(heap)           # remaining values, largest first
```

- `heap_insert` adds the value at the next free position of a complete
  tree and sifts it up; it raises `ValueError` if the tree it is given is
  not complete.
- `heap_extract` moves the last node's value to the root and sifts it
  down. It returns `None` as the root once the heap is empty, and raises
  `ValueError` when given an empty heap.
- `heap_to_sorted_array` empties the heap and returns its values in
  descending order.
- `is_heap` checks that the tree is complete and no child is greater than
  its parent.

## What this package does not do

It is a library only: there is no command-line tool, and trees live in
memory as linked `Node` objects with no way to save or load them.