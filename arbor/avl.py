"""AVL tree operations on :class:`arbor.tree.Node` trees."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from arbor.bst import bst_insert, bst_remove, is_bst
from arbor.metrics import balance
from arbor.tree import Node, rotate_left, rotate_right


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def _top(node: Node) -> Node:
    while node.parent is not None:
        node = node.parent
    return node


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if the tree is a search tree whose every node has balance -1, 0 or 1."""
    if tree is None:
        return False
    return is_bst(tree) and all(-1 <= balance(node) <= 1 for node in _nodes(tree))


def _rebalance_after_insert(node: Node, value: int) -> None:
    """Rotate around the node if inserting the value left it out of balance."""
    factor = balance(node)
    if factor > 1:
        if node.left.value > value:
            rotate_right(node)
        else:
            rotate_left(node.left)
            rotate_right(node)
    elif factor < -1:
        if node.right.value < value:
            rotate_left(node)
        else:
            rotate_right(node.right)
            rotate_left(node)


def avl_insert(root: Optional[Node], value: int) -> tuple[Optional[Node], Optional[Node]]:
    """Insert the value and return ``(root, node)``.

    ``root`` is the root of the tree after rebalancing and ``node`` the newly
    created node, or None when the value was already present.
    """
    node = bst_insert(root, value)
    if root is None:
        return node, node
    if node is None:
        return root, None
    ancestor = node.parent
    while ancestor is not None:
        _rebalance_after_insert(ancestor, value)
        ancestor = ancestor.parent
    return _top(node), node


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting the values in order; duplicates are skipped."""
    root: Optional[Node] = None
    for value in values:
        root, _ = avl_insert(root, value)
    return root


def _rebalance_subtree(node: Optional[Node]) -> Optional[Node]:
    """Rebalance bottom-up with single rotations and return the subtree's root."""
    if node is None or node.is_leaf():
        return node
    _rebalance_subtree(node.left)
    _rebalance_subtree(node.right)
    factor = balance(node)
    if factor > 1:
        return rotate_right(node)
    if factor < -1:
        return rotate_left(node)
    return node


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove the value from the tree, rebalance it and return the new root."""
    return _rebalance_subtree(bst_remove(root, value))


def _build(values: Sequence[int], first: int, last: int) -> Optional[Node]:
    if last < first:
        return None
    middle = (first + last) // 2
    root = Node(values[middle])
    root.left = _build(values, first, middle - 1)
    root.right = _build(values, middle + 1, last)
    for child in (root.left, root.right):
        if child is not None:
            child.parent = root
    return root


def sorted_array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build a balanced tree from sorted values without any rotation."""
    items = list(values)
    if not items:
        return None
    return _build(items, 0, len(items) - 1)