"""Binary search tree operations on :class:`arbor.tree.Node` trees."""

from __future__ import annotations

from typing import Iterable, Optional

from arbor.tree import Node


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree with distinct values."""
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def bst_insert(root: Optional[Node], value: int) -> Optional[Node]:
    """Insert the value and return the new node, or None if the value is present.

    With an empty tree the returned node is the new root.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value == node.value:
            return None
        if value < node.value:
            if node.left is None:
                node.left = Node(value, node)
                return node.left
            node = node.left
        else:
            if node.right is None:
                node.right = Node(value, node)
                return node.right
            node = node.right


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a binary search tree by inserting the values in order; duplicates are skipped."""
    root: Optional[Node] = None
    for value in values:
        node = bst_insert(root, value)
        if root is None:
            root = node
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding the value, or None."""
    node = tree
    while node is not None and node.value != value:
        node = node.left if value < node.value else node.right
    return node


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove the value from the tree and return the (possibly new) root."""
    target = bst_search(root, value)
    if target is None:
        return root
    if target.left is not None and target.right is not None:
        successor = target.right
        while successor.left is not None:
            successor = successor.left
        target.value = successor.value
        target = successor
    child = target.left if target.left is not None else target.right
    parent = target.parent
    if child is not None:
        child.parent = parent
    if parent is not None:
        if parent.left is target:
            parent.left = child
        else:
            parent.right = child
    target.parent = target.left = target.right = None
    return child if target is root else root