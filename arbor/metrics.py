"""Measurements and shape predicates for binary trees."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from arbor.tree import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest path down from the node (0 if empty)."""
    if tree is None:
        return 0
    levels = 0
    frontier = [tree]
    while frontier:
        frontier = [
            child
            for node in frontier
            for child in (node.left, node.right)
            if child is not None
        ]
        levels += 1
    return levels - 1


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def _levels(tree: Optional[Node]) -> int:
    """Number of nodes on the longest downward path (0 if empty)."""
    return 0 if tree is None else height(tree) + 1


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right (0 if empty)."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _nodes(tree)
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every internal node has two children and all leaves share one level."""
    if tree is None:
        return False
    leaf_level = 0
    probe = tree
    while not probe.is_leaf():
        probe = probe.left if probe.left is not None else probe.right
        leaf_level += 1
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if node.is_leaf():
            if level != leaf_level:
                return False
            continue
        if node.left is None or node.right is None:
            return False
        stack.append((node.left, level + 1))
        stack.append((node.right, level + 1))
    return True


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except possibly the last, filled from the left."""
    if tree is None:
        return False
    count = size(tree)
    stack = [(tree, 0)]
    while stack:
        node, index = stack.pop()
        if index >= count:
            return False
        if node.left is not None:
            stack.append((node.left, 2 * index + 1))
        if node.right is not None:
            stack.append((node.right, 2 * index + 2))
    return True