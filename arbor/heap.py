"""Max binary heap operations on :class:`arbor.tree.Node` trees."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Optional

from arbor.metrics import is_complete, size
from arbor.tree import Node


def _level_nodes(tree: Optional[Node]) -> Iterator[Node]:
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(child for child in (node.left, node.right) if child is not None)


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is complete and no child is greater than its parent."""
    if tree is None or not is_complete(tree):
        return False
    return all(
        child.value <= node.value
        for node in _level_nodes(tree)
        for child in (node.left, node.right)
        if child is not None
    )


def heap_insert(root: Optional[Node], value: int) -> tuple[Node, Node]:
    """Insert the value and return ``(root, node)``, node being where the value settled."""
    if root is None:
        node = Node(value)
        return node, node
    path = bin(size(root) + 1)[3:]
    parent = root
    for step in path[:-1]:
        parent = parent.left if step == "0" else parent.right
        if parent is None:
            raise ValueError("tree is not a complete binary tree")
    node = Node(value, parent)
    if path[-1] == "0":
        if parent.left is not None:
            raise ValueError("tree is not a complete binary tree")
        parent.left = node
    else:
        if parent.right is not None:
            raise ValueError("tree is not a complete binary tree")
        parent.right = node
    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return root, node


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting the values in order."""
    root: Optional[Node] = None
    for value in values:
        root, _ = heap_insert(root, value)
    return root


def _sift_down(node: Node) -> None:
    while node.left is not None:
        if node.right is None or node.left.value > node.right.value:
            child = node.left
        else:
            child = node.right
        if node.value > child.value:
            break
        node.value, child.value = child.value, node.value
        node = child


def heap_extract(root: Optional[Node]) -> tuple[Optional[Node], int]:
    """Remove the top of the heap and return ``(root, value)``.

    Raises ValueError when the heap is empty.
    """
    if root is None:
        raise ValueError("cannot extract from an empty heap")
    value = root.value
    if root.is_leaf():
        return None, value
    *_, last = _level_nodes(root)
    root.value = last.value
    parent = last.parent
    if parent.right is last:
        parent.right = None
    else:
        parent.left = None
    last.parent = None
    _sift_down(root)
    return root, value


def heap_to_sorted_array(heap: Optional[Node]) -> list[int]:
    """Empty the heap and return its values from largest to smallest."""
    values = []
    while heap is not None:
        heap, value = heap_extract(heap)
        values.append(value)
    return values