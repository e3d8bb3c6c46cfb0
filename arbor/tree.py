"""Binary tree nodes and the structural operations on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node with a parent does not attach it to that parent;
    use :meth:`insert_left` or :meth:`insert_right` for that.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new node as the left child, pushing any old left child below it."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new node as the right child, pushing any old right child below it."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Detach this subtree from its parent and unlink every node in it."""
        if self.parent is not None:
            if self.parent.left is self:
                self.parent.left = None
            elif self.parent.right is self:
                self.parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.left = node.right = node.parent = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        return sum(1 for _ in _lineage(self.parent))

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def __repr__(self) -> str:
        return f"Node(value={self.value!r})"


def _lineage(node: Optional[Node]) -> Iterator[Node]:
    """Yield the node and then each of its ancestors up to the root."""
    while node is not None:
        yield node
        node = node.parent


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the lowest node that is an ancestor of both nodes (a node counts as its own)."""
    if first is None or second is None:
        return None
    second_line = set(_lineage(second))
    return next((node for node in _lineage(first) if node in second_line), None)


def _relink(parent: Optional[Node], old: Node, new: Node) -> None:
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate the subtree left and return its new root."""
    if tree is None:
        return None
    pivot = tree.right
    if pivot is None:
        return tree
    if pivot.left is not None:
        pivot.left.parent = tree
    tree.right = pivot.left
    pivot.left = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    _relink(pivot.parent, tree, pivot)
    return pivot


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate the subtree right and return its new root."""
    if tree is None:
        return None
    pivot = tree.left
    if pivot is None:
        return tree
    if pivot.right is not None:
        pivot.right.parent = tree
    tree.left = pivot.right
    pivot.right = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    _relink(pivot.parent, tree, pivot)
    return pivot