import pytest

from arbor.traversal import inorder
from arbor.tree import Node, lowest_common_ancestor, rotate_left, rotate_right


@pytest.fixture
def tree():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    left.insert_left(6)
    left.insert_right(56)
    right.insert_left(256)
    right.insert_right(512)
    return root


def test_new_node_is_not_linked_into_parent():
    parent = Node(1)
    child = Node(2, parent)
    assert child.parent is parent
    assert child.left is None and child.right is None
    assert parent.left is None and parent.right is None


def test_insert_left_on_empty_slot():
    root = Node(98)
    node = root.insert_left(12)
    assert root.left is node
    assert node.parent is root
    assert node.value == 12


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.parent is root


def test_insert_right_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_right(402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.parent is root


def test_is_leaf_and_is_root(tree):
    assert tree.is_root() is True
    assert tree.is_leaf() is False
    assert tree.left.left.is_leaf() is True
    assert tree.left.is_root() is False
    assert tree.left.is_leaf() is False


def test_depth_increases_by_one_per_level(tree):
    assert tree.depth() == 0
    assert tree.left.depth() == tree.depth() + 1
    assert tree.left.right.depth() == tree.left.depth() + 1


def test_sibling(tree):
    assert tree.left.sibling() is tree.right
    assert tree.right.sibling() is tree.left
    assert tree.sibling() is None


def test_sibling_missing():
    root = Node(1)
    child = root.insert_left(2)
    assert child.sibling() is None


def test_uncle(tree):
    assert tree.left.left.uncle() is tree.right
    assert tree.right.right.uncle() is tree.left
    assert tree.left.uncle() is None
    assert tree.uncle() is None


def test_lowest_common_ancestor(tree):
    a = tree.left.left
    b = tree.left.right
    c = tree.right.left
    assert lowest_common_ancestor(a, b) is tree.left
    assert lowest_common_ancestor(a, c) is tree
    assert lowest_common_ancestor(tree.left, a) is tree.left
    assert lowest_common_ancestor(a, a) is a


def test_lowest_common_ancestor_none_and_disjoint():
    assert lowest_common_ancestor(None, Node(1)) is None
    assert lowest_common_ancestor(Node(1), None) is None
    assert lowest_common_ancestor(Node(1), Node(2)) is None


def test_rotate_left_chain():
    root = Node(98)
    mid = root.insert_right(128)
    top = mid.insert_right(402)
    new_root = rotate_left(root)
    assert new_root is mid
    assert mid.parent is None
    assert mid.left is root and mid.right is top
    assert root.parent is mid
    assert root.right is None


def test_rotate_right_chain():
    root = Node(98)
    mid = root.insert_left(64)
    low = mid.insert_left(32)
    new_root = rotate_right(root)
    assert new_root is mid
    assert mid.parent is None
    assert mid.right is root and mid.left is low
    assert root.parent is mid
    assert root.left is None


def test_rotations_preserve_inorder(tree):
    before = list(inorder(tree))
    rotated = rotate_left(tree)
    assert list(inorder(rotated)) == before
    back = rotate_right(rotated)
    assert back is tree
    assert list(inorder(back)) == before


def test_rotate_moves_inner_child_across(tree):
    inner = tree.right.left
    new_root = rotate_left(tree)
    assert tree.right is inner
    assert inner.parent is tree
    assert new_root.left is tree


def test_rotate_subtree_relinks_grandparent(tree):
    sub = tree.left
    new_sub = rotate_right(sub)
    assert tree.left is new_sub
    assert new_sub.parent is tree
    assert sub.parent is new_sub


def test_rotate_without_child_returns_same_node():
    lone = Node(5)
    assert rotate_left(lone) is lone
    assert rotate_right(lone) is lone
    assert rotate_left(None) is None
    assert rotate_right(None) is None


def test_delete_detaches_subtree(tree):
    left = tree.left
    leaf = left.left
    left.delete()
    assert tree.left is None
    assert left.parent is None
    assert left.left is None and left.right is None
    assert leaf.parent is None
    assert list(inorder(tree)) == [98, 256, 402, 512]