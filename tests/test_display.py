import io

from arbor.display import print_tree, render
from arbor.metrics import height
from arbor.traversal import preorder
from arbor.tree import Node


def _sample():
    root = Node(98)
    n12 = root.insert_left(12)
    n402 = root.insert_right(402)
    n12.insert_left(6)
    n12.insert_right(56)
    n402.insert_left(256)
    return root


def test_empty_tree_renders_nothing():
    assert render(None) == ""


def test_single_node():
    assert render(Node(98)) == "(098)\n"


def test_three_nodes():
    root = Node(98)
    root.insert_left(12)
    root.insert_right(402)
    assert render(root) == "  .--(098)--.\n(012)     (402)\n"


def test_one_line_per_level():
    root = _sample()
    lines = render(root).splitlines()
    assert len(lines) == height(root) + 1


def test_every_value_is_drawn():
    root = _sample()
    text = render(root)
    for value in preorder(root):
        assert str(value) in text


def test_lines_have_no_trailing_spaces():
    for line in render(_sample()).splitlines():
        assert line == line.rstrip(" ")


def test_negative_value():
    assert "(-05)" in render(Node(-5))


def test_print_tree_writes_render():
    root = _sample()
    buffer = io.StringIO()
    print_tree(root, buffer)
    assert buffer.getvalue() == render(root)


def test_print_tree_none_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""


def test_subtree_renders_without_connector_above_root():
    root = _sample()
    first_line = render(root.left).splitlines()[0]
    assert first_line.strip().startswith(".")
    assert render(root.left).splitlines()[-1].startswith("(006)")