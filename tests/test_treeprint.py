import pytest

from setkit.nodes import build_tree, tree_height
from setkit.treeprint import Style, pretty_format, ugly_format

EXAMPLE = [15, 13, 17, 12, -1, 16, 18]


@pytest.mark.parametrize("style", list(Style))
def test_empty_tree(style):
    assert pretty_format(None, style) == "Empty tree\n"
    assert ugly_format(None, style) == "Empty tree\n"


def test_pretty_plain_worked_example():
    tree = build_tree(EXAMPLE)
    assert pretty_format(tree) == "      15\n\n  13      17\n\n12      16  18\n"


def test_ugly_plain_worked_example():
    tree = build_tree(EXAMPLE)
    assert ugly_format(tree, Style.PLAIN) == (
        "15: 13 17\n"
        "13: 12 __\n"
        "12: __ __\n"
        "17: 16 18\n"
        "16: __ __\n"
        "18: __ __\n"
    )


def test_pretty_height_single_node():
    assert pretty_format(build_tree([3]), Style.HEIGHT) == "3|1\n"


def test_pretty_padded_height_single_node():
    assert pretty_format(build_tree([3]), Style.PADDED_HEIGHT) == " 3|1\n"


def test_ugly_height_marks_missing_children():
    tree = build_tree([2, 1])
    assert ugly_format(tree, Style.HEIGHT) == "2|2: 1|1 ___\n1|1: ___ ___\n"


@pytest.mark.parametrize("style", list(Style))
def test_pretty_line_structure(style):
    tree = build_tree([6, 3, 8, 1, 4, 7, -1, -1, 2, -1, 5])
    lines = pretty_format(tree, style).split("\n")
    height = tree_height(tree)
    assert lines[-1] == ""
    body = lines[:-1]
    assert len(body) == 2 * height - 1
    assert all(line == "" for line in body[1::2])
    level_values = [line.split() for line in body[::2]]
    assert level_values[0][0].split("|")[0] == "6"
    flat = [cell.split("|")[0] for row in level_values for cell in row]
    assert sorted(int(v) for v in flat) == list(range(1, 9))


@pytest.mark.parametrize("style", list(Style))
def test_ugly_one_line_per_node_in_preorder(style):
    tree = build_tree([5, 3, 8, 2, -1, 6, 9])
    lines = ugly_format(tree, style).splitlines()
    heads = [line.split(":")[0].split("|")[0] for line in lines]
    assert heads == ["5", "3", "2", "8", "6", "9"]


def test_ugly_heights_shown_with_values():
    tree = build_tree([5, 3, 8, 2, -1, 6, 9])
    first = ugly_format(tree, Style.PADDED_HEIGHT).splitlines()[0]
    assert first == f"5|{tree.height}: 3|{tree.left.height} 8|{tree.right.height}"