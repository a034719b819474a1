import pytest

from setkit.nodes import (
    Node,
    build_tree,
    find,
    get_balance,
    get_height,
    promote_left,
    promote_right,
    rebalance,
    tree_height,
    update_height,
)


def inorder(node):
    if node is None:
        return []
    return inorder(node.left) + [node.value] + inorder(node.right)


def heights_consistent(node):
    if node is None:
        return True
    return (
        node.height == tree_height(node)
        and heights_consistent(node.left)
        and heights_consistent(node.right)
    )


def balanced(node):
    if node is None:
        return True
    return abs(get_balance(node)) <= 1 and balanced(node.left) and balanced(node.right)


def test_find_in_empty_tree():
    tree = build_tree([])
    assert tree is None
    assert not any(find(tree, i) for i in range(1, 11))


def test_find_right_line():
    tree = build_tree([2, -1, 3, -1, -1, -1, 6, -1, -1, -1, -1, -1, -1, -1, 8])
    present = {i for i in range(1, 11) if find(tree, i)}
    assert present == {2, 3, 6, 8}


def test_find_left_line():
    tree = build_tree([10, 7, -1, 6, -1, -1, -1, 2])
    present = {i for i in range(1, 11) if find(tree, i)}
    assert present == {2, 6, 7, 10}


def test_find_balanced_tree():
    tree = build_tree([5, 3, 8, 2, -1, 6, 9])
    present = {i for i in range(1, 11) if find(tree, i)}
    assert present == {2, 3, 5, 6, 8, 9}


def test_build_tree_rejects_orphan():
    with pytest.raises(ValueError, match="index 3 has a null parent"):
        build_tree([1, -1, 2, 3])


def test_build_tree_heights_match_structure():
    tree = build_tree([6, 3, 8, 1, 4, 7, -1, -1, 2, -1, 5])
    assert heights_consistent(tree)
    assert inorder(tree) == [1, 2, 3, 4, 5, 6, 7, 8]


def test_height_helpers():
    node = Node(4, left=Node(2))
    update_height(node)
    assert get_height(None) == 0
    assert get_height(node) == tree_height(node)
    assert get_balance(node) == -get_height(node.left)


def test_promote_left_two_nodes():
    root = build_tree([2, 1])
    new_root = promote_left(root)
    assert new_root.value == 1
    assert new_root.right is root
    assert root.left is None
    assert heights_consistent(new_root)


def test_promote_right_two_nodes():
    root = build_tree([1, -1, 2])
    new_root = promote_right(root)
    assert new_root.value == 2
    assert new_root.left is root
    assert heights_consistent(new_root)


def test_promote_left_bigger_tree_keeps_order():
    root = build_tree([6, 3, 8, 1, 4, 7, -1, -1, 2, -1, 5])
    before = inorder(root)
    new_root = promote_left(root)
    assert new_root.value == 3
    assert inorder(new_root) == before
    assert heights_consistent(new_root)


def test_promote_right_bigger_tree_keeps_order():
    root = build_tree([3, 1, 6, -1, 2, 4, 8, -1, -1, -1, -1, -1, 5, 7])
    before = inorder(root)
    new_root = promote_right(root)
    assert new_root.value == 6
    assert inorder(new_root) == before
    assert heights_consistent(new_root)


def test_rebalance_leaf_is_unchanged():
    root = build_tree([3])
    assert rebalance(root) is root
    assert root.height == tree_height(root)


def test_rebalance_balanced_tree_is_unchanged():
    root = build_tree([5, 3, 8, 2, -1, 6, 9])
    assert rebalance(root) is root
    assert heights_consistent(root)


@pytest.mark.parametrize(
    "flat, new_root_value",
    [
        ([5, 3, 6, 1, 4, -1, -1, -1, 2], 3),
        ([2, 1, 4, -1, -1, 3, 6, -1, -1, -1, -1, -1, -1, 5], 4),
        ([5, 2, 6, 1, 3, -1, -1, -1, -1, -1, 4], 3),
        ([2, 1, 5, -1, -1, 4, 6, -1, -1, -1, -1, 3], 4),
    ],
)
def test_rebalance_imbalances(flat, new_root_value):
    root = build_tree(flat)
    before = inorder(root)
    new_root = rebalance(root)
    assert new_root.value == new_root_value
    assert inorder(new_root) == before
    assert heights_consistent(new_root)
    assert balanced(new_root)