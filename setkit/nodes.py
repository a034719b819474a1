"""Binary tree nodes and the primitive operations on them.

Subtrees are passed around by their root node (or ``None`` for an empty
subtree). Operations that restructure a subtree return its new root.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node carrying a value and a cached height."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    height: int = 1


def find(root: Optional[Node], item: Any) -> bool:
    """Return True if ``item`` is in the binary search subtree at ``root``."""
    node = root
    while node is not None:
        if node.value == item:
            return True
        node = node.left if item < node.value else node.right
    return False


def tree_height(node: Optional[Node]) -> int:
    """Height of the subtree computed from its structure (empty tree is 0)."""
    if node is None:
        return 0
    return max(tree_height(node.left), tree_height(node.right)) + 1


def build_tree(values: Iterable[int]) -> Optional[Node]:
    """Build a tree from a level-order list where negative values mark gaps.

    The children of position ``i`` sit at ``2*i + 1`` and ``2*i + 2``.
    Heights are filled in from the resulting structure.
    Raises ValueError when a node's parent position is a gap.
    """
    slots = [Node(v) if v >= 0 else None for v in values]
    if not slots:
        return None

    for index, node in enumerate(slots[1:], start=1):
        if node is None:
            continue
        parent = slots[(index - 1) // 2]
        if parent is None:
            raise ValueError(f"value at index {index} has a null parent")
        if index % 2 == 1:
            parent.left = node
        else:
            parent.right = node

    for node in reversed(slots):
        if node is not None:
            update_height(node)

    return slots[0]


def get_height(node: Optional[Node]) -> int:
    """Cached height of ``node``, or 0 for an empty subtree."""
    return 0 if node is None else node.height


def update_height(node: Node) -> None:
    """Recompute ``node.height`` from its children's cached heights."""
    node.height = max(get_height(node.left), get_height(node.right)) + 1


def get_balance(node: Optional[Node]) -> int:
    """Right height minus left height; 0 for an empty subtree."""
    if node is None:
        return 0
    return get_height(node.right) - get_height(node.left)


def promote_left(root: Node) -> Node:
    """Rotate right: the left child becomes the new root, which is returned."""
    new_root = root.left
    root.left = new_root.right
    new_root.right = root
    update_height(root)
    update_height(new_root)
    return new_root


def promote_right(root: Node) -> Node:
    """Rotate left: the right child becomes the new root, which is returned."""
    new_root = root.right
    root.right = new_root.left
    new_root.left = root
    update_height(root)
    update_height(new_root)
    return new_root


def _rebalance_negative(node: Node) -> Node:
    if get_balance(node.left) > 0:
        node.left = promote_right(node.left)
    return promote_left(node)


def _rebalance_positive(node: Node) -> Node:
    if get_balance(node.right) < 0:
        node.right = promote_left(node.right)
    return promote_right(node)


def rebalance(root: Node) -> Node:
    """Restore the AVL balance at ``root`` and return the subtree's new root."""
    balance = get_balance(root)
    if balance > 1:
        root = _rebalance_positive(root)
    elif balance < -1:
        root = _rebalance_negative(root)
    update_height(root)
    return root