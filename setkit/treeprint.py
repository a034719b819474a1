"""Text renderings of binary trees: a shaped layout and a per-node listing."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Optional

from setkit.nodes import Node, tree_height

EMPTY_TREE = "Empty tree\n"


class Style(Enum):
    """How node cells are drawn.

    PLAIN shows values right-aligned in two columns, HEIGHT shows
    ``value|height`` unpadded and PADDED_HEIGHT shows ``value|height``
    with the value right-aligned in two columns.
    """

    PLAIN = "plain"
    HEIGHT = "height"
    PADDED_HEIGHT = "padded_height"

    @property
    def cell_width(self) -> int:
        return {Style.PLAIN: 2, Style.HEIGHT: 3, Style.PADDED_HEIGHT: 4}[self]

    def gap(self, height: int, level: int) -> int:
        """Spaces between neighbouring cells on ``level``."""
        depth = height - level
        if self is Style.PLAIN:
            return (1 << (depth + 1)) - 2
        if self is Style.HEIGHT:
            return 3 * (1 << depth) - 3
        return (1 << (depth + 2)) - 4

    def indent(self, gap: int) -> int:
        """Spaces before the first cell of a level whose gap is ``gap``."""
        if self is Style.PLAIN:
            return max(0, gap // 2 - 1)
        return max(0, (gap - self.cell_width) // 2)

    def cell(self, node: Optional[Node]) -> str:
        """The shaped-layout text for one position."""
        if node is None:
            return " " * self.cell_width
        if self is Style.PLAIN:
            return f"{node.value:>2}"
        if self is Style.HEIGHT:
            return f"{node.value}|{node.height}"
        return f"{node.value:>2}|{node.height}"

    def label(self, node: Optional[Node]) -> str:
        """The listing text for one node or a missing child."""
        if node is None:
            return "_" * self.cell_width
        if self is Style.PLAIN:
            return str(node.value)
        return f"{node.value}|{node.height}"


def pretty_format(root: Optional[Node], style: Style = Style.PLAIN) -> str:
    """Render the tree level by level in a tree-like shape.

    Levels are separated by a blank line. Suits short trees with values of
    at most two digits.
    """
    if root is None:
        return EMPTY_TREE

    height = tree_height(root)
    level_nodes: list[Optional[Node]] = [root]
    lines = []
    for level in range(height):
        gap = style.gap(height, level)
        cells = (style.cell(node) for node in level_nodes)
        lines.append(" " * style.indent(gap) + (" " * gap).join(cells))
        level_nodes = [
            child
            for node in level_nodes
            for child in ((None, None) if node is None else (node.left, node.right))
        ]
    return "\n\n".join(lines) + "\n"


def _preorder(root: Node) -> Iterator[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        for child in (node.right, node.left):
            if child is not None:
                stack.append(child)


def ugly_format(root: Optional[Node], style: Style = Style.PLAIN) -> str:
    """List each node with its children in preorder, one node per line."""
    if root is None:
        return EMPTY_TREE
    return "".join(
        f"{style.label(node)}: {style.label(node.left)} {style.label(node.right)}\n"
        for node in _preorder(root)
    )