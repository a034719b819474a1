"""Walk-through of tree rotations and AVL rebalancing on hand-built trees."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Optional

from setkit.nodes import Node, build_tree, promote_left, promote_right, rebalance
from setkit.traversal_demo import _dispatch, _lookup
from setkit.treeprint import Style, pretty_format

_CASES: dict[int, tuple[list[int], Callable[[Node], Node]]] = {
    1: ([2, 1], promote_left),
    2: ([6, 3, 8, 1, 4, 7, -1, -1, 2, -1, 5], promote_left),
    3: ([1, -1, 2], promote_right),
    4: ([3, 1, 6, -1, 2, 4, 8, -1, -1, -1, -1, -1, 5, 7], promote_right),
    5: ([3], rebalance),
    6: ([5, 3, 8, 2, -1, 6, 9], rebalance),
    7: ([5, 3, 6, 1, 4, -1, -1, -1, 2], rebalance),
    8: ([2, 1, 4, -1, -1, 3, 6, -1, -1, -1, -1, -1, -1, 5], rebalance),
    9: ([5, 2, 6, 1, 3, -1, -1, -1, -1, -1, 4], rebalance),
    10: ([2, 1, 5, -1, -1, 4, 6, -1, -1, -1, -1, 3], rebalance),
}

_USAGE = (
    "You must specify which tests you would like to run (your options are 1, 2, 3, 4, 5, 6,\n"
    "7, 8, 9, 10 and all). You can specify several options by separating them by spaces."
)
_OPTIONS = "1, 2, 3, 4, 5, 6, 7, 8, 9, 10, or all"


def scenario(number: int) -> str:
    """Return the transcript of one numbered rotation scenario.

    Raises ValueError for a number with no scenario.
    """
    values, operation = _lookup(_CASES, number)
    root = build_tree(values)
    before = pretty_format(root, Style.HEIGHT)
    after = pretty_format(operation(root), Style.HEIGHT)
    return (
        f"--- Test {number} output ---\n\n"
        f"{before}\n"
        f"{operation.__name__}(root)\n\n"
        f"{after}"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the scenarios named on the command line ("all" runs every one)."""
    return _dispatch(argv, _CASES, scenario, _USAGE, _OPTIONS)