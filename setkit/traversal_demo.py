"""Walk-through of searching binary search trees built from level-order data."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Optional, TypeVar

from setkit.nodes import build_tree, find
from setkit.treeprint import pretty_format

_V = TypeVar("_V")

_TREES: dict[int, list[int]] = {
    1: [],
    2: [2, -1, 3, -1, -1, -1, 6, -1, -1, -1, -1, -1, -1, -1, 8],
    3: [10, 7, -1, 6, -1, -1, -1, 2],
    4: [5, 3, 8, 2, -1, 6, 9],
}

_USAGE = (
    "You must specify which tests you would like to run (your options are 1, 2, 3, 4,\n"
    "and all). You can specify several options by separating them by spaces."
)
_OPTIONS = "1, 2, 3, 4, or all"


def _lookup(table: Mapping[int, _V], number: int) -> _V:
    """Fetch a scenario's data, raising ValueError for an unknown number."""
    try:
        return table[number]
    except KeyError:
        raise ValueError(f"no scenario numbered {number}") from None


def _dispatch(
    argv: Optional[Sequence[str]],
    numbers: Iterable[int],
    render: Callable[[int], str],
    usage: str,
    options: str,
) -> int:
    """Print the scenarios named in ``argv``; "all" prints every one in order."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(usage, file=sys.stderr)
        return 1

    ordered = list(numbers)
    names = {str(number): number for number in ordered}
    for position, arg in enumerate(args):
        if position:
            sys.stdout.write("\n")
        if arg == "all":
            sys.stdout.write("\n".join(render(number) for number in ordered))
        elif arg in names:
            sys.stdout.write(render(names[arg]))
        else:
            print(f"{arg} isn't a valid option ({options})", file=sys.stderr)
    sys.stdout.flush()
    return 0


def scenario(number: int) -> str:
    """Return the transcript of one numbered search scenario.

    Raises ValueError for a number with no scenario.
    """
    root = build_tree(_lookup(_TREES, number))
    searches = "".join(
        f"find(root, {item}) = {str(find(root, item)).lower()}\n" for item in range(1, 11)
    )
    return f"--- Test {number} output ---\n\n{pretty_format(root)}\n{searches}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the scenarios named on the command line ("all" runs every one)."""
    return _dispatch(argv, _TREES, scenario, _USAGE, _OPTIONS)