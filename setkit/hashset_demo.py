"""Walk-through of inserting into and removing from a hash set."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import Any, Optional

from setkit.hashset import HashSet

_USAGE = (
    "You must specify which tests you would like to run (your options are 1, 2, 3, 4,\n"
    "5, and all). You can specify several options by separating them by spaces."
)
_OPTIONS = "1, 2, 3, 4, 5, or all"
_STRESS_COUNT = 1000


class ScenarioError(RuntimeError):
    """A scenario found the set in a wrong state; carries the output so far."""

    def __init__(self, message: str, output: str) -> None:
        super().__init__(message)
        self.output = output


def _flag(value: bool) -> str:
    return "true" if value else "false"


class _Transcript:
    """Collects the output of one scenario."""

    def __init__(self, number: int) -> None:
        self._parts = [f"--- Test {number} output ---\n\n"]
        self.set = HashSet()

    def line(self, text: str = "") -> None:
        self._parts.append(text + "\n")

    def insert(self, *items: Any) -> None:
        for item in items:
            self.line(f"set.insert({item}) = {_flag(self.set.insert(item))}")

    def remove(self, *items: Any) -> None:
        for item in items:
            self.line(f"set.remove({item}) = {_flag(self.set.remove(item))}")

    def contains(self, *items: Any) -> None:
        for item in items:
            self.line(f"set.contains({item}) = {_flag(self.set.contains(item))}")

    def clear(self) -> None:
        self.set.clear()
        self.line("set.clear()")

    def size(self) -> None:
        self.line(f"set.size() = {len(self.set)}")

    def text(self) -> str:
        return "".join(self._parts)


def _insert(out: _Transcript) -> None:
    out.insert(1, 2, 3, 4, 5)
    out.line()
    out.insert(1, 2, 3, 4, 5)
    out.line()
    out.insert(6, 6)


def _contains(out: _Transcript) -> None:
    out.insert(2, 3, 4, 6, 7, 10)
    out.line()
    out.contains(*range(1, 11))


def _remove(out: _Transcript) -> None:
    out.insert("quilt", "pineapple", "utopia", "unity")
    out.line()
    out.remove("quilt", "utopia", "seahorse")
    out.line()
    out.contains("quilt", "pineapple", "utopia", "unity", "seahorse")


def _size_and_clear(out: _Transcript) -> None:
    out.size()
    out.line()
    out.insert("laughter", "freedom", "igloo")
    out.size()
    out.line()
    out.insert("laughter", "igloo")
    out.size()
    out.line()
    out.remove("freedom", "igloo")
    out.size()
    out.line()
    out.remove("igloo")
    out.size()
    out.line()
    out.clear()
    out.size()
    out.line()
    out.insert("elephant", "violin")
    out.size()
    out.line()
    out.contains("laughter", "freedom", "igloo", "elephant", "violin")


def _stress(out: _Transcript) -> None:
    last = _STRESS_COUNT - 1
    out.line(f"set.insert(0...{last})")
    for i in range(_STRESS_COUNT):
        out.set.insert(i)
    out.line(f"assert set.contains(i) for all i 0...{last}")
    missing = next((i for i in range(_STRESS_COUNT) if not out.set.contains(i)), None)
    if missing is not None:
        raise ScenarioError(
            f"set.contains({missing}) = false, but it should be true", out.text()
        )


_SCENARIOS: dict[int, Callable[[_Transcript], None]] = {
    1: _insert,
    2: _contains,
    3: _remove,
    4: _size_and_clear,
    5: _stress,
}


def scenario(number: int) -> str:
    """Return the transcript of one numbered hash set scenario.

    Raises ValueError for a number with no scenario and ScenarioError when
    the set misbehaves.
    """
    try:
        run = _SCENARIOS[number]
    except KeyError:
        raise ValueError(f"no scenario numbered {number}") from None
    out = _Transcript(number)
    run(out)
    return out.text()


def _emit(number: int) -> None:
    try:
        sys.stdout.write(scenario(number))
    except ScenarioError as error:
        sys.stdout.write(error.output)
        sys.stdout.flush()
        print(f"\nERROR: {error}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the scenarios named on the command line ("all" runs every one)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(_USAGE, file=sys.stderr)
        return 1

    names = {str(number): number for number in _SCENARIOS}
    for position, arg in enumerate(args):
        if arg == "all":
            for index, number in enumerate(_SCENARIOS):
                if index:
                    sys.stdout.write("\n")
                _emit(number)
        elif arg in names:
            _emit(names[arg])
        else:
            print(f"{arg} isn't a valid option ({_OPTIONS})", file=sys.stderr)
        if position + 1 != len(args):
            sys.stdout.write("\n")
    sys.stdout.flush()
    return 0