# setkit

Small, readable building blocks for sets and binary trees:

- `setkit.nodes` – a binary tree `Node` and the operations that work on it,
  including the AVL rotations
- `setkit.treeprint` – text renderings of a tree
- `setkit.hashset.HashSet` – a hash set with chained buckets
- `setkit.timing.Timer` – a stopwatch with nanosecond resolution

## Hash set

`HashSet` stores hashable items in buckets. It starts with 5 buckets. Before
each insertion, if the fill factor has reached 0.8, it grows to
`2 * capacity + 1` buckets and rehashes every item.

```python
from setkit.hashset import HashSet

s = HashSet()
s.insert("igloo")     # True
s.insert("igloo")     # False
"igloo" in s          # True
len(s)                # 1
s.remove("violin")    # False
s.clear()             # back to 5 buckets, no items
```

The `capacity` property reports the current number of buckets.

## Tree nodes

A `Node` holds a `value`, `left` and `right` children and a cached
`height`. A leaf has a height of 1.

- `build_tree(values)` builds a tree from a level-order list in which a
  negative value marks a missing position. The children of position `i` sit
  at `2*i + 1` and `2*i + 2`. The function fills in the heights and raises
  `ValueError` when a node's parent position is empty.
- `find(root, item)` searches a binary search tree.
- `tree_height(node)` computes a height from the tree's structure.
  `get_height(node)` reads the cached height, and `update_height(node)`
  recomputes that cached height from the node's children.
- `get_balance(node)` returns the right height minus the left height.
- `promote_left(root)` and `promote_right(root)` rotate a subtree.
  `rebalance(root)` restores the AVL balance at `root`. Each of the three
  returns the new root of the subtree.

```python
from setkit.nodes import build_tree, rebalance
from setkit.treeprint import Style, pretty_format, ugly_format

root = rebalance(build_tree([5, 3, 6, 1, 4, -1, -1, -1, 2]))
print(pretty_format(root, Style.HEIGHT))
print(ugly_format(root))
```

## Printing trees

`pretty_format(root, style)` lays a tree out level by level in a tree-like
shape and separates the levels with blank lines. It suits short trees with
values of at most two digits. `ugly_format(root, style)` lists each node with
its two children in preorder, one line per node, and a missing child shows
as underscores. For an empty tree, both functions return `"Empty tree\n"`.

`Style` controls how each node is drawn:

- `Style.PLAIN` draws the value alone (the default)
- `Style.HEIGHT` draws `value|height`
- `Style.PADDED_HEIGHT` draws `value|height` with the value right-aligned
  in two columns

## Timer

```python
from setkit.timing import Timer

with Timer() as timer:
    ...
timer.milliseconds()
```

`start()` and `stop()` can also be called directly. While the timer runs,
`nanoseconds()` and `milliseconds()` measure against the current time. After
`stop()`, the reading stays fixed. If the timer was never started, reading it
raises `RuntimeError`.

## Command-line demos

Each demo walks through a set of fixed, numbered scenarios and prints every
operation with its result. Pass one or more scenario numbers, or `all`:

```
setkit-traversal-demo all
setkit-rebalance-demo 7
setkit-hashset-demo 1 5
```

- `setkit-traversal-demo` (scenarios 1–4) searches trees built with
  `build_tree`.
- `setkit-rebalance-demo` (scenarios 1–10) applies rotations and
  `rebalance`, then prints the tree before and after each one.
- `setkit-hashset-demo` (scenarios 1–5) inserts, removes, counts and clears
  items in a `HashSet`. Scenario 5 inserts 0 to 999 and then checks that
  every one of them is present.

Each module also provides `scenario(number)`, which returns a scenario's
transcript as a string. An unknown option is reported on standard error. If
you run a demo without arguments, it prints the available options and exits
with status 1.

## What is not included

The package has no ready-made tree-backed set classes. Binary trees exist
here only as bare `Node` structures with helper functions, and no class
manages insertion and removal in a binary search tree or an AVL tree for
you. There is no list-backed set and no benchmark command for comparing
insertion times between containers.

## Tests

```
pip install -e ".[test]"
pytest
```