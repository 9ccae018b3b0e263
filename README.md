# treeworks

Compact, readable implementations of a few classic data structures, written
to be studied as much as used:

- `treeworks.cube.Cube` — a dataclass cube with a mutable edge `length`,
  `volume()` and `surface_area()`. Two cubes compare equal when their lengths
  are equal.
- `treeworks.value_tree.ValueBinaryTree` — a binary tree built level by level,
  left to right, from an iterable (a complete tree), with `pre_order`,
  `in_order` and `post_order` traversals that yield the stored values.
- `treeworks.avl.AVLTree` — a key/data AVL tree that rebalances on insertion
  and removal and, by default, verifies its own height, balance and ordering
  invariants after every change.

The lower-level pieces are available as well: `treeworks.avl_node` (the
`AVLNode` type, `height`, `balance_factor`, the rotations and
`ensure_balance`), `treeworks.avl_remove.remove_node`, and
`treeworks.avl_checks` (`check_heights`, `check_balance`, `check_order`,
`check_invariants`, `format_in_order`, `format_vertical`).

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Using the AVL tree

```python
from treeworks.avl import AVLTree

tree = AVLTree()
for key in (37, 19, 51, 55, 4, 11):
    tree.insert(key, str(key))

tree.find(51)          # "51"
51 in tree             # True
tree.remove(11)        # "11"
list(tree.items())     # (key, data) pairs in ascending key order
print(tree.format_in_order())
print(tree.format_vertical())
```

- `find` and `remove` raise `KeyError` for a missing key.
- `insert` raises `ValueError` for a key that is already present.
- An empty tree is falsy; `clear()` empties it.
- `check_invariants()` returns `True` or raises
  `treeworks.avl_node.InvariantError`. It runs after every `insert` and
  `remove` while the `debug_checks` attribute is true (the default); set it
  to `False` to skip those checks.

## Traversals

```python
from treeworks.value_tree import TreeNode, ValueBinaryTree

tree = ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])
list(tree.pre_order())   # [1, 2, 4, 5, 3, 6, 7]
list(tree.in_order())    # [4, 2, 5, 1, 6, 3, 7]
list(tree.post_order())  # [4, 5, 2, 6, 7, 3, 1]
```

Each traversal starts at the root when called without an argument, or at any
node passed to it. `root()` returns the root `TreeNode`, whose `data`,
`left` and `right` may be edited directly to reshape the tree;
`create_complete_tree(contents)` rebuilds it and `clear()` empties it.

## Command line

The `treeworks` command prints the demonstrations:

```
treeworks              # all of them
treeworks cube         # indexing a sequence and searching a list of cubes
treeworks traversal    # traversals of a number tree and an expression tree
treeworks avl          # inserting, finding and removing in an AVL tree
treeworks --help
```

## What it does not do

Everything lives in memory: no tree is saved to or loaded from a file. The
AVL tree allows no duplicate keys and offers no range queries beyond
iterating `items()` in order.