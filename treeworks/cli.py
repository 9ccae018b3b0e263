"""Command-line demonstrations of the cube, value tree and AVL tree types."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from treeworks.avl import AVLTree
from treeworks.cube import Cube
from treeworks.value_tree import TreeNode, ValueBinaryTree

_PRIMES = (2, 3, 5, 7, 11, 13, 15, 17, 21, 23)


def _spaced(values) -> str:
    return "".join(f"{value} " for value in values)


def cube_demo() -> str:
    """Index a fixed sequence, grow a list of cubes and search it for a target."""
    lines = [str(_PRIMES[3])]

    cubes = [Cube(11), Cube(42), Cube(400)]
    lines.append(f"Initial size: {len(cubes)}")
    cubes.append(Cube(800))
    lines.append(f"Size after adding: {len(cubes)}")

    target = Cube(400)
    lines.extend(
        f"Found target at [{index}]"
        for index, cube in enumerate(cubes)
        if cube == target
    )
    return "\n".join(lines) + "\n"


def traversal_demo() -> str:
    """Show pre-, in- and post-order traversals of two example trees."""
    parts: list[str] = []

    empty: ValueBinaryTree[int] = ValueBinaryTree()
    parts.append(
        "An empty tree has no nodes to traverse: "
        f"[{_spaced(empty.in_order())}]\n\n"
    )

    seven_tree = ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])
    root = seven_tree.root()
    for name, walk in (
        ("pre-order", seven_tree.pre_order),
        ("in-order", seven_tree.in_order),
        ("post-order", seven_tree.post_order),
    ):
        parts.append(f"Example of {name} traversal with a complete tree: \n")
        parts.append(_spaced(walk(root)) + "\n\n")

    algebra_tree = ValueBinaryTree(["+", "-", "*", "a", "/", "d", "e"])
    root = algebra_tree.root()
    assert root is not None and root.left is not None
    slash = root.left.right
    assert slash is not None
    slash.left = TreeNode("b")
    slash.right = TreeNode("c")

    for name, walk, remark in (
        ("Pre-order", algebra_tree.pre_order, " (This output won't make sense...)"),
        ("In-order", algebra_tree.in_order, " (This one should make sense.)"),
        ("Post-order", algebra_tree.post_order, " (This output won't make sense...)"),
    ):
        parts.append(f"{name} traversal of algebraic syntax tree:\n{remark}\n")
        parts.append(_spaced(walk(root)) + "\n\n")

    return "".join(parts)


def _extended_avl_exercise(tree: AVLTree) -> None:
    tree.clear()
    for i in range(10, 901):
        tree.insert(i, str(i))
    for i in range(10, 901, 7):
        tree.remove(i)
    for i in range(900, 9, -3):
        if i in tree:
            tree.remove(i)
    for i in range(10, 900, 2):
        for key in (i, i + 1, 900 - i + 10):
            if key not in tree:
                tree.insert(key, str(key))
    for i in range(10, 901, 7):
        for key in (i, 900 - i + 10):
            if key in tree:
                tree.remove(key)


def avl_demo() -> str:
    """Insert, find and remove entries in an AVL tree, then stress-test it."""
    out: list[str] = ["\nCreating AVL tree now..."]
    tree = AVLTree()

    empty_at_start = not tree
    out.append(f"AVL tree empty at the beginning? {str(empty_at_start).lower()}")
    if not empty_at_start:
        raise RuntimeError("empty check should have been true at the beginning")

    out.append("Inserting items...")
    for key in (37, 19, 51, 55, 4, 11, 20, 2, 3, 5, 6, 7):
        tree.insert(key, str(key))

    empty_after = not tree
    out.append(f"AVL tree empty after insertions? {str(empty_after).lower()}")
    if empty_after:
        raise RuntimeError("empty check should have been false after insertions")

    out.append("\nCurrent tree contents in order:")
    out.append(tree.format_in_order())

    out.append("\nUsing find to show that 51 has been inserted:")
    out.append(f"t.find(51): {tree.find(51)}")

    out.append("\nTrying to remove some items:")
    for key in (11, 51, 19, 6):
        out.append(f"t.remove({key}): {tree.remove(key)}")

    out.append("\nCurrent tree contents in order:")
    out.append(tree.format_in_order())

    out.append("\nVertical printout of the tree:")
    out.append(tree.format_vertical().rstrip("\n"))

    for label, action, call in (
        ("find", "Attempting to find a non-existent item, 51: ", lambda: tree.find(51)),
        ("remove", "Attempting to remove a non-existent item, 99: ", lambda: tree.remove(99)),
    ):
        out.append("")
        out.append(action)
        try:
            call()
        except KeyError as error:
            out.append("(OK) Caught example exception with the following message:")
            out.append(f'"{error.args[0]}"')

    out.append("\n --- Beginning extended tests ---")
    out.append("  (Many items will be inserted and removed silently...)")
    _extended_avl_exercise(tree)
    out.append("\nInsert and remove tests OK")
    out.append("\n --- End of extended tests ---")

    tree.clear()
    out.append("\nAVL tree cleared. (All nodes were removed...)")
    out.append("\nSUCCESS - The program is exiting normally.")
    return "\n".join(out) + "\n"


_DEMOS: dict[str, Callable[[], str]] = {
    "cube": cube_demo,
    "traversal": traversal_demo,
    "avl": avl_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen demonstration, or all of them, printing the output."""
    parser = argparse.ArgumentParser(
        prog="treeworks", description="Run data structure demonstrations."
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default="all",
        choices=[*_DEMOS, "all"],
        help="which demonstration to run (default: all)",
    )
    args = parser.parse_args(argv)
    chosen = list(_DEMOS.values()) if args.demo == "all" else [_DEMOS[args.demo]]
    for demo in chosen:
        print(demo(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())