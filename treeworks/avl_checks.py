"""Consistency checks and text renderings for AVL subtrees."""

from __future__ import annotations

import sys
from itertools import pairwise
from typing import Any, Iterator, Optional

from treeworks.avl_node import AVLNode, InvariantError, balance_factor, height


def check_heights(node: Optional[AVLNode]) -> bool:
    """Return whether every recorded height is one more than its taller child's."""
    if node is None:
        return True
    if not check_heights(node.left) or not check_heights(node.right):
        return False
    here = height(node)
    left = height(node.left)
    right = height(node.right)
    ok = here - max(left, right) == 1
    if not ok:
        print("height check internals:", file=sys.stderr)
        print(f"here: {here}", file=sys.stderr)
        print(f"left: {left}", file=sys.stderr)
        print(f"right: {right}", file=sys.stderr)
    return ok


def check_balance(node: Optional[AVLNode]) -> bool:
    """Return whether every node's children differ in recorded height by at most one."""
    if node is None:
        return True
    if not check_balance(node.left) or not check_balance(node.right):
        return False
    return -1 <= height(node.right) - height(node.left) <= 1


def _keys_in_order(node: Optional[AVLNode]) -> Iterator[Any]:
    stack: list[AVLNode] = []
    cur = node
    while stack or cur is not None:
        while cur is not None:
            stack.append(cur)
            cur = cur.left
        cur = stack.pop()
        yield cur.key
        cur = cur.right


def check_order(node: Optional[AVLNode]) -> bool:
    """Return whether the keys, read in order, are strictly increasing."""
    for first, second in pairwise(_keys_in_order(node)):
        if first >= second:
            print(
                "ERROR: these keys should be in strictly increasing order:",
                file=sys.stderr,
            )
            print(f"{first} followed by {second}", file=sys.stderr)
            return False
    return True


def check_invariants(node: Optional[AVLNode]) -> bool:
    """Run every check, raising InvariantError on the first that fails."""
    if not check_heights(node):
        raise InvariantError("height check failed")
    if not check_balance(node):
        raise InvariantError("balance check failed")
    if not check_order(node):
        raise InvariantError("order check failed")
    return True


def format_in_order(node: Optional[AVLNode]) -> str:
    """Render the subtree in order as "[key : data]" items, a space marking each gap."""
    if node is None:
        return " "
    return (
        format_in_order(node.left)
        + f"[{node.key} : {node.data}]"
        + format_in_order(node.right)
    )


def format_vertical(node: Optional[AVLNode]) -> str:
    """Render the subtree one node per line, children indented beneath their parent.

    Leaves list no children; a node with one child shows "[]" for the missing one.
    """
    lines: list[str] = []
    stack: list[tuple[Optional[AVLNode], int]] = [(node, 0)]
    while stack:
        cur, margin = stack.pop()
        prefix = " " * margin + ("|- " if margin > 0 else ". ")
        if cur is None:
            lines.append(prefix + "[]")
            continue
        if cur.left is not None or cur.right is not None:
            stack.append((cur.right, margin + 1))
            stack.append((cur.left, margin + 1))
        lines.append(
            f'{prefix}[{cur.key}: "{cur.data}"] '
            f"Bal: {balance_factor(cur)} Ht: {height(cur)}"
        )
    return "".join(line + "\n" for line in lines)