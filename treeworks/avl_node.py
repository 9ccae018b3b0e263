"""Nodes of an AVL tree and the height, balance and rotation operations on them.

Each operation that can change which node roots a subtree returns the new
root; callers store it back into whatever pointed at the old one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class InvariantError(RuntimeError):
    """Raised when an AVL structure is found in a state it should never reach."""


@dataclass(eq=False)
class AVLNode:
    """A tree node with a key, its data, two children and a cached subtree height."""

    key: Any
    data: Any
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    height: int = 0


def height(node: Optional[AVLNode]) -> int:
    """Return the recorded height of a subtree; an absent subtree has height -1."""
    return -1 if node is None else node.height


def balance_factor(node: Optional[AVLNode]) -> int:
    """Return right height minus left height; an absent node is balanced (0)."""
    if node is None:
        return 0
    return height(node.right) - height(node.left)


def update_height(node: Optional[AVLNode]) -> None:
    """Recompute a node's height from its children's recorded heights."""
    if node is None:
        return
    node.height = 1 + max(height(node.left), height(node.right))


def rotate_left(node: Optional[AVLNode]) -> AVLNode:
    """Rotate the subtree left so its right child becomes the root; return that root."""
    if node is None:
        raise InvariantError("rotate_left called on an empty subtree")
    pivot = node.right
    if pivot is None:
        raise InvariantError("rotate_left: right child is missing")
    node.right = pivot.left
    pivot.left = node
    update_height(node)
    update_height(pivot)
    return pivot


def rotate_right(node: Optional[AVLNode]) -> AVLNode:
    """Rotate the subtree right so its left child becomes the root; return that root."""
    if node is None:
        raise InvariantError("rotate_right called on an empty subtree")
    pivot = node.left
    if pivot is None:
        raise InvariantError("rotate_right: left child is missing")
    node.left = pivot.right
    pivot.right = node
    update_height(node)
    update_height(pivot)
    return pivot


def rotate_right_left(node: Optional[AVLNode]) -> AVLNode:
    """Rotate the right child right, then the node left; return the new root."""
    if node is None:
        raise InvariantError("rotate_right_left called on an empty subtree")
    node.right = rotate_right(node.right)
    return rotate_left(node)


def rotate_left_right(node: Optional[AVLNode]) -> AVLNode:
    """Rotate the left child left, then the node right; return the new root."""
    if node is None:
        raise InvariantError("rotate_left_right called on an empty subtree")
    node.left = rotate_left(node.left)
    return rotate_right(node)


def ensure_balance(node: Optional[AVLNode]) -> Optional[AVLNode]:
    """Rebalance a subtree whose children are valid AVL trees and refresh its height.

    Returns the root of the subtree after any rotation.
    """
    if node is None:
        return None

    initial = balance_factor(node)
    if initial < -2 or initial > 2:
        raise InvariantError(
            f"invalid initial balance factor: {initial} ; this should never happen here"
        )

    if initial == -2:
        left_balance = balance_factor(node.left)
        if left_balance in (-1, 0):
            node = rotate_right(node)
        elif left_balance == 1:
            node = rotate_left_right(node)
        else:
            raise InvariantError(
                f"left balance has unexpected value: {left_balance} ; "
                "this should never happen here"
            )
    elif initial == 2:
        right_balance = balance_factor(node.right)
        if right_balance in (1, 0):
            node = rotate_left(node)
        elif right_balance == -1:
            node = rotate_right_left(node)
        else:
            raise InvariantError(
                f"right balance has unexpected value: {right_balance} ; "
                "this should never happen here"
            )

    update_height(node)

    final = balance_factor(node)
    if final < -1 or final > 1:
        raise InvariantError(
            f"invalid balance factor after ensure_balance: {final} ; something went wrong"
        )
    return node