"""Removal of a node from an AVL subtree, rebalancing on the way back up."""

from __future__ import annotations

from typing import Any, Optional

from treeworks.avl_node import AVLNode, InvariantError, ensure_balance


def _detach_rightmost(node: AVLNode) -> tuple[Optional[AVLNode], AVLNode]:
    """Unlink the rightmost node of a subtree.

    Returns the rebalanced remaining subtree and the detached node. Every
    ancestor of the detached node is rebalanced as the recursion unwinds.
    """
    if node.right is None:
        return node.left, node
    node.right, rightmost = _detach_rightmost(node.right)
    return ensure_balance(node), rightmost


def remove_node(node: Optional[AVLNode]) -> tuple[Optional[AVLNode], Any]:
    """Remove the node that roots a subtree.

    Returns the new root of the subtree (possibly None) and the removed
    node's data. A node with two children is replaced by its in-order
    predecessor, and every node on the path to that predecessor is rebalanced.
    """
    if node is None:
        raise InvariantError("remove_node called on an empty subtree")

    data = node.data

    if node.left is None and node.right is None:
        return None, data
    if node.right is None:
        return node.left, data
    if node.left is None:
        return node.right, data

    remaining_left, predecessor = _detach_rightmost(node.left)
    predecessor.left = remaining_left
    predecessor.right = node.right
    predecessor.height = node.height
    node.left = node.right = None

    if predecessor.left is not None:
        predecessor.left = ensure_balance(predecessor.left)
    return ensure_balance(predecessor), data