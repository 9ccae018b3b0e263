"""A self-balancing AVL tree mapping unique keys to data."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from treeworks.avl_checks import check_invariants as _check_invariants
from treeworks.avl_checks import format_in_order as _format_in_order
from treeworks.avl_checks import format_vertical as _format_vertical
from treeworks.avl_node import AVLNode, ensure_balance
from treeworks.avl_remove import remove_node


class AVLTree:
    """An AVL tree with unique, ordered keys.

    After every insertion and removal the tree verifies its own structure
    unless ``debug_checks`` is switched off; this is slower than the
    theoretical AVL bounds but catches mistakes early.
    """

    debug_checks: bool = True

    def __init__(self) -> None:
        self._root: Optional[AVLNode] = None

    def _find_node(self, key: Any) -> Optional[AVLNode]:
        cur = self._root
        while cur is not None:
            if key == cur.key:
                return cur
            cur = cur.left if key < cur.key else cur.right
        return None

    def find(self, key: Any) -> Any:
        """Return the data stored under ``key``; raise KeyError if it is absent."""
        node = self._find_node(key)
        if node is None:
            raise KeyError(f"find(): key not found: {key!r}")
        return node.data

    def insert(self, key: Any, data: Any) -> None:
        """Add ``key`` with ``data``; raise ValueError if the key already exists."""
        self._root = self._insert(self._root, key, data)
        if self.debug_checks:
            self.check_invariants()

    def _insert(self, node: Optional[AVLNode], key: Any, data: Any) -> AVLNode:
        if node is None:
            return AVLNode(key, data)
        if key == node.key:
            raise ValueError(f"insert(): key already exists: {key!r}")
        if key < node.key:
            node.left = self._insert(node.left, key, data)
        else:
            node.right = self._insert(node.right, key, data)
        balanced = ensure_balance(node)
        assert balanced is not None
        return balanced

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its data; raise KeyError if it is absent."""
        self._root, data = self._remove(self._root, key)
        if self.debug_checks:
            self.check_invariants()
        return data

    def _remove(
        self, node: Optional[AVLNode], key: Any
    ) -> tuple[Optional[AVLNode], Any]:
        if node is None:
            raise KeyError(f"remove(): key not found: {key!r}")
        if key == node.key:
            return remove_node(node)
        if key < node.key:
            node.left, data = self._remove(node.left, key)
        else:
            node.right, data = self._remove(node.right, key)
        return ensure_balance(node), data

    def __contains__(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def __bool__(self) -> bool:
        return self._root is not None

    def clear(self) -> None:
        """Remove every entry."""
        self._root = None

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, data)`` pairs in increasing key order."""
        stack: list[AVLNode] = []
        cur = self._root
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.key, cur.data
            cur = cur.right

    def format_in_order(self) -> str:
        """Render the entries in key order as ``[key : data]`` items."""
        return _format_in_order(self._root)

    def format_vertical(self) -> str:
        """Render the tree one node per line with balance factors and heights."""
        return _format_vertical(self._root)

    def check_invariants(self) -> bool:
        """Verify heights, balance and ordering; raise InvariantError on failure."""
        return _check_invariants(self._root)