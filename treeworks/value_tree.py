"""A binary tree holding its own copies of values, with depth-first traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

_ROOT: Any = object()


@dataclass(eq=False)
class TreeNode(Generic[T]):
    """A node holding a value and links to two children."""

    data: T
    left: Optional["TreeNode[T]"] = None
    right: Optional["TreeNode[T]"] = None


class ValueBinaryTree(Generic[T]):
    """A binary tree that can be filled level by level as a complete tree."""

    def __init__(self, contents: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[TreeNode[T]] = None
        if contents is not None:
            self.create_complete_tree(contents)

    def create_complete_tree(self, contents: Iterable[T]) -> None:
        """Replace the tree with a complete tree filled level by level, left to right."""
        self.clear()
        values = iter(contents)
        try:
            first = next(values)
        except StopIteration:
            return
        self._root = TreeNode(first)
        open_slots: deque[tuple[TreeNode[T], str]] = deque(
            [(self._root, "left"), (self._root, "right")]
        )
        for value in values:
            parent, side = open_slots.popleft()
            child = TreeNode(value)
            setattr(parent, side, child)
            open_slots.append((child, "left"))
            open_slots.append((child, "right"))

    def clear(self) -> None:
        """Remove every node."""
        self._root = None

    def root(self) -> Optional[TreeNode[T]]:
        """Return the root node, which callers may edit directly."""
        return self._root

    def _start(self, node: Any) -> Optional[TreeNode[T]]:
        return self._root if node is _ROOT else node

    def pre_order(self, node: Any = _ROOT) -> Iterator[T]:
        """Yield values node first, then left subtree, then right subtree."""
        cur = self._start(node)
        if cur is not None:
            yield cur.data
            yield from self.pre_order(cur.left)
            yield from self.pre_order(cur.right)

    def in_order(self, node: Any = _ROOT) -> Iterator[T]:
        """Yield values of the left subtree, then the node, then the right subtree."""
        cur = self._start(node)
        if cur is not None:
            yield from self.in_order(cur.left)
            yield cur.data
            yield from self.in_order(cur.right)

    def post_order(self, node: Any = _ROOT) -> Iterator[T]:
        """Yield values of both subtrees before the node itself."""
        cur = self._start(node)
        if cur is not None:
            yield from self.post_order(cur.left)
            yield from self.post_order(cur.right)
            yield cur.data