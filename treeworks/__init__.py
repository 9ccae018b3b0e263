"""Readable implementations of cubes, complete binary trees with traversals, and AVL trees."""

__version__ = "0.1.0"