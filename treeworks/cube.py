"""A cube described by the length of its edge."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Cube:
    """A cube with a mutable edge length; cubes are equal when their lengths are."""

    length: float

    def volume(self) -> float:
        """Return the volume of the cube."""
        return self.length * self.length * self.length

    def surface_area(self) -> float:
        """Return the total area of the six faces."""
        return 6 * self.length * self.length