"""Axis-aligned rectangles used for collision checks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Hitbox:
    """A rectangle anchored at (x, y) with a width and a height."""

    x: float
    y: float
    width: float
    height: float

    def collides(self, other: Hitbox) -> bool:
        """Return True when the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def collides_any(self, obstacles: Iterable[Hitbox]) -> bool:
        """Return True when this rectangle overlaps any of the obstacles."""
        return any(self.collides(obstacle) for obstacle in obstacles)