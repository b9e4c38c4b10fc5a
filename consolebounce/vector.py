"""Two-dimensional vector arithmetic used by the simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2D:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def scaled(self, scalar: float) -> Vector2D:
        """Return this vector multiplied by ``scalar``."""
        return Vector2D(self.x * scalar, self.y * scalar)

    def normalized(self) -> Vector2D:
        """Return a unit vector with the same direction.

        The zero vector has no direction; its components come out as NaN.
        """
        length = self.length()
        return self.scaled(1.0 / length if length else math.inf)

    def dot(self, other: Vector2D) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the distance between the points (x1, y1) and (x2, y2)."""
    return math.hypot(x2 - x1, y2 - y1)