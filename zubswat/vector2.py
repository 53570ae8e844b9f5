"""Immutable two-dimensional vector used by the game physics."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector2:
    """A 2D vector with float components."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> Vector2 | float:
        """Scale by a number, or take the dot product with another vector."""
        if isinstance(other, Vector2):
            return self.x * other.x + self.y * other.y
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, scalar: object) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self, length: float = 1.0) -> Vector2:
        """Return a vector in the same direction with the given length.

        Raises ZeroDivisionError for the zero vector, which has no direction.
        """
        current = self.length()
        if current == 0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        return Vector2(self.x / current * length, self.y / current * length)