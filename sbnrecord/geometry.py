"""Cartesian points and displacements in detector coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A 3D point or vector in centimetres."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def r(self) -> float:
        """Return the magnitude."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def theta(self) -> float:
        """Return the polar angle from the z axis, in [0, pi]."""
        return math.atan2(math.hypot(self.x, self.y), self.z)

    def phi(self) -> float:
        """Return the azimuthal angle in the x-y plane, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def unit(self) -> Point:
        """Return the vector scaled to unit length; a null vector is unchanged."""
        magnitude = self.r()
        if magnitude == 0.0:
            return self
        return Point(self.x / magnitude, self.y / magnitude, self.z / magnitude)