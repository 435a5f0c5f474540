"""Two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from nothingame.matrix import PI, Mat3x3


@dataclass(frozen=True)
class Vec:
    """A 2D vector or point."""

    x: float
    y: float

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y)

    def arg(self) -> float:
        """Angle of the vector in radians."""
        return math.atan2(self.y, self.x)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def sqr_norm(self) -> float:
        return self.x * self.x + self.y * self.y

    def scale(self, scalar: float) -> Vec:
        return Vec(self.x * scalar, self.y * scalar)

    def entry_mult(self, other: Vec) -> Vec:
        return Vec(self.x * other.x, self.y * other.y)

    def entry_div(self, other: Vec) -> Vec:
        return Vec(self.x / other.x, self.y / other.y)

    def norm(self) -> Vec:
        """Unit vector in the same direction, or zero for a near-zero vector."""
        length = self.length()
        if length < 1e-6:
            return Vec(0.0, 0.0)
        return Vec(self.x / length, self.y / length)

    def transform(self, m: Mat3x3) -> Vec:
        """Apply a homogeneous transform and project back to 2D."""
        hx, hy, hw = (row[0] * self.x + row[1] * self.y + row[2] for row in m.rows)
        return Vec(hx / hw, hy / hw)


Point = Vec


def vec_from_polar(arg: float, mag: float) -> Vec:
    return Vec(math.cos(arg), math.sin(arg)).scale(mag)


def vec_from_ps(p1: Vec, p2: Vec) -> Vec:
    """Vector pointing from p1 to p2."""
    return Vec(p2.x - p1.x, p2.y - p1.y)


def rad_to_deg(a: float) -> float:
    return 180 / PI * a