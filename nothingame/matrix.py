"""3x3 matrices for 2D affine transforms in homogeneous coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

PI = 3.14159265359
PI_2 = 2.0 * PI

Row = tuple[float, float, float]


@dataclass(frozen=True)
class Mat3x3:
    """A 3x3 matrix stored as three rows of three floats."""

    rows: tuple[Row, Row, Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("a 3x3 matrix needs three rows of three values")
        object.__setattr__(self, "rows", rows)

    def __matmul__(self, other: Mat3x3) -> Mat3x3:
        if not isinstance(other, Mat3x3):
            return NotImplemented
        columns = tuple(zip(*other.rows))
        return Mat3x3(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.rows
            )
        )


def product2(m1: Mat3x3, m2: Mat3x3, m3: Mat3x3) -> Mat3x3:
    """Return m1 @ (m2 @ m3)."""
    return m1 @ (m2 @ m3)


def trans_mat(x: float, y: float) -> Mat3x3:
    """Translation by (x, y)."""
    return Mat3x3(((1.0, 0.0, x), (0.0, 1.0, y), (0.0, 0.0, 1.0)))


def rot_mat(angle: float) -> Mat3x3:
    """Rotation by angle radians around the origin."""
    c = math.cos(angle)
    s = math.sin(angle)
    return Mat3x3(((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0)))


def scale_mat(factor: float) -> Mat3x3:
    """Uniform scaling by factor."""
    return Mat3x3(((factor, 0.0, 0.0), (0.0, factor, 0.0), (0.0, 0.0, 1.0)))