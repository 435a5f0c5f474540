"""Triangles in the plane."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from nothingame.matrix import PI, PI_2, Mat3x3
from nothingame.point import Vec, vec_from_polar
from nothingame.rand import rand_float
from nothingame.rect import Rect


@dataclass(frozen=True)
class Triangle:
    p1: Vec
    p2: Vec
    p3: Vec

    def sorted_by_y(self) -> Triangle:
        """Same triangle with vertices ordered by ascending y."""
        p1, p2, p3 = self.p1, self.p2, self.p3
        if p1.y > p2.y:
            p1, p2 = p2, p1
        if p2.y > p3.y:
            p2, p3 = p3, p2
        if p1.y > p2.y:
            p1, p2 = p2, p1
        return Triangle(p1, p2, p3)

    def transform(self, m: Mat3x3) -> Triangle:
        return Triangle(self.p1.transform(m), self.p2.transform(m), self.p3.transform(m))


def equilateral_triangle() -> Triangle:
    """Equilateral triangle inscribed in the unit circle."""
    d = PI_2 / 3.0
    return Triangle(
        Vec(math.cos(0.0), math.sin(0.0)),
        Vec(math.cos(d), math.sin(d)),
        Vec(math.cos(2.0 * d), math.sin(2.0 * d)),
    )


def random_triangle(radius: float, rng: random.Random | None = None) -> Triangle:
    """Triangle with vertices at random points within radius of the origin."""

    def vertex() -> Vec:
        arg = rand_float(2 * PI, rng)
        mag = rand_float(radius, rng)
        return vec_from_polar(arg, mag)

    return Triangle(vertex(), vertex(), vertex())


def rect_as_triangles(rect: Rect) -> tuple[Triangle, Triangle]:
    """Split a rectangle into two triangles."""
    x1, y1 = rect.x, rect.y
    x2, y2 = rect.x + rect.w, rect.y + rect.h
    return (
        Triangle(Vec(x1, y1), Vec(x2, y1), Vec(x1, y2)),
        Triangle(Vec(x2, y1), Vec(x1, y2), Vec(x2, y2)),
    )