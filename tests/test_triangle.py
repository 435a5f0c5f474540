import itertools
import random

import pytest

from nothingame.matrix import trans_mat
from nothingame.point import Vec
from nothingame.rect import Rect
from nothingame.triangle import (
    Triangle,
    equilateral_triangle,
    random_triangle,
    rect_as_triangles,
)

POINTS = [Vec(0.0, 5.0), Vec(2.0, -1.0), Vec(-3.0, 2.0)]


@pytest.mark.parametrize("order", list(itertools.permutations(POINTS)))
def test_sorted_by_y(order):
    t = Triangle(*order).sorted_by_y()
    ys = [t.p1.y, t.p2.y, t.p3.y]
    assert ys == sorted(ys)
    assert {t.p1, t.p2, t.p3} == set(POINTS)
    assert t.sorted_by_y() == t


def test_equilateral_triangle():
    t = equilateral_triangle()
    for p in (t.p1, t.p2, t.p3):
        assert p.length() == pytest.approx(1.0)
    a = (t.p2 - t.p1).length()
    assert (t.p3 - t.p2).length() == pytest.approx(a)
    assert (t.p1 - t.p3).length() == pytest.approx(a)


def test_random_triangle_within_radius():
    rng = random.Random(5)
    for _ in range(100):
        t = random_triangle(3.0, rng)
        assert all(p.length() <= 3.0 + 1e-9 for p in (t.p1, t.p2, t.p3))


def test_random_triangle_reproducible():
    first = random_triangle(2.0, random.Random(9))
    second = random_triangle(2.0, random.Random(9))
    assert (first.p1, first.p2, first.p3) == (second.p1, second.p2, second.p3)
    assert all(p.length() <= 2.0 + 1e-9 for p in (first.p1, first.p2, first.p3))


def test_rect_as_triangles():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    t1, t2 = rect_as_triangles(r)
    assert t1.p1 == r.position()
    corners = {
        Vec(r.x, r.y), Vec(r.x + r.w, r.y),
        Vec(r.x, r.y + r.h), Vec(r.x + r.w, r.y + r.h),
    }
    assert {t1.p1, t1.p2, t1.p3, t2.p1, t2.p2, t2.p3} == corners
    assert t2.p3 == Vec(r.x + r.w, r.y + r.h)


def test_transform_translates_every_vertex():
    t = Triangle(*POINTS)
    shift = Vec(1.5, -2.5)
    moved = t.transform(trans_mat(shift.x, shift.y))
    assert moved == Triangle(t.p1 + shift, t.p2 + shift, t.p3 + shift)