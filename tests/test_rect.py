import pytest

from nothingame.point import Vec
from nothingame.rect import (
    Line,
    Rect,
    RectSide,
    horizontal_thicc_line,
    rect_boundary2,
    rect_from_points,
    rect_impulse,
    rect_object_impact,
    rect_snap,
    rects_overlap,
    rects_overlap_area,
    vertical_thicc_line,
)


def test_from_vecs_round_trip():
    p = Vec(3.0, -2.0)
    r = Rect.from_vecs(p, Vec(10.0, 20.0))
    assert r.position() == p
    assert (r.w, r.h) == (10.0, 20.0)


def test_rect_from_points_order_independent():
    a = Vec(5.0, -1.0)
    b = Vec(-3.0, 8.0)
    r = rect_from_points(a, b)
    assert r == rect_from_points(b, a)
    assert r.w >= 0 and r.h >= 0
    assert r.contains_point(a) and r.contains_point(b)


def test_center_is_midpoint():
    a = Vec(2.0, 4.0)
    b = Vec(10.0, -6.0)
    assert rect_from_points(a, b).center() == (a + b).scale(0.5)


def test_overlap_with_self():
    r = Rect(1.0, 2.0, 30.0, 40.0)
    assert rects_overlap_area(r, r) == r
    assert rects_overlap(r, r)


def test_disjoint_rects():
    r1 = Rect(0.0, 0.0, 10.0, 10.0)
    r2 = Rect(50.0, 50.0, 10.0, 10.0)
    area = rects_overlap_area(r1, r2)
    assert area.w == 0.0 and area.h == 0.0
    assert not rects_overlap(r1, r2)


def test_touching_edges_do_not_overlap():
    r1 = Rect(0.0, 0.0, 10.0, 10.0)
    r2 = Rect(10.0, 0.0, 10.0, 10.0)
    assert not rects_overlap(r1, r2)
    assert not rects_overlap(r2, r1)


def test_contains_point_inclusive_corners():
    r = Rect(0.0, 0.0, 10.0, 5.0)
    assert r.contains_point(Vec(0.0, 0.0))
    assert r.contains_point(Vec(10.0, 5.0))
    assert not r.contains_point(Vec(10.5, 5.0))


def test_sides():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    assert r.side(RectSide.LEFT) == Line(Vec(r.x, r.y), Vec(r.x, r.y + r.h))
    assert r.side(RectSide.BOTTOM) == Line(Vec(r.x, r.y + r.h), Vec(r.x + r.w, r.y + r.h))


def test_line_length():
    a = Vec(1.0, 1.0)
    b = Vec(4.0, -3.0)
    assert Line(a, b).length() == pytest.approx((b - a).length())


def test_grown_round_trip():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    assert r.grown(2.0).grown(-2.0) == r
    assert r.grown(2.0).center() == r.center()


def test_rounded_half_away_from_zero():
    assert Rect(0.5, 1.5, 2.5, -0.5).rounded() == (1, 2, 3, -1)


def test_boundary_encloses_both():
    r1 = Rect(0.0, 0.0, 5.0, 5.0)
    r2 = Rect(10.0, -3.0, 2.0, 2.0)
    b = rect_boundary2(r1, r2)
    assert rects_overlap_area(b, r1) == r1
    assert rects_overlap_area(b, r2) == r2


def test_object_impact_on_ground():
    sides = rect_object_impact(Rect(0.0, 0.0, 100.0, 100.0), Rect(-50.0, 80.0, 200.0, 100.0))
    assert RectSide.BOTTOM in sides
    assert RectSide.TOP not in sides


def test_object_impact_disjoint():
    assert rect_object_impact(Rect(0.0, 0.0, 10.0, 10.0), Rect(100.0, 100.0, 10.0, 10.0)) == set()


def test_rect_snap_pushes_out_horizontally():
    pivot = Rect(0.0, 0.0, 10.0, 10.0)
    moved, orient = rect_snap(pivot, Rect(8.0, 2.0, 4.0, 4.0))
    assert orient == Vec(0.0, 1.0)
    assert moved.x == pytest.approx(pivot.x + pivot.w)
    assert not rects_overlap(pivot, moved)


def test_rect_impulse_separates():
    r1, r2, orient = rect_impulse(Rect(0.0, 0.0, 10.0, 10.0), Rect(8.0, 1.0, 10.0, 10.0))
    assert orient == Vec(0.0, 1.0)
    assert r1.x + r1.w == pytest.approx(r2.x)
    assert not rects_overlap(r1, r2)
    assert (r1.w, r2.w) == (10.0, 10.0)


def test_thicc_lines():
    h = horizontal_thicc_line(10.0, 2.0, 5.0, 4.0)
    assert h == horizontal_thicc_line(2.0, 10.0, 5.0, 4.0)
    assert h.h == 4.0
    assert h.center().y == 5.0
    v = vertical_thicc_line(10.0, 2.0, 5.0, 4.0)
    assert v == vertical_thicc_line(2.0, 10.0, 5.0, 4.0)
    assert v.w == 4.0
    assert v.center().x == 5.0