"""Scanline rasterisation of triangles into integer line segments."""

from __future__ import annotations

import math

from nothingame.point import Vec
from nothingame.triangle import Triangle

Segment = tuple[int, int, int, int]


def _roundf(v: float) -> int:
    """Round half away from zero."""
    if v >= 0:
        return math.floor(v + 0.5)
    return -math.floor(-v + 0.5)


def _segment(p1: Vec, p2: Vec) -> Segment:
    return (_roundf(p1.x), _roundf(p1.y), _roundf(p2.x), _roundf(p2.y))


def triangle_outline(t: Triangle) -> list[Segment]:
    """The three edges of t as (x1, y1, x2, y2) with rounded endpoints."""
    return [_segment(t.p1, t.p2), _segment(t.p2, t.p3), _segment(t.p3, t.p1)]


def _fill_bottom_flat(t: Triangle) -> list[Segment]:
    y0 = _roundf(t.p1.y)
    y1 = _roundf(t.p2.y)
    if y0 >= y1:
        return []
    invslope1 = (t.p2.x - t.p1.x) / (t.p2.y - t.p1.y)
    invslope2 = (t.p3.x - t.p1.x) / (t.p3.y - t.p1.y)
    curx1 = t.p1.x
    curx2 = t.p1.x
    segments = []
    for scanline in range(y0, y1):
        segments.append((_roundf(curx1), scanline, _roundf(curx2), scanline))
        curx1 += invslope1
        curx2 += invslope2
    return segments


def _fill_top_flat(t: Triangle) -> list[Segment]:
    y0 = _roundf(t.p3.y)
    y1 = _roundf(t.p1.y)
    if y0 <= y1:
        return []
    invslope1 = (t.p3.x - t.p1.x) / (t.p3.y - t.p1.y)
    invslope2 = (t.p3.x - t.p2.x) / (t.p3.y - t.p2.y)
    curx1 = t.p3.x
    curx2 = t.p3.x
    segments = []
    for scanline in range(y0, y1, -1):
        segments.append((_roundf(curx1), scanline, _roundf(curx2), scanline))
        curx1 -= invslope1
        curx2 -= invslope2
    return segments


def fill_triangle(t: Triangle) -> list[Segment]:
    """Horizontal segments that fill t, in drawing order."""
    t = t.sorted_by_y()

    if abs(t.p2.y - t.p3.y) < 1e-6:
        return _fill_bottom_flat(t)
    if abs(t.p1.y - t.p2.y) < 1e-6:
        return _fill_top_flat(t)

    p4 = Vec(
        t.p1.x + ((t.p2.y - t.p1.y) / (t.p3.y - t.p1.y)) * (t.p3.x - t.p1.x),
        t.p2.y,
    )
    segments = _fill_bottom_flat(Triangle(t.p1, t.p2, p4))
    segments.extend(_fill_top_flat(Triangle(t.p2, p4, t.p3)))
    segments.append(_segment(t.p2, p4))
    return segments