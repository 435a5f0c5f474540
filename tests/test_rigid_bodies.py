import pytest

from nothingame.matrix import scale_mat
from nothingame.point import Vec
from nothingame.rect import Rect, RectSide, rects_overlap
from nothingame.rigid_bodies import RigidBodies
from nothingame.sprite_font import FONT_CHAR_HEIGHT


class FakePlatforms:
    def __init__(self, sides=None):
        self.sides = set(sides or ())

    def touches_rect_sides(self, rect):
        return set(self.sides)

    def snap_rect(self, rect):
        return rect, Vec(1.0, 1.0)


def test_add_returns_sequential_ids():
    bodies = RigidBodies(3)
    ids = [bodies.add(Rect(i, 0, 1, 1)) for i in range(3)]
    assert ids == [0, 1, 2]
    assert len(bodies) == 3
    assert bodies.hitbox(1) == Rect(1, 0, 1, 1)


def test_add_past_capacity_raises():
    bodies = RigidBodies(1)
    bodies.add(Rect(0, 0, 1, 1))
    with pytest.raises(OverflowError):
        bodies.add(Rect(0, 0, 1, 1))


def test_hitbox_of_unknown_id_raises():
    bodies = RigidBodies(2)
    bodies.add(Rect(0, 0, 1, 1))
    with pytest.raises(IndexError):
        bodies.hitbox(1)


def test_invalid_capacity():
    with pytest.raises(ValueError):
        RigidBodies(0)


def test_force_is_cleared_after_update():
    bodies = RigidBodies(1)
    body = bodies.add(Rect(0, 0, 1, 1))
    bodies.apply_force(body, Vec(0.0, 4.0))
    start = bodies.hitbox(body).y
    bodies.update(body, 1.0)
    first = bodies.hitbox(body).y
    bodies.update(body, 1.0)
    second = bodies.hitbox(body).y
    assert first - start == pytest.approx(second - first)
    assert first > start


def test_movement_adds_to_displacement():
    bodies = RigidBodies(1)
    body = bodies.add(Rect(0, 0, 1, 1))
    bodies.move(body, Vec(3.0, 0.0))
    bodies.update(body, 2.0)
    assert bodies.hitbox(body).x == pytest.approx(6.0)


def test_transform_velocity_scales_motion():
    bodies = RigidBodies(1)
    body = bodies.add(Rect(0, 0, 1, 1))
    bodies.apply_force(body, Vec(1.0, 0.0))
    bodies.update(body, 1.0)
    first = bodies.hitbox(body).x
    bodies.transform_velocity(body, scale_mat(2.0))
    bodies.update(body, 1.0)
    assert bodies.hitbox(body).x - first == pytest.approx(2.0 * first)


def test_removed_body_ignores_everything():
    bodies = RigidBodies(1)
    body = bodies.add(Rect(0, 0, 1, 1))
    bodies.remove(body)
    bodies.move(body, Vec(1.0, 1.0))
    bodies.apply_force(body, Vec(1.0, 1.0))
    bodies.teleport_to(body, Vec(50.0, 50.0))
    bodies.update(body, 1.0)
    assert bodies.hitbox(body) == Rect(0, 0, 1, 1)
    assert bodies.debug_lines(body) == []


def test_disabled_body_is_frozen_until_enabled():
    bodies = RigidBodies(1)
    body = bodies.add(Rect(0, 0, 1, 1))
    bodies.disable(body, True)
    bodies.apply_omniforce(Vec(1.0, 1.0))
    bodies.update(body, 1.0)
    assert bodies.hitbox(body) == Rect(0, 0, 1, 1)
    bodies.disable(body, False)
    bodies.teleport_to(body, Vec(7.0, 8.0))
    assert bodies.hitbox(body) == Rect(7.0, 8.0, 1, 1)


def test_platform_bottom_grounds_body():
    bodies = RigidBodies(1)
    body = bodies.add(Rect(0, 0, 1, 1))
    bodies.collide(FakePlatforms({RectSide.BOTTOM}))
    assert bodies.touches_ground(body) is True
    bodies.collide(FakePlatforms())
    assert bodies.touches_ground(body) is False


def test_stacked_bodies_are_separated_and_top_is_grounded():
    bodies = RigidBodies(2)
    top = bodies.add(Rect(0, 0, 10, 10))
    bottom = bodies.add(Rect(0, 8, 10, 10))
    bodies.collide(FakePlatforms())
    assert not rects_overlap(bodies.hitbox(top), bodies.hitbox(bottom))
    assert bodies.touches_ground(top) is True
    assert bodies.touches_ground(bottom) is False
    assert bodies.hitbox(top).x == 0
    assert bodies.hitbox(bottom).x == 0


def test_separate_bodies_do_not_move_on_collide():
    bodies = RigidBodies(2)
    a = bodies.add(Rect(0, 0, 5, 5))
    b = bodies.add(Rect(100, 100, 5, 5))
    bodies.collide(FakePlatforms())
    assert bodies.hitbox(a) == Rect(0, 0, 5, 5)
    assert bodies.hitbox(b) == Rect(100, 100, 5, 5)


def test_debug_lines_format_and_positions():
    bodies = RigidBodies(1)
    body = bodies.add(Rect(1.0, 2.0, 3.0, 3.0))
    lines = bodies.debug_lines(body)
    texts = [text for text, _ in lines]
    assert texts == ["id: 0", "p:(1.00, 2.00)", "v:(0.00, 0.00)", "m:(0.00, 0.00)"]
    assert lines[0][1] == Vec(1.0, 2.0)
    assert lines[3][1] == Vec(1.0, 2.0 + FONT_CHAR_HEIGHT * 6.0)