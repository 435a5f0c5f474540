"""A pool of axis-aligned rigid bodies that collide with each other and platforms."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Protocol

from nothingame.hashset import HashSet
from nothingame.matrix import Mat3x3
from nothingame.point import Vec
from nothingame.rect import Rect, RectSide, rect_impulse, rects_overlap
from nothingame.sprite_font import FONT_CHAR_HEIGHT

_MAX_COLLISION_PASSES = 1000


class Platforms(Protocol):
    """The static geometry bodies collide with."""

    def touches_rect_sides(self, rect: Rect) -> set[RectSide]:
        """Sides of rect that press against a platform."""

    def snap_rect(self, rect: Rect) -> tuple[Rect, Vec]:
        """rect pushed out of the platforms, with the velocity mask to apply."""


def _zero() -> Vec:
    return Vec(0.0, 0.0)


@dataclass
class _Body:
    rect: Rect = field(default_factory=lambda: Rect(0.0, 0.0, 0.0, 0.0))
    velocity: Vec = field(default_factory=_zero)
    movement: Vec = field(default_factory=_zero)
    force: Vec = field(default_factory=_zero)
    grounded: bool = False
    deleted: bool = False
    disabled: bool = False

    @property
    def inactive(self) -> bool:
        return self.deleted or self.disabled


class RigidBodies:
    """At most capacity bodies, addressed by the integer ids add returns."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("rigid bodies capacity must be positive")
        self._capacity = capacity
        self._count = 0
        self._bodies = [_Body() for _ in range(capacity)]
        self._collided = HashSet(capacity * 2)

    def __len__(self) -> int:
        return self._count

    def _body(self, body_id: int, limit: int) -> _Body:
        if not 0 <= body_id < limit:
            raise IndexError(f"no rigid body with id {body_id}")
        return self._bodies[body_id]

    def add(self, rect: Rect) -> int:
        """Add a body with the given hitbox and return its id."""
        if self._count >= self._capacity:
            raise OverflowError("rigid bodies are full")
        body_id = self._count
        self._count += 1
        self._bodies[body_id].rect = rect
        return body_id

    def remove(self, body_id: int) -> None:
        self._body(body_id, self._capacity).deleted = True

    def _collide_with_itself(self) -> None:
        if self._count == 0:
            return
        self._collided.clear()
        bodies = self._bodies

        collision = True
        passes = 0
        while collision and passes < _MAX_COLLISION_PASSES:
            passes += 1
            collision = False
            for i1 in range(self._count - 1):
                b1 = bodies[i1]
                if b1.inactive:
                    continue
                for i2 in range(i1 + 1, self._count):
                    b2 = bodies[i2]
                    # Only the first body's disabled flag is consulted here.
                    if b2.deleted or b1.disabled:
                        continue
                    if not rects_overlap(b1.rect, b2.rect):
                        continue

                    collision = True
                    self._collided.add((i1, i2))

                    b1.rect, b2.rect, orient = rect_impulse(b1.rect, b2.rect)
                    if orient.x > orient.y:
                        if b1.rect.y < b2.rect.y:
                            b1.grounded = True
                        else:
                            b2.grounded = True

                    b1.velocity = b1.velocity.entry_mult(orient)
                    b2.velocity = b2.velocity.entry_mult(orient)
                    b1.movement = b1.movement.entry_mult(orient)
                    b2.movement = b2.movement.entry_mult(orient)

        for i1, i2 in self._collided:
            b1 = bodies[i1]
            b2 = bodies[i2]
            self.apply_force(i1, b2.velocity + b2.movement)
            self.apply_force(i2, b1.velocity + b1.movement)

    def _collide_with_platforms(self, platforms: Platforms) -> None:
        for i in range(self._count):
            body = self._bodies[i]
            if body.inactive:
                continue
            if RectSide.BOTTOM in platforms.touches_rect_sides(body.rect):
                body.grounded = True
            body.rect, mask = platforms.snap_rect(body.rect)
            body.velocity = body.velocity.entry_mult(mask)
            body.movement = body.movement.entry_mult(mask)
            self.damper(i, mask.entry_mult(Vec(-16.0, 0.0)))

    def collide(self, platforms: Platforms) -> None:
        """Resolve collisions between bodies, then against the platforms."""
        for body in self._bodies[: self._count]:
            body.grounded = False
        self._collide_with_itself()
        self._collide_with_platforms(platforms)

    def update(self, body_id: int, delta_time: float) -> None:
        """Integrate accumulated forces and move the body, then clear its forces."""
        body = self._body(body_id, self._capacity)
        if body.inactive:
            return
        body.velocity = body.velocity + body.force.scale(delta_time)
        position = body.rect.position() + (body.velocity + body.movement).scale(delta_time)
        body.rect = replace(body.rect, x=position.x, y=position.y)
        body.force = _zero()

    def hitbox(self, body_id: int) -> Rect:
        return self._body(body_id, self._count).rect

    def move(self, body_id: int, movement: Vec) -> None:
        """Set the self-propelled movement of the body."""
        body = self._body(body_id, self._count)
        if not body.inactive:
            body.movement = movement

    def touches_ground(self, body_id: int) -> bool:
        return self._body(body_id, self._count).grounded

    def apply_force(self, body_id: int, force: Vec) -> None:
        body = self._body(body_id, self._count)
        if not body.inactive:
            body.force = body.force + force

    def apply_omniforce(self, force: Vec) -> None:
        """Apply force to every body."""
        for body_id in range(self._count):
            self.apply_force(body_id, force)

    def transform_velocity(self, body_id: int, matrix: Mat3x3) -> None:
        body = self._body(body_id, self._count)
        if not body.inactive:
            body.velocity = body.velocity.transform(matrix)

    def teleport_to(self, body_id: int, position: Vec) -> None:
        body = self._body(body_id, self._count)
        if not body.inactive:
            body.rect = replace(body.rect, x=position.x, y=position.y)

    def damper(self, body_id: int, v: Vec) -> None:
        """Apply a force proportional to the velocity, scaled per axis by v."""
        body = self._body(body_id, self._count)
        if not body.inactive:
            self.apply_force(body_id, body.velocity.entry_mult(v))

    def disable(self, body_id: int, disabled: bool) -> None:
        self._body(body_id, self._count).disabled = disabled

    def debug_lines(self, body_id: int) -> list[tuple[str, Vec]]:
        """Debug text lines for the body with the world positions they are drawn at."""
        body = self._body(body_id, self._capacity)
        if body.inactive:
            return []
        r = body.rect
        return [
            (f"id: {body_id}", Vec(r.x, r.y)),
            (f"p:({r.x:.2f}, {r.y:.2f})", Vec(r.x, r.y + FONT_CHAR_HEIGHT * 2.0)),
            (
                f"v:({body.velocity.x:.2f}, {body.velocity.y:.2f})",
                Vec(r.x, r.y + FONT_CHAR_HEIGHT * 4.0),
            ),
            (
                f"m:({body.movement.x:.2f}, {body.movement.y:.2f})",
                Vec(r.x, r.y + FONT_CHAR_HEIGHT * 6.0),
            ),
        ]