"""Horizontal slider dragged with the mouse."""

from __future__ import annotations

from dataclasses import dataclass

from nothingame.events import Event, MouseButtonDown, MouseButtonUp, MouseMotion
from nothingame.point import Vec
from nothingame.rect import Rect


@dataclass
class Slider:
    """A value between 0 and max_value set by dragging inside a boundary."""

    value: float
    max_value: float
    drag: bool = False

    def handle_event(self, event: Event, boundary: Rect) -> bool:
        """Process a mouse event; True when the slider took it."""
        if not self.drag:
            if isinstance(event, MouseButtonDown) and boundary.contains_point(
                Vec(event.x, event.y)
            ):
                self.drag = True
                return True
            return False

        if isinstance(event, MouseButtonUp):
            self.drag = False
            return True
        if isinstance(event, MouseMotion):
            x = min(max(event.x - boundary.x, 0.0), boundary.w)
            self.value = x / boundary.w * self.max_value
            return True
        return False

    def layout(self, boundary: Rect) -> tuple[Rect, Rect]:
        """The (core, cursor) rectangles to draw inside boundary."""
        core_height = boundary.h * 0.33
        core = Rect(
            boundary.x,
            boundary.y + boundary.h * 0.5 - core_height * 0.5,
            boundary.w,
            core_height,
        )
        ratio = self.value / self.max_value
        cursor_width = boundary.w * 0.1
        cursor = Rect(
            boundary.x + ratio * (boundary.w - cursor_width),
            boundary.y,
            cursor_width,
            boundary.h,
        )
        return core, cursor