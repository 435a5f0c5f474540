"""Vertical list of text items navigated with keys or the mouse."""

from __future__ import annotations

from collections.abc import Sequence

from nothingame.events import Event, Key, KeyDown, MouseButton, MouseButtonDown, MouseMotion
from nothingame.point import Vec
from nothingame.sprite_font import boundary_box


class ListSelector:
    """Items laid out top to bottom; one is under the cursor, one may be selected."""

    def __init__(self, items: Sequence[str], font_scale: Vec, padding_bottom: float) -> None:
        self.items: list[str] = list(items)
        self.font_scale = font_scale
        self.padding_bottom = padding_bottom
        self.position = Vec(0.0, 0.0)
        self.cursor = 0
        self.selected: int | None = None

    def size(self, font_scale: Vec, padding_bottom: float) -> Vec:
        """Extent of the list when drawn with font_scale and padding_bottom."""
        width = 0.0
        height = 0.0
        for item in self.items:
            box = boundary_box(Vec(0.0, 0.0), font_scale, item)
            width = max(width, box.w)
            height += box.y + padding_bottom
        return Vec(width, height)

    def handle_event(self, event: Event) -> None:
        """Move the cursor or select the item under it."""
        if isinstance(event, KeyDown):
            if event.key == Key.UP:
                if self.cursor > 0:
                    self.cursor -= 1
            elif event.key == Key.DOWN:
                if self.cursor < len(self.items) - 1:
                    self.cursor += 1
            elif event.key == Key.RETURN:
                self.selected = self.cursor
        elif isinstance(event, MouseMotion):
            mouse = Vec(event.x, event.y)
            position = self.position
            for i, item in enumerate(self.items):
                box = boundary_box(position, self.font_scale, item)
                if box.contains_point(mouse):
                    self.cursor = i
                position = Vec(position.x, position.y + box.h + self.padding_bottom)
        elif isinstance(event, MouseButtonDown):
            if event.button == MouseButton.LEFT:
                self.selected = self.cursor

    def clean_selection(self) -> None:
        self.selected = None

    def move(self, position: Vec) -> None:
        self.position = position