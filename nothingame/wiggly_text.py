"""Text whose characters bob up and down along a sine wave."""

from __future__ import annotations

import math
from dataclasses import dataclass

from nothingame.matrix import PI
from nothingame.point import Vec
from nothingame.sprite_font import FONT_CHAR_WIDTH

Color = tuple[float, float, float, float]


@dataclass
class WigglyText:
    """Text, its scale, an RGBA colour and the current wave phase."""

    text: str
    scale: Vec
    color: Color = (1.0, 1.0, 1.0, 1.0)
    angle: float = 0.0

    def update(self, delta_time: float) -> None:
        """Advance the wave phase."""
        self.angle = math.fmod(self.angle + 10.0 * delta_time, 2 * PI)

    def glyph_positions(self, position: Vec) -> list[tuple[str, Vec]]:
        """Each character with the screen position it is drawn at."""
        n = len(self.text)
        return [
            (
                c,
                position
                + Vec(
                    i * FONT_CHAR_WIDTH * self.scale.x,
                    math.sin(self.angle + i / n * 10.0) * 20.0,
                ),
            )
            for i, c in enumerate(self.text)
        ]


@dataclass
class FadingWigglyText:
    """Wiggly text whose alpha fades out over duration seconds."""

    wiggly_text: WigglyText
    duration: float

    def update(self, delta_time: float) -> None:
        r, g, b, alpha = self.wiggly_text.color
        alpha = max(alpha * self.duration - delta_time, 0.0) / self.duration
        self.wiggly_text.color = (r, g, b, alpha)
        self.wiggly_text.update(delta_time)

    def reset(self) -> None:
        """Make the text fully opaque again."""
        r, g, b, _ = self.wiggly_text.color
        self.wiggly_text.color = (r, g, b, 1.0)