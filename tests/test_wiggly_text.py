import math

import pytest

from nothingame.point import Vec
from nothingame.sprite_font import FONT_CHAR_WIDTH
from nothingame.wiggly_text import FadingWigglyText, WigglyText


def test_update_keeps_angle_within_full_turn():
    text = WigglyText("Select Level", Vec(10.0, 10.0))
    for _ in range(100):
        text.update(0.37)
        assert 0.0 <= text.angle < 2 * math.pi + 1e-6


def test_update_advances_angle():
    text = WigglyText("abc", Vec(1.0, 1.0))
    text.update(0.01)
    assert text.angle == pytest.approx(0.1)


def test_glyph_positions_follow_text():
    text = WigglyText("wiggle", Vec(3.0, 3.0))
    position = Vec(5.0, 7.0)
    glyphs = text.glyph_positions(position)
    assert "".join(c for c, _ in glyphs) == "wiggle"
    xs = [p.x for _, p in glyphs]
    assert xs[0] == position.x
    gaps = {round(b - a, 6) for a, b in zip(xs, xs[1:])}
    assert gaps == {FONT_CHAR_WIDTH * 3.0}
    assert glyphs[0][1].y == pytest.approx(position.y)
    assert all(abs(p.y - position.y) <= 20.0 + 1e-9 for _, p in glyphs)


def test_glyph_positions_of_empty_text():
    assert WigglyText("", Vec(1.0, 1.0)).glyph_positions(Vec(0.0, 0.0)) == []


def test_fading_update_without_time_keeps_alpha():
    fading = FadingWigglyText(WigglyText("x", Vec(1.0, 1.0)), duration=2.0)
    fading.update(0.0)
    assert fading.wiggly_text.color[3] == pytest.approx(1.0)


def test_fading_reaches_zero_and_never_negative():
    fading = FadingWigglyText(WigglyText("x", Vec(1.0, 1.0)), duration=2.0)
    fading.update(2.0)
    assert fading.wiggly_text.color[3] == 0.0
    fading.update(5.0)
    assert fading.wiggly_text.color[3] == 0.0


def test_fading_decreases_and_reset_restores():
    fading = FadingWigglyText(
        WigglyText("x", Vec(1.0, 1.0), color=(0.5, 0.25, 0.75, 1.0)), duration=1.0
    )
    fading.update(0.25)
    faded = fading.wiggly_text.color
    assert 0.0 < faded[3] < 1.0
    assert faded[:3] == (0.5, 0.25, 0.75)
    fading.reset()
    assert fading.wiggly_text.color == (0.5, 0.25, 0.75, 1.0)