"""Random float helpers."""

from __future__ import annotations

import random


def rand_float(max_value: float, rng: random.Random | None = None) -> float:
    """Uniform random float between 0 and max_value."""
    source = rng if rng is not None else random
    return source.random() * max_value


def rand_float_range(lower: float, upper: float, rng: random.Random | None = None) -> float:
    """Uniform random float between lower and upper."""
    return rand_float(upper - lower, rng) + lower