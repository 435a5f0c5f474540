"""Input events delivered to the user-interface widgets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Union


class Key(Enum):
    """Keys that the widgets react to."""

    RETURN = auto()
    BACKSPACE = auto()
    DELETE = auto()
    HOME = auto()
    END = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    A = auto()
    B = auto()
    D = auto()
    E = auto()
    F = auto()
    K = auto()
    N = auto()
    P = auto()


class Mod(Flag):
    """Modifier keys held while an event happened."""

    NONE = 0
    SHIFT = 1
    CTRL = 2
    ALT = 4


class MouseButton(Enum):
    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()


@dataclass(frozen=True)
class KeyDown:
    """A key was pressed."""

    key: Key
    mod: Mod = Mod.NONE


@dataclass(frozen=True)
class TextInput:
    """Text was typed; mod holds the modifiers active at the time."""

    text: str
    mod: Mod = Mod.NONE


@dataclass(frozen=True)
class MouseMotion:
    """The mouse moved to (x, y)."""

    x: float
    y: float


@dataclass(frozen=True)
class MouseButtonDown:
    """A mouse button was pressed at (x, y)."""

    x: float
    y: float
    button: MouseButton = MouseButton.LEFT


@dataclass(frozen=True)
class MouseButtonUp:
    """A mouse button was released at (x, y)."""

    x: float
    y: float
    button: MouseButton = MouseButton.LEFT


Event = Union[KeyDown, TextInput, MouseMotion, MouseButtonDown, MouseButtonUp]