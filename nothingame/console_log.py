"""Ring buffer of coloured console output lines."""

from __future__ import annotations

from typing import Generic, TypeVar

ColorT = TypeVar("ColorT")


class ConsoleLog(Generic[ColorT]):
    """Keeps the most recent capacity lines, each with its colour."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("console log capacity must be positive")
        self._buffer: list[tuple[str, ColorT] | None] = [None] * capacity
        self._cursor = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def push_line(self, line: str, color: ColorT) -> None:
        """Append a line, dropping the oldest one when full."""
        self._buffer[self._cursor] = (line, color)
        self._cursor = (self._cursor + 1) % len(self._buffer)

    def lines(self) -> list[tuple[str, ColorT]]:
        """Stored (line, colour) pairs from oldest to newest."""
        n = len(self._buffer)
        ordered = (self._buffer[(i + self._cursor) % n] for i in range(n))
        return [entry for entry in ordered if entry is not None]