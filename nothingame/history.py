"""Ring buffer of console commands."""

from __future__ import annotations


class History:
    """Fixed-size command history with a browsing cursor."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("history capacity must be positive")
        self._buffer: list[str | None] = [None] * capacity
        self._begin = 0
        self._cursor = 0

    def push(self, command: str) -> None:
        """Store a command, overwriting the oldest one when full."""
        self._buffer[self._begin] = command
        self._begin = (self._begin + 1) % len(self._buffer)
        self._cursor = self._begin

    def current(self) -> str | None:
        """The command under the cursor, or None for an empty slot."""
        return self._buffer[self._cursor]

    def prev(self) -> None:
        self._cursor = (self._cursor - 1) % len(self._buffer)

    def next(self) -> None:
        self._cursor = (self._cursor + 1) % len(self._buffer)