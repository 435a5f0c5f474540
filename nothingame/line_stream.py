"""Chunked line reading from text files."""

from __future__ import annotations

from typing import TextIO

from nothingame.log import log_fail


def trim_endline(s: str) -> str:
    """Drop a single trailing newline, if present."""
    return s[:-1] if s.endswith("\n") else s


class LineStream:
    """Reads a file in chunks of at most capacity - 1 characters.

    A line longer than a chunk is truncated by next_line: the rest of it
    is skipped on the following call.
    """

    def __init__(self, path: str, capacity: int = 256) -> None:
        if capacity < 2:
            raise ValueError("line stream capacity must be at least 2")
        try:
            self._stream: TextIO = open(path, "r", encoding="utf-8", newline="\n")
        except OSError as error:
            log_fail("Could not open file '%s': %s\n", path, error.strerror)
            raise
        self._capacity = capacity
        self._unfinished = False

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def next_chunk(self) -> str | None:
        """Next piece of the file, or None at end of file."""
        chunk = self._stream.readline(self._capacity - 1)
        if not chunk:
            self._unfinished = False
            return None
        self._unfinished = not chunk.endswith("\n")
        return chunk

    def next_line(self) -> str | None:
        """Start of the next line, with its newline if it fits; None at end."""
        while self._unfinished:
            self.next_chunk()
        return self.next_chunk()

    def collect_n_lines(self, n: int) -> str:
        """Concatenate the next n lines; EOFError if fewer remain."""
        parts = []
        for _ in range(n):
            line = self.next_line()
            if line is None:
                raise EOFError(f"expected {n} lines, got {len(parts)}")
            parts.append(line)
        return "".join(parts)

    def collect_until_end(self) -> str:
        """Concatenate every remaining line."""
        parts = []
        while (line := self.next_line()) is not None:
            parts.append(line)
        return "".join(parts)

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> LineStream:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()