"""Level metadata read from the head of a level file."""

from __future__ import annotations

from dataclasses import dataclass

from nothingame.line_stream import LineStream, trim_endline


@dataclass(frozen=True)
class LevelMetadata:
    """Metadata of a level; the title loses a trailing newline."""

    title: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", trim_endline(self.title))

    @staticmethod
    def from_file(path: str) -> LevelMetadata:
        with LineStream(path, 256) as line_stream:
            return LevelMetadata.from_line_stream(line_stream)

    @staticmethod
    def from_line_stream(line_stream: LineStream) -> LevelMetadata:
        """Take the title from the next line of the stream."""
        line = line_stream.next_line()
        if line is None:
            raise ValueError("level file has no title line")
        return LevelMetadata(line)