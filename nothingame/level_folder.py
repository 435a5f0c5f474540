"""The set of levels found in a directory."""

from __future__ import annotations

import os

from nothingame.level_metadata import LevelMetadata
from nothingame.line_stream import trim_endline

LEVEL_FOLDER_MAX_LENGTH = 512


class LevelFolder:
    """Paths and titles of every non-hidden file in a directory, sorted by name."""

    def __init__(self, dirpath: str) -> None:
        self.filenames: list[str] = []
        self.titles: list[str] = []
        for name in sorted(os.listdir(dirpath)):
            if name.startswith("."):
                continue
            path = trim_endline(f"{dirpath}/{name}"[: LEVEL_FOLDER_MAX_LENGTH - 1])
            metadata = LevelMetadata.from_file(path)
            self.titles.append(metadata.title)
            self.filenames.append(path)

    def __len__(self) -> int:
        return len(self.filenames)