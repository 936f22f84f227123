"""Parse ASCII level files (.txt) into validated-ready Level objects."""

from __future__ import annotations

import glob
import os
from dataclasses import dataclass

from coordinate import Coordinate
from field import Field
from level import Level
from level_errors import (
    ArgumentError,
    LevelCharacterError,
    LevelFormatError,
    NoPacmanSpawnPointError,
)
from tiles import Tile, tile_from_char


@dataclass
class ParserConfig:
    """Parser settings.

    test_mode allows fixture levels without a pacman spawn.
    """

    test_mode: bool = False


def _split_rows(text: str) -> list[str]:
    lines = text.replace("\r\n", "\n").split("\n")
    # Trailing line terminators do not start new rows
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_level(text: str, config: ParserConfig | None = None) -> Level:
    """Parse ASCII level text into an unvalidated Level.

    Raises:
        ArgumentError: text is None.
        LevelFormatError: text is empty or its rows differ in length.
        LevelCharacterError: a glyph has no tile.
        NoPacmanSpawnPointError: no 'P' was found (skipped in test mode).
    """
    if text is None:
        raise ArgumentError("Level text must not be None")
    config = config or ParserConfig()

    lines = _split_rows(text)
    if not lines:
        raise LevelFormatError("Empty level text")

    height = len(lines)
    width = len(lines[0])
    if width == 0:
        raise LevelFormatError("Row 0 is empty")

    pacman_spawns: list[Coordinate] = []
    ghost_spawns: list[Coordinate] = []
    fields: list[Field] = []

    for y, line in enumerate(lines):
        if len(line) != width:
            raise LevelFormatError(f"Row {y} has length {len(line)}, expected {width} (ragged rows)")
        for x, ch in enumerate(line):
            tile = tile_from_char(ch)
            if tile is None:
                raise LevelCharacterError(ch, x, y)
            fields.append(Field(Coordinate(x, y), tile))
            if tile is Tile.PLAYER_SPAWN:
                pacman_spawns.append(Coordinate(x, y))
            elif tile is Tile.GHOST_SPAWN:
                ghost_spawns.append(Coordinate(x, y))

    if not config.test_mode and not pacman_spawns:
        raise NoPacmanSpawnPointError()

    return Level(fields, width, height, pacman_spawns, ghost_spawns)


def level_name_from_path(path: str) -> str:
    """Readable level name: file name without directories or extension, '_' as spaces."""
    if not path:
        raise ArgumentError("Level path must not be empty")
    basename = path.replace("\\", "/").rsplit("/", 1)[-1]
    return os.path.splitext(basename)[0].replace("_", " ")


def load_level(path: str, config: ParserConfig | None = None) -> Level:
    """Load a .txt level file and return the parsed Level, named after the file."""
    if not path:
        raise ArgumentError("Level path must not be empty")
    with open(path, encoding="utf-8") as f:
        text = f.read()
    level = parse_level(text, config)
    level.name = level_name_from_path(path)
    return level


def list_level_files(levels_dir: str) -> list[str]:
    """All .txt level files in a directory, sorted by path."""
    return sorted(glob.glob(os.path.join(levels_dir, "*.txt")))
