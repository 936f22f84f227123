"""Tile kinds and their single-character encoding in level files."""

from __future__ import annotations

from enum import Enum, unique


@unique
class Tile(Enum):
    """Semantic classification of a grid cell. The value is the level-file glyph."""

    WALL = "#"
    BACKGROUND = "_"  # outside the maze, impassable but not a wall
    SPACE = " "
    DOT = "."
    POWERUP = "o"
    PLAYER_SPAWN = "P"
    GHOST_SPAWN = "G"

    @property
    def char(self) -> str:
        return self.value


# Character → Tile mapping
CHAR_TO_TILE: dict[str, Tile] = {tile.char: tile for tile in Tile}


def tile_from_char(ch: str) -> Tile | None:
    """Return the tile encoded by ``ch``, or None if the glyph is unknown."""
    return CHAR_TO_TILE.get(ch)


def is_valid_char(ch: str) -> bool:
    return ch in CHAR_TO_TILE
