"""A single grid cell: a coordinate bound to a tile."""

from __future__ import annotations

from coordinate import Coordinate
from level_errors import ArgumentError
from tiles import Tile


class Field:
    """One cell of a level.

    Both the coordinate and the tile can be replaced after construction, but
    neither may ever be None.
    """

    def __init__(self, coordinate: Coordinate, tile: Tile):
        self.coordinate = coordinate
        self.tile = tile

    @property
    def coordinate(self) -> Coordinate:
        return self._coordinate

    @coordinate.setter
    def coordinate(self, value: Coordinate) -> None:
        if value is None:
            raise ArgumentError("coordinate must not be None")
        self._coordinate = value

    @property
    def tile(self) -> Tile:
        return self._tile

    @tile.setter
    def tile(self, value: Tile) -> None:
        if value is None:
            raise ArgumentError("tile must not be None")
        self._tile = value

    @property
    def is_solid(self) -> bool:
        """Wall or background: never entered and never explored."""
        return self._tile in (Tile.WALL, Tile.BACKGROUND)

    @property
    def is_wall(self) -> bool:
        return self._tile is Tile.WALL

    @property
    def is_free(self) -> bool:
        """Open floor or a dot."""
        return self._tile in (Tile.SPACE, Tile.DOT)

    @property
    def is_dot(self) -> bool:
        return self._tile is Tile.DOT

    def __str__(self) -> str:
        return self._tile.char

    def __repr__(self) -> str:
        return f"Field({self._coordinate.x}, {self._coordinate.y}, {self._tile.name})"
