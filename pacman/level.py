"""Playable Pac-Man level: the tile grid, spawn registries and reachability check."""

from __future__ import annotations

import os
import warnings

import numpy as np

from coordinate import Coordinate
from field import Field
from level_errors import (
    ArgumentError,
    NoDotsError,
    NoGhostSpawnPointError,
    NoPacmanSpawnPointError,
    ReachabilityError,
)
from tiles import tile_from_char


class Level:
    """A rectangular grid of fields plus pacman and ghost spawn points.

    The grid is stored as one row-major list indexed by ``y * width + x``.
    Coordinates outside the grid are solid (``is_solid``) but not walls
    (``is_wall``); the game loop relies on both answers.

    Movement wraps around the grid edges, so ``validate`` checks reachability
    on a torus. ``neighbors`` does not wrap.
    """

    DEFAULT_NAME = "Unnamed Level"

    def __init__(
        self,
        fields: list[Field],
        width: int,
        height: int,
        pacman_spawns: list[Coordinate],
        ghost_spawns: list[Coordinate],
        name: str = DEFAULT_NAME,
        seed: int | None = None,
    ):
        if width <= 0 or height <= 0:
            raise ArgumentError(f"Level size must be positive, got {width}x{height}")
        if len(fields) != width * height:
            raise ArgumentError(f"Expected {width * height} fields for {width}x{height}, got {len(fields)}")

        self._fields = fields
        self._width = width
        self._height = height
        self._pacman_spawns = list(pacman_spawns)
        self._ghost_spawns = list(ghost_spawns)
        self.name = name

        for spawn in self._pacman_spawns + self._ghost_spawns:
            if not self.in_bounds(spawn.x, spawn.y):
                raise ArgumentError(f"Spawn point ({spawn.x}, {spawn.y}) lies outside the level")

        # Round-robin cursor for next_ghost_spawn, only ever incremented
        self._ghost_spawn_counter = 0
        self._rng = np.random.default_rng(seed)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def fields(self) -> list[Field]:
        """The grid itself, shared by reference."""
        return self._fields

    @property
    def pacman_spawns(self) -> list[Coordinate]:
        return self._pacman_spawns

    @property
    def ghost_spawns(self) -> list[Coordinate]:
        return self._ghost_spawns

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_field(self, x: int, y: int) -> Field:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self._width}x{self._height} level")
        return self._fields[y * self._width + x]

    def set_field(self, x: int, y: int, char: str) -> None:
        """Overwrite a single cell from its level-file glyph.

        Deprecated: spawn registries are not updated, so placing or removing
        a spawn glyph here leaves the level inconsistent.
        """
        warnings.warn(
            "Level.set_field is deprecated; build a new level with parse_level instead",
            DeprecationWarning,
            stacklevel=2,
        )
        field = Field(Coordinate(x, y), tile_from_char(char))
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self._width}x{self._height} level")
        self._fields[y * self._width + x] = field

    # ------------------------------------------------------------------
    # Collision queries
    # ------------------------------------------------------------------

    def is_solid(self, x: int, y: int) -> bool:
        """Wall or background. Everything outside the grid is solid."""
        if not self.in_bounds(x, y):
            return True
        return self._fields[y * self._width + x].is_solid

    def is_wall(self, x: int, y: int) -> bool:
        """Wall only. Nothing outside the grid is a wall."""
        if not self.in_bounds(x, y):
            return False
        return self._fields[y * self._width + x].is_wall

    def exists_straight_line(self, p1: Coordinate, p2: Coordinate) -> bool:
        """True if p1 and p2 share a row or column with no wall between them (inclusive)."""
        if p1 is None or p2 is None:
            raise ArgumentError("exists_straight_line needs two points")

        if p1.x == p2.x:
            for y in range(min(p1.y, p2.y), max(p1.y, p2.y) + 1):
                if self.is_wall(p1.x, y):
                    return False
            return True
        if p1.y == p2.y:
            for x in range(min(p1.x, p2.x), max(p1.x, p2.x) + 1):
                if self.is_wall(x, p1.y):
                    return False
            return True
        # No common axis, no line of sight
        return False

    def neighbors(self, p: Coordinate) -> list[Coordinate]:
        """Orthogonal non-wall neighbours of p in the order west, north, east, south.

        Only cells inside the grid are returned, on all four sides (north and
        south are bounded like west and east), and there is no wraparound here.
        """
        result: list[Coordinate] = []
        for dx, dy in ((-1, 0), (0, -1), (1, 0), (0, 1)):
            nx, ny = p.x + dx, p.y + dy
            if self.in_bounds(nx, ny) and not self.is_wall(nx, ny):
                result.append(Coordinate(nx, ny))
        return result

    # ------------------------------------------------------------------
    # Spawn points and random cells
    # ------------------------------------------------------------------

    def random_pacman_spawn(self) -> Coordinate:
        if not self._pacman_spawns:
            raise NoPacmanSpawnPointError()
        return self._pacman_spawns[int(self._rng.integers(len(self._pacman_spawns)))].copy()

    def random_ghost_spawn(self) -> Coordinate:
        if not self._ghost_spawns:
            raise NoGhostSpawnPointError()
        return self._ghost_spawns[int(self._rng.integers(len(self._ghost_spawns)))].copy()

    def next_ghost_spawn(self) -> Coordinate:
        """Cycle through the ghost spawns in registration order."""
        if not self._ghost_spawns:
            raise NoGhostSpawnPointError()
        spawn = self._ghost_spawns[self._ghost_spawn_counter % len(self._ghost_spawns)]
        self._ghost_spawn_counter += 1
        return spawn.copy()

    def random_free_cell(self) -> Coordinate:
        """Random position whose tile is open floor or a dot."""
        free = [f.coordinate for f in self._fields if f.is_free]
        if not free:
            raise NoDotsError(f"{self.name}: no free cell in level")
        return free[int(self._rng.integers(len(free)))].copy()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _has_dot(self) -> bool:
        return any(f.is_dot for f in self._fields)

    def validate(self) -> None:
        """Check that the level is playable.

        Raises, in this order of priority:
            NoPacmanSpawnPointError: no pacman spawn registered.
            NoGhostSpawnPointError: no ghost spawn registered.
            NoDotsError: no dot placed.
            ReachabilityError: a dot cannot be reached from the first pacman spawn.
        """
        if not self._pacman_spawns:
            raise NoPacmanSpawnPointError()
        if not self._ghost_spawns:
            raise NoGhostSpawnPointError()
        if not self._has_dot():
            raise NoDotsError()
        self._check_reachability()

    def _check_reachability(self) -> None:
        """Flood fill from the first pacman spawn with wraparound at every edge."""
        w, h = self._width, self._height

        # Solid cells start settled and are never explored
        settled = np.array([f.is_solid for f in self._fields], dtype=bool).reshape(h, w)

        start = self._pacman_spawns[0]
        stack = [(start.x, start.y)]
        while stack:
            x, y = stack.pop()
            if settled[y, x]:
                continue
            settled[y, x] = True
            for nx, ny in (
                ((x - 1) % w, y),
                ((x + 1) % w, y),
                (x, (y - 1) % h),
                (x, (y + 1) % h),
            ):
                if not settled[ny, nx]:
                    stack.append((nx, ny))

        dots = np.array([f.is_dot for f in self._fields], dtype=bool).reshape(h, w)
        unreachable = np.argwhere(dots & ~settled)
        if len(unreachable) > 0:
            # argwhere yields (row, col) pairs in row-major order
            y, x = unreachable[0]
            raise ReachabilityError(self.name, Coordinate(int(x), int(y)))

    def __str__(self) -> str:
        rows = []
        for y in range(self._height):
            row = self._fields[y * self._width : (y + 1) * self._width]
            rows.append("".join(str(f) for f in row))
        return os.linesep.join(rows)

    def __repr__(self) -> str:
        return f"Level(name={self.name!r}, width={self._width}, height={self._height})"
