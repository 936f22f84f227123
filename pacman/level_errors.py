"""Errors raised while parsing and validating levels.

All of them derive from ValueError, so callers that only care about bad level
input can catch that.
"""

from __future__ import annotations

from coordinate import Coordinate


class LevelError(ValueError):
    """Base class for every level parsing or validation failure."""


class ArgumentError(LevelError):
    """A required argument (path, content, tile, point) is missing."""


class LevelFormatError(LevelError):
    """The level text is empty or not rectangular."""


class LevelCharacterError(LevelError):
    def __init__(self, char: str, x: int, y: int):
        super().__init__(f"Unknown character '{char}' at ({x}, {y})")
        self.char = char
        self.x = x
        self.y = y


class NoPacmanSpawnPointError(LevelError):
    def __init__(self, message: str = "No pacman spawn point ('P') found in level"):
        super().__init__(message)


class NoGhostSpawnPointError(LevelError):
    def __init__(self, message: str = "No ghost spawn point ('G') found in level"):
        super().__init__(message)


class NoDotsError(LevelError):
    def __init__(self, message: str = "No dots ('.') found in level"):
        super().__init__(message)


class ReachabilityError(LevelError):
    """A dot cannot be reached from the first pacman spawn."""

    def __init__(self, level_name: str, coordinate: Coordinate):
        super().__init__(f"{level_name}: {coordinate.x},{coordinate.y}")
        self.level_name = level_name
        self.coordinate = coordinate
