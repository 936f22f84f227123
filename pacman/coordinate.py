"""Grid coordinates used by fields, spawn registries and level queries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Coordinate:
    """Mutable (x, y) grid position. x grows to the right, y grows down."""

    x: int
    y: int

    def copy(self) -> Coordinate:
        return Coordinate(self.x, self.y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
