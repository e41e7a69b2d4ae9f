"""Coordinate scaling between the game world and the viewport."""

from __future__ import annotations

import enum
from dataclasses import dataclass

Point = tuple[float, float]


@dataclass(frozen=True)
class Scale:
    """The x and y scale that maps game coordinates onto the viewport."""

    x: float
    y: float

    def to_game_point(self, x: float, y: float) -> Point:
        """Map a viewport point to game coordinates."""
        return (x / self.x, y / self.y)

    def to_viewport_point(self, x: float, y: float) -> Point:
        """Map a game point to viewport coordinates."""
        return (x * self.x, y * self.y)


class Direction(enum.Enum):
    """Horizontal facing of a sprite."""

    LEFT = "left"
    RIGHT = "right"