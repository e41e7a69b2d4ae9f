"""Static pieces of the board: path blocks, the base, gold piles and the player."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

from derptower.utils import Point

if TYPE_CHECKING:
    from derptower.assets import AssetManager

BLOCK_SIZE = 35.0
BASE_SIZE = 60.0
BASE_PADDING = 5.0
GOLD_DRAW_OFFSET_Y = -10.0

BLOCK_COLOR = pygame.Color(round(0.1 * 255), round(0.4 * 255), 0, 255)


@dataclass
class Block:
    """One tile of the monsters' path, in block coordinates."""

    position: Point

    def draw(self, surface: pygame.Surface) -> None:
        x, y = self.position
        rect = pygame.Rect(x * BLOCK_SIZE, y * BLOCK_SIZE, BLOCK_SIZE, BLOCK_SIZE)
        pygame.draw.rect(surface, BLOCK_COLOR, rect)


@dataclass
class Base:
    """The player's base, in block coordinates."""

    position: Point

    def draw(self, surface: pygame.Surface, assets: AssetManager) -> None:
        x, y = self.position
        surface.blit(
            assets.base_assets.base_sprite,
            (x * BLOCK_SIZE + BASE_PADDING, y * BLOCK_SIZE + BASE_PADDING),
        )

    def is_position_in_base(self, position: Point) -> bool:
        """Whether an absolute position lies inside the base's area."""
        px, py = position
        left = self.position[0] * BLOCK_SIZE
        top = self.position[1] * BLOCK_SIZE
        extent = BASE_SIZE + 2.0 * BASE_PADDING
        return (
            left - BASE_PADDING <= px <= left + extent
            and top <= py <= top + extent
        )


@dataclass
class GoldPile:
    """Gold dropped by a monster, at an absolute position."""

    position: Point
    value: int

    def draw(self, surface: pygame.Surface, assets: AssetManager) -> None:
        x, y = self.position
        surface.blit(assets.item_assets.gold_sprite, (x, y + GOLD_DRAW_OFFSET_Y))


@dataclass
class Player:
    health: float = 100.0
    gold: int = 300