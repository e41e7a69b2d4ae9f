"""Drawing of monsters, kept apart from their game state."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import pygame

from derptower.animation import Animation
from derptower.monsters import Chicken, CoolChicken, Monster
from derptower.utils import Direction, Point

if TYPE_CHECKING:
    from derptower.assets import AssetManager

CHICKEN_FRAME_INTERVAL_MS = 500
# Sprite-specific horizontal nudge for right-facing monsters.
IMAGE_X_OFFSET = 10.0


def _sprite_position(monster: Monster, sprite: pygame.Surface) -> Point:
    """Where to anchor a sprite so that it is centred on the monster.

    A left-facing sprite is mirrored about its anchor, so the anchor sits
    half a width to the right; a right-facing one half a width to the left.
    """
    half_width = sprite.get_width() / 2.0
    half_height = sprite.get_height() / 2.0
    x, y = monster.position
    if monster.direction is Direction.LEFT:
        return (x + half_width, y - half_height)
    return (x - half_width + IMAGE_X_OFFSET, y - half_height)


class MonsterView(abc.ABC):
    """Draws one monster and owns its view-only state such as animations."""

    monster: Monster

    @abc.abstractmethod
    def draw(self, surface: pygame.Surface, assets: AssetManager, now_ms: int) -> None:
        """Draw the monster at its current position."""


class ChickenView(MonsterView):
    """A chicken with a walking animation."""

    def __init__(self, assets: AssetManager, chicken: Optional[Chicken] = None) -> None:
        self.monster = chicken if chicken is not None else Chicken()
        walking = assets.monster_assets.chicken_assets.walking_sprites
        self.animation = Animation(
            sprites=list(walking[:2]),
            next_sprite_interval=CHICKEN_FRAME_INTERVAL_MS,
        )

    def draw(self, surface: pygame.Surface, assets: AssetManager, now_ms: int) -> None:
        reference = assets.monster_assets.chicken_assets.walking_sprites[0]
        position = _sprite_position(self.monster, reference)
        self.animation.draw(surface, self.monster.direction, position, now_ms)


@dataclass
class CoolChickenView(MonsterView):
    """A cool chicken, drawn from a single still sprite."""

    monster: CoolChicken = field(default_factory=CoolChicken)

    def draw(self, surface: pygame.Surface, assets: AssetManager, now_ms: int = 0) -> None:
        sprite = assets.monster_assets.cool_chicken_sprite
        x, y = _sprite_position(self.monster, sprite)
        if self.monster.direction is Direction.LEFT:
            flipped = pygame.transform.flip(sprite, True, False)
            surface.blit(flipped, (x - sprite.get_width(), y))
        else:
            surface.blit(sprite, (x, y))