"""Timing and drawing of a looping sprite animation."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from derptower.utils import Direction, Point


@dataclass
class Animation:
    """A looping sequence of sprites that advances at a fixed interval."""

    sprites: list[pygame.Surface]
    next_sprite_interval: int = 500
    current_sprite: int = 0
    next_sprite_time: int = 0

    def __post_init__(self) -> None:
        if not self.sprites:
            raise ValueError("an animation needs at least one sprite")

    def advance(self, now_ms: int) -> pygame.Surface:
        """Move to the next frame if its time has come; return the current frame."""
        if now_ms > self.next_sprite_time:
            self.next_sprite_time = now_ms + self.next_sprite_interval
            self.current_sprite = (self.current_sprite + 1) % len(self.sprites)
        return self.sprites[self.current_sprite]

    def draw(
        self,
        surface: pygame.Surface,
        direction: Direction,
        position: Point,
        now_ms: int,
    ) -> None:
        """Draw the current frame; a left-facing frame is mirrored about position."""
        sprite = self.advance(now_ms)
        x, y = position
        if direction is Direction.LEFT:
            flipped = pygame.transform.flip(sprite, True, False)
            surface.blit(flipped, (x - sprite.get_width(), y))
        else:
            surface.blit(sprite, (x, y))