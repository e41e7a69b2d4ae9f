"""Towers that shoot at monsters passing within range."""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Optional, Sequence

import pygame

from derptower.components import BLOCK_SIZE, GoldPile
from derptower.utils import Point

if TYPE_CHECKING:
    from derptower.assets import AssetManager
    from derptower.views import MonsterView

log = logging.getLogger(__name__)

ATTACK_LINE_COLOR = pygame.Color(0, 255, 255, 255)
ATTACK_LINE_WIDTH = 3
SPRITE_OFFSET = (-5.0, -35.0)


class TowerType(enum.Enum):
    BASIC = "basic"
    NINJA = "ninja"


@dataclass
class Tower:
    """A tower on a block position that periodically damages nearby monsters."""

    ATTACK_RANGE: ClassVar[float] = 100.0
    ATTACK_TIMER: ClassVar[float] = 1.0
    DAMAGE: ClassVar[float] = 10.0
    TYPE: ClassVar[TowerType]

    position: Point
    attack_cooldown: float = 0.0

    def center(self) -> Point:
        """The absolute position of the tower's centre."""
        x, y = self.position
        return (x * BLOCK_SIZE + BLOCK_SIZE / 2.0, y * BLOCK_SIZE + BLOCK_SIZE / 2.0)

    def in_attack_range(self, position: Point) -> bool:
        """Whether an absolute position is strictly within attack range."""
        cx, cy = self.center()
        dx, dy = cx - position[0], cy - position[1]
        return dx * dx + dy * dy < self.ATTACK_RANGE * self.ATTACK_RANGE

    def update(
        self,
        elapsed: float,
        monster_views: Sequence[MonsterView],
        gold_piles: list[GoldPile],
        assets: Optional[AssetManager] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Count down the cooldown and attack every monster in range when ready."""
        self.attack_cooldown = max(self.attack_cooldown - elapsed, 0.0)
        if self.attack_cooldown != 0.0:
            return
        damage_dealt = False
        for view in monster_views:
            if self.in_attack_range(view.monster.center()):
                damage_dealt = True
                view.monster.receive_damage(self.DAMAGE, gold_piles, assets, rng)
        if damage_dealt:
            log.info("tower at %s attacked at least one monster", self.position)
            if assets is not None:
                assets.tower_assets.tower_attack_sound.play()
            self.attack_cooldown = self.ATTACK_TIMER

    def _sprite(self, assets: AssetManager) -> pygame.Surface:
        return assets.tower_assets.tower_sprite

    def draw(self, surface: pygame.Surface, assets: AssetManager) -> None:
        x, y = self.position
        surface.blit(
            self._sprite(assets),
            (x * BLOCK_SIZE + SPRITE_OFFSET[0], y * BLOCK_SIZE + SPRITE_OFFSET[1]),
        )

    def draw_abilities(
        self, surface: pygame.Surface, monster_views: Sequence[MonsterView]
    ) -> None:
        """Draw a line from the tower to every monster within range."""
        origin = self.center()
        for view in monster_views:
            target = view.monster.center()
            if self.in_attack_range(target) and target != origin:
                pygame.draw.line(surface, ATTACK_LINE_COLOR, origin, target, ATTACK_LINE_WIDTH)


@dataclass
class BasicTower(Tower):
    ATTACK_TIMER: ClassVar[float] = 1.0
    TYPE: ClassVar[TowerType] = TowerType.BASIC


@dataclass
class NinjaTower(Tower):
    """A slower tower that now and then strikes a random monster anywhere."""

    ATTACK_TIMER: ClassVar[float] = 2.0
    STRONG_ATTACK_TIMER: ClassVar[float] = 10.0
    STRONG_ATTACK_DAMAGE: ClassVar[float] = 1000.0
    TYPE: ClassVar[TowerType] = TowerType.NINJA

    attack_cooldown: float = 2.0
    strong_attack_cooldown: float = 5.0

    def update(
        self,
        elapsed: float,
        monster_views: Sequence[MonsterView],
        gold_piles: list[GoldPile],
        assets: Optional[AssetManager] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.strong_attack_cooldown = max(self.strong_attack_cooldown - elapsed, 0.0)
        super().update(elapsed, monster_views, gold_piles, assets, rng)
        if self.strong_attack_cooldown != 0.0 or not monster_views:
            return
        target = monster_views[(rng or random).randrange(len(monster_views))]
        target.monster.receive_damage(self.STRONG_ATTACK_DAMAGE, gold_piles, assets, rng)
        if assets is not None:
            assets.tower_assets.ninja_tower_strong_attack_sound.play()
        self.strong_attack_cooldown = self.STRONG_ATTACK_TIMER

    def _sprite(self, assets: AssetManager) -> pygame.Surface:
        return assets.tower_assets.tower_ninja_sprite