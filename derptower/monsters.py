"""Monsters that walk the path towards the player's base."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Optional, Sequence

from derptower.components import BLOCK_SIZE, Block, GoldPile, Player
from derptower.utils import Direction

if TYPE_CHECKING:
    from derptower.assets import AssetManager

GOLD_DROP_VALUE = 10
GOLD_DROP_OFFSET = 10.0


class MonsterType(enum.Enum):
    CHICKEN = "chicken"
    COOL_CHICKEN = "cool_chicken"


class MonsterState(enum.IntEnum):
    WALKING = 0
    ATTACKING = 1
    DEAD = 2


@dataclass
class Monster:
    """A monster following the path blocks in order, then attacking the player."""

    SIZE: ClassVar[float] = 20.0
    DAMAGE: ClassVar[float] = 1.0
    TYPE: ClassVar[MonsterType]

    position: tuple[float, float] = (0.0, 0.0)
    speed: float = 100.0
    health: float = 100.0
    move_goal: int = 0
    state: MonsterState = MonsterState.WALKING
    direction: Direction = Direction.RIGHT

    def center(self) -> tuple[float, float]:
        """The absolute position of the monster's centre."""
        x, y = self.position
        return (x + self.SIZE / 2.0, y + self.SIZE / 2.0)

    def receive_damage(
        self,
        damage: float,
        gold_piles: list[GoldPile],
        assets: Optional[AssetManager] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Take damage; on death, drop a gold pile near the monster."""
        if self.state is MonsterState.DEAD:
            return
        self.health -= damage
        if self.health > 0.0:
            return
        if assets is not None:
            assets.monster_assets.monster_hurt_sound.play()
        self.state = MonsterState.DEAD
        rand = (rng or random).random
        x, y = self.position
        gold_piles.append(
            GoldPile(
                position=(
                    x + (rand() * GOLD_DROP_OFFSET - GOLD_DROP_OFFSET * 2.0),
                    y + (rand() * GOLD_DROP_OFFSET - GOLD_DROP_OFFSET * 2.0),
                ),
                value=GOLD_DROP_VALUE,
            )
        )

    def update(self, elapsed: float, path_blocks: Sequence[Block], player: Player) -> None:
        """Advance the monster by `elapsed` seconds."""
        if self.state is MonsterState.ATTACKING:
            player.health -= self.DAMAGE
            self.state = MonsterState.DEAD
        if self.state is MonsterState.DEAD:
            return
        self._try_moving(elapsed, path_blocks)

    def _try_moving(self, elapsed: float, path_blocks: Sequence[Block]) -> None:
        if self.state is not MonsterState.WALKING:
            return
        if self.move_goal == len(path_blocks):
            self.state = MonsterState.ATTACKING
            return

        bx, by = path_blocks[self.move_goal].position
        half = BLOCK_SIZE / 2.0 - self.SIZE / 2.0
        goal_x = bx * BLOCK_SIZE + half
        goal_y = by * BLOCK_SIZE + half

        x, y = self.position
        dx, dy = goal_x - x, goal_y - y
        self.direction = Direction.RIGHT if dx >= 0.0 else Direction.LEFT

        dist = math.hypot(dx, dy)
        if dist == 0.0:
            self.move_goal += 1
            return

        ux, uy = dx / dist, dy / dist
        step = self.speed * elapsed
        if dist < step:
            self.move_goal += 1
            self.position = (x + ux * dist, y + uy * dist)
        else:
            self.position = (x + ux * step, y + uy * step)


@dataclass
class Chicken(Monster):
    TYPE: ClassVar[MonsterType] = MonsterType.CHICKEN


@dataclass
class CoolChicken(Monster):
    TYPE: ClassVar[MonsterType] = MonsterType.COOL_CHICKEN