"""Releasing monsters onto the board on a fixed schedule."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from derptower.monsters import CoolChicken, MonsterType
from derptower.views import ChickenView, CoolChickenView, MonsterView

if TYPE_CHECKING:
    from derptower.assets import AssetManager
    from derptower.board import Board

DEFAULT_SCHEDULE = (
    (MonsterType.CHICKEN, 0.0),
    (MonsterType.CHICKEN, 3.0),
    (MonsterType.CHICKEN, 5.0),
    (MonsterType.CHICKEN, 7.0),
    (MonsterType.CHICKEN, 8.0),
    (MonsterType.CHICKEN, 8.5),
    (MonsterType.CHICKEN, 8.6),
    (MonsterType.CHICKEN, 8.7),
    (MonsterType.CHICKEN, 8.8),
    (MonsterType.COOL_CHICKEN, 14.0),
)


def _default_schedule() -> deque[tuple[MonsterType, float]]:
    return deque(DEFAULT_SCHEDULE)


@dataclass
class MonsterSpawner:
    """Spawns monsters once the game clock passes their scheduled time.

    The schedule must be in chronological order.
    """

    spawn_schedule: deque[tuple[MonsterType, float]] = field(
        default_factory=_default_schedule
    )
    elapsed_time: float = 0.0

    def __post_init__(self) -> None:
        self.spawn_schedule = deque(self.spawn_schedule)

    def update(self, elapsed: float, board: Board, assets: AssetManager) -> None:
        """Advance the clock and put every monster that is due on the board."""
        self.elapsed_time += elapsed
        while self.spawn_schedule and self.spawn_schedule[0][1] < self.elapsed_time:
            monster_type, _ = self.spawn_schedule.popleft()
            board.monster_views.append(self._spawn(monster_type, assets))

    @staticmethod
    def _spawn(monster_type: MonsterType, assets: AssetManager) -> MonsterView:
        if monster_type is MonsterType.CHICKEN:
            return ChickenView(assets)
        return CoolChickenView(monster=CoolChicken())