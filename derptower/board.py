"""The playing field: the monsters' path, the towers, the monsters and the loot."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from derptower.components import BLOCK_SIZE, Base, Block, GoldPile
from derptower.utils import Point

if TYPE_CHECKING:
    from derptower.towers import Tower
    from derptower.views import MonsterView

log = logging.getLogger(__name__)

# The path the monsters walk, in block coordinates, from spawn to base.
PATH = (
    (0.0, 0.0),
    (0.0, 1.0),
    (0.0, 2.0),
    (1.0, 2.0),
    (2.0, 2.0),
    (2.0, 3.0),
    (2.0, 3.0),
    (2.0, 4.0),
    (2.0, 5.0),
    *((float(x), 5.0) for x in range(3, 21)),
    (20.0, 6.0),
    (20.0, 7.0),
    (20.0, 8.0),
    (20.0, 9.0),
    *((float(x), 9.0) for x in range(19, 1, -1)),
)
BASE_POSITION = (0.0, 8.0)


def _block_of(position: Point) -> Point:
    return (
        float(math.floor(position[0] / BLOCK_SIZE)),
        float(math.floor(position[1] / BLOCK_SIZE)),
    )


@dataclass
class Board:
    """Everything placed on the playing field."""

    path_blocks: list[Block]
    base: Base
    towers: list[Tower] = field(default_factory=list)
    monster_views: list[MonsterView] = field(default_factory=list)
    gold_piles: list[GoldPile] = field(default_factory=list)

    @classmethod
    def generate(cls, seed: int = 1, length: int = 2) -> Board:
        """Build the board; the layout is fixed whatever the seed and length."""
        return cls(
            path_blocks=[Block(position=position) for position in PATH],
            base=Base(position=BASE_POSITION),
        )

    def position_is_occupied(self, click_position: Point) -> bool:
        """Whether an absolute position falls on a tower, the path or the base."""
        block = _block_of(click_position)
        if any(tuple(tower.position) == block for tower in self.towers):
            return True
        if any(tuple(path.position) == block for path in self.path_blocks):
            return True
        return self.base.is_position_in_base(click_position)

    def add_tower(self, tower: Tower) -> None:
        """Insert a tower so the list stays sorted by y, which sets drawing order."""
        log.debug("trying to place new tower at position %s", tower.position)
        y = tower.position[1]
        index = next(
            (i for i, placed in enumerate(self.towers) if placed.position[1] >= y),
            len(self.towers),
        )
        log.debug("new tower put at list index %d", index)
        self.towers.insert(index, tower)