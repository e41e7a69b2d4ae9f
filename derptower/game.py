"""The game state, its event handlers and the window loop that drives them."""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from derptower.assets import AssetManager, load_assets
from derptower.board import Board
from derptower.components import BLOCK_SIZE, Player
from derptower.monsters import MonsterState
from derptower.spawner import MonsterSpawner
from derptower.towers import BasicTower, NinjaTower, Tower, TowerType
from derptower.ui import DEFAULT_HEIGHT, DEFAULT_WIDTH, UI
from derptower.utils import Scale

log = logging.getLogger(__name__)

WINDOW_TITLE = "TowerOfDerp"
CLEAR_COLOR = pygame.Color(round(0.1 * 255), round(0.2 * 255), round(0.3 * 255), 255)
STARTING_HEALTH = 100.0
STARTING_GOLD = 300
BASIC_TOWER_COST = 10
NINJA_TOWER_COST = 20
FRAMES_PER_SECOND = 60

TOWER_COSTS = {TowerType.BASIC: BASIC_TOWER_COST, TowerType.NINJA: NINJA_TOWER_COST}
TOWER_CLASSES: dict[TowerType, type[Tower]] = {
    TowerType.BASIC: BasicTower,
    TowerType.NINJA: NinjaTower,
}
TOWER_KEYS = {pygame.K_1: TowerType.BASIC, pygame.K_2: TowerType.NINJA}


class Game:
    """All state of a running game and its reactions to time and input.

    `screen_size` is the window size in pixels; mouse positions are given in
    window pixels and mapped back onto the 800x600 game area.
    """

    def __init__(self, assets: AssetManager) -> None:
        self.assets = assets
        self.player = Player(health=STARTING_HEALTH, gold=STARTING_GOLD)
        self.spawner = MonsterSpawner()
        self.ui = UI()
        self.board = Board.generate(1, 2)
        self.screen_size: tuple[float, float] = (DEFAULT_WIDTH, DEFAULT_HEIGHT)
        self.rng = random.Random()

    def _scale(self) -> Scale:
        width, height = self.screen_size
        return Scale(x=width / DEFAULT_WIDTH, y=height / DEFAULT_HEIGHT)

    def update(self, elapsed: float) -> None:
        """Advance the game by `elapsed` seconds."""
        log.debug("update: elapsed %s", elapsed)
        board = self.board
        self.spawner.update(elapsed, board, self.assets)

        for view in board.monster_views:
            view.monster.update(elapsed, board.path_blocks, self.player)

        before = len(board.monster_views)
        board.monster_views[:] = [
            view for view in board.monster_views if view.monster.state is not MonsterState.DEAD
        ]
        log.debug("update: removed %d dead monsters", before - len(board.monster_views))

        for tower in board.towers:
            tower.update(elapsed, board.monster_views, board.gold_piles, self.assets, self.rng)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the whole game onto an 800x600 surface."""
        surface.fill(CLEAR_COLOR)
        now_ms = pygame.time.get_ticks()
        board = self.board

        for block in board.path_blocks:
            block.draw(surface)
        for view in board.monster_views:
            view.draw(surface, self.assets, now_ms)
        for tower in board.towers:
            tower.draw(surface, self.assets)
        for tower in board.towers:
            tower.draw_abilities(surface, board.monster_views)
        for pile in board.gold_piles:
            pile.draw(surface, self.assets)
        board.base.draw(surface, self.assets)

        self.ui.screen_size = self.screen_size
        self.ui.draw(surface, self.player, self.assets)

    def mouse_motion(self, x: float, y: float) -> None:
        """React to the mouse moving to window pixel (x, y)."""
        self.ui.mouse_motion(
            self.screen_size, x, y, self.board.gold_piles, self.player, self.assets
        )

    def mouse_button_down(self, x: float, y: float) -> None:
        """Select a hovered build bar icon, or build the selected tower at (x, y)."""
        log.debug("mouse button down at x(%s), y(%s)", x, y)
        if self.ui.hovering_on is not None:
            self.ui.selected_tile_type = self.ui.hovering_on

        if self.ui.selected_tile_rect is None:
            return

        gx, gy = self._scale().to_game_point(x, y)
        if self.board.position_is_occupied((gx, gy)):
            return

        tower_type = self.ui.selected_tile_type
        cost = TOWER_COSTS[tower_type]
        if self.player.gold < cost:
            return
        self.player.gold -= cost
        block = (float(gx // BLOCK_SIZE), float(gy // BLOCK_SIZE))
        log.debug("placing new %s tower at %s", tower_type.value, block)
        self.board.add_tower(TOWER_CLASSES[tower_type](position=block))

    def key_down(self, key: int) -> None:
        """Switch the tower type to build with the number keys."""
        tower_type = TOWER_KEYS.get(key)
        if tower_type is not None:
            log.debug("switching to %s tower", tower_type.value)
            self.ui.selected_tile_type = tower_type


def run(resource_dir: Union[str, Path]) -> None:
    """Open the window and play until it is closed."""
    pygame.init()
    try:
        window = pygame.display.set_mode(
            (int(DEFAULT_WIDTH), int(DEFAULT_HEIGHT)), pygame.RESIZABLE
        )
        pygame.display.set_caption(WINDOW_TITLE)
        game = Game(load_assets(resource_dir))
        canvas = pygame.Surface((int(DEFAULT_WIDTH), int(DEFAULT_HEIGHT)))
        clock = pygame.time.Clock()
        last = time.perf_counter()
        running = True
        while running:
            window = pygame.display.get_surface()
            game.screen_size = tuple(float(v) for v in window.get_size())
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEMOTION:
                    game.mouse_motion(*event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    game.mouse_button_down(*event.pos)
                elif event.type == pygame.KEYDOWN:
                    game.key_down(event.key)
            now = time.perf_counter()
            game.update(now - last)
            last = now
            game.draw(canvas)
            if window.get_size() == canvas.get_size():
                window.blit(canvas, (0, 0))
            else:
                window.blit(pygame.transform.smoothscale(canvas, window.get_size()), (0, 0))
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="derptower", description="A small tower defence game.")
    parser.add_argument(
        "--resources",
        type=Path,
        default=Path("resources"),
        help="directory holding the game's images and sounds (default: ./resources)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        run(args.resources)
    except FileNotFoundError as error:
        print(f"derptower: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())