"""The status and build bar along the bottom of the window."""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import pygame

from derptower.components import BLOCK_SIZE, GoldPile, Player
from derptower.towers import TowerType
from derptower.utils import Point, Scale

if TYPE_CHECKING:
    from derptower.assets import AssetManager

log = logging.getLogger(__name__)

DEFAULT_WIDTH = 800.0
DEFAULT_HEIGHT = 600.0

UI_HEIGHT = 180.0
TOWER_ICON_SIZE = 50.0
BUILD_BAR_POSITION = (180.0, 10.0)
GOLD_POSITION = (30.0, 30.0)
HP_POSITION = (30.0, 50.0)
GOLD_PICKUP_RADIUS = 20.0

BACKGROUND_COLOR = pygame.Color(51, 77, 102, 255)
SELECTED_TILE_COLOR = pygame.Color(128, 0, 0, 255)
SELECTED_TILE_WIDTH = 3
TEXT_COLOR = pygame.Color(255, 255, 255, 255)
FONT_SIZE = 24


@functools.lru_cache(maxsize=None)
def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, FONT_SIZE)


def _format_number(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _scale_for(screen_size: tuple[float, float]) -> Scale:
    return Scale(x=screen_size[0] / DEFAULT_WIDTH, y=screen_size[1] / DEFAULT_HEIGHT)


@dataclass
class TowerIcon:
    """A build bar button for one kind of tower."""

    tower_type: TowerType

    def draw(
        self,
        surface: pygame.Surface,
        assets: AssetManager,
        location: Point,
        selected: bool,
    ) -> None:
        ui_assets = assets.builder_ui_assets
        if self.tower_type is TowerType.BASIC:
            sprite = ui_assets.tower_selected_sprite if selected else ui_assets.tower_sprite
        else:
            sprite = (
                ui_assets.ninja_tower_selected_sprite
                if selected
                else ui_assets.ninja_tower_sprite
            )
        surface.blit(sprite, location)


def _default_build_bar() -> list[TowerIcon]:
    return [TowerIcon(TowerType.BASIC), TowerIcon(TowerType.NINJA)]


@dataclass
class UI:
    """Status bar and build bar, laid out in game coordinates.

    The layout follows `screen_size`, the size of the window in pixels, and
    is refreshed on every draw.
    """

    screen_size: tuple[float, float] = (DEFAULT_WIDTH, DEFAULT_HEIGHT)
    position: Point = (0.0, 0.0)
    rect: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    build_bar: list[TowerIcon] = field(default_factory=_default_build_bar)
    hovering_on: Optional[TowerType] = None
    selected_tile_rect: Optional[Point] = None
    selected_tile_type: TowerType = TowerType.BASIC

    def _update_layout(self) -> None:
        width, height = self.screen_size
        scale = _scale_for(self.screen_size)
        self.rect = (0.0, 0.0, width / scale.x, UI_HEIGHT / scale.y)
        self.position = (0.0, (height - UI_HEIGHT) / scale.y)

    def draw(self, surface: pygame.Surface, player: Player, assets: AssetManager) -> None:
        self._update_layout()
        self._draw_background(surface)
        self._draw_text(surface, f"GOLD: {player.gold}", GOLD_POSITION)
        self._draw_text(surface, f"HP: {_format_number(player.health)}", HP_POSITION)
        self._draw_build_bar(surface, assets)
        self._draw_selected_tile(surface)

    def _draw_background(self, surface: pygame.Surface) -> None:
        x, y, w, h = self.rect
        rect = pygame.Rect(
            round(self.position[0] + x), round(self.position[1] + y), round(w), round(h)
        )
        pygame.draw.rect(surface, BACKGROUND_COLOR, rect)

    def _draw_text(self, surface: pygame.Surface, text: str, offset: Point) -> None:
        rendered = _font().render(text, True, TEXT_COLOR)
        surface.blit(rendered, (offset[0], self.position[1] + offset[1]))

    def _draw_build_bar(self, surface: pygame.Surface, assets: AssetManager) -> None:
        x = BUILD_BAR_POSITION[0]
        y = self.position[1] + BUILD_BAR_POSITION[1]
        for icon in self.build_bar:
            icon.draw(surface, assets, (x, y), self.hovering_on is icon.tower_type)
            x += TOWER_ICON_SIZE

    def _draw_selected_tile(self, surface: pygame.Surface) -> None:
        if self.selected_tile_rect is None:
            return
        x, y = self.selected_tile_rect
        rect = pygame.Rect(round(x), round(y), round(BLOCK_SIZE), round(BLOCK_SIZE))
        pygame.draw.rect(surface, SELECTED_TILE_COLOR, rect, SELECTED_TILE_WIDTH)

    def mouse_motion(
        self,
        screen_size: tuple[float, float],
        x: float,
        y: float,
        gold_piles: list[GoldPile],
        player: Player,
        assets: Optional[AssetManager] = None,
    ) -> None:
        """React to the mouse moving to window pixel (x, y)."""
        self.screen_size = screen_size
        width, height = screen_size
        scale = _scale_for(screen_size)
        log.debug("mouse motion: %s %s %s %d", scale, x, y, len(gold_piles))
        if 0.0 < x < width and 0.0 < y < height - UI_HEIGHT:
            self.handle_in_game_hover(scale, x, y, gold_piles, player, assets)
        else:
            self.handle_ui_bar_hover(scale, x, y)

    def handle_in_game_hover(
        self,
        scale: Scale,
        x: float,
        y: float,
        gold_piles: list[GoldPile],
        player: Player,
        assets: Optional[AssetManager] = None,
    ) -> None:
        """Highlight the hovered tile and pick up any gold under the mouse."""
        self.selected_tile_rect = (
            math.floor(x / (BLOCK_SIZE * scale.x)) * BLOCK_SIZE,
            math.floor(y / (BLOCK_SIZE * scale.y)) * BLOCK_SIZE,
        )
        gx, gy = scale.to_game_point(x, y)
        kept = []
        for pile in gold_piles:
            dx = gx - (pile.position[0] + BLOCK_SIZE / 2.0)
            dy = gy - (pile.position[1] + BLOCK_SIZE / 2.0)
            if dx * dx + dy * dy < GOLD_PICKUP_RADIUS * GOLD_PICKUP_RADIUS:
                player.gold += pile.value
                if assets is not None:
                    assets.item_assets.gold_sound.play()
            else:
                kept.append(pile)
        gold_piles[:] = kept

    def handle_ui_bar_hover(self, scale: Scale, x: float, y: float) -> None:
        """Track which build bar icon, if any, the mouse is over."""
        self.selected_tile_rect = None
        bar_x, bar_y = scale.to_viewport_point(
            BUILD_BAR_POSITION[0], self.position[1] + BUILD_BAR_POSITION[1]
        )
        if x > bar_x and y > bar_y:
            left = bar_x
            icon_width = TOWER_ICON_SIZE * scale.x
            for icon in self.build_bar:
                if (
                    left < x < left + icon_width
                    and y > bar_y * scale.y
                    and y < bar_y + TOWER_ICON_SIZE * scale.y
                ):
                    self.hovering_on = icon.tower_type
                    return
                left += icon_width
        self.hovering_on = None