from pathlib import Path
from types import SimpleNamespace

import pygame
import pytest

from derptower.assets import BaseAssets, ItemAssets, SoundEffect
from derptower.components import (
    BASE_PADDING,
    BASE_SIZE,
    BLOCK_COLOR,
    BLOCK_SIZE,
    Base,
    Block,
    GoldPile,
    Player,
)

RED = pygame.Color(255, 0, 0, 255)
BLACK = pygame.Color(0, 0, 0, 255)


def _sprite():
    surface = pygame.Surface((4, 4))
    surface.fill(RED)
    return surface


def _canvas():
    surface = pygame.Surface((400, 400))
    surface.fill(BLACK)
    return surface


def test_block_draw_fills_its_tile():
    canvas = _canvas()
    Block((1.0, 2.0)).draw(canvas)
    left, top = int(BLOCK_SIZE), int(2 * BLOCK_SIZE)
    assert canvas.get_at((left, top)) == BLOCK_COLOR
    assert canvas.get_at((left + int(BLOCK_SIZE) - 1, top + int(BLOCK_SIZE) - 1)) == BLOCK_COLOR
    assert canvas.get_at((left - 1, top)) == BLACK


def test_base_draw_uses_padding():
    canvas = _canvas()
    assets = SimpleNamespace(base_assets=BaseAssets(base_sprite=_sprite()))
    Base((1.0, 1.0)).draw(canvas, assets)
    corner = int(BLOCK_SIZE + BASE_PADDING)
    assert canvas.get_at((corner, corner)) == RED
    assert canvas.get_at((corner - 1, corner)) == BLACK


@pytest.mark.parametrize(
    "point, inside",
    [
        ((0.0, 8 * BLOCK_SIZE), True),
        ((-BASE_PADDING, 8 * BLOCK_SIZE), True),
        ((-BASE_PADDING - 0.1, 8 * BLOCK_SIZE), False),
        ((0.0, 8 * BLOCK_SIZE - 0.1), False),
        ((BASE_SIZE + 2 * BASE_PADDING, 8 * BLOCK_SIZE), True),
        ((BASE_SIZE + 2 * BASE_PADDING + 0.1, 8 * BLOCK_SIZE), False),
        ((0.0, 8 * BLOCK_SIZE + BASE_SIZE + 2 * BASE_PADDING), True),
        ((0.0, 8 * BLOCK_SIZE + BASE_SIZE + 2 * BASE_PADDING + 0.1), False),
    ],
)
def test_is_position_in_base(point, inside):
    assert Base((0.0, 8.0)).is_position_in_base(point) is inside


def test_gold_pile_draws_above_its_position():
    canvas = _canvas()
    assets = SimpleNamespace(
        item_assets=ItemAssets(gold_sprite=_sprite(), gold_sound=SoundEffect(Path("gold.ogg")))
    )
    GoldPile((10.0, 30.0), 10).draw(canvas, assets)
    assert canvas.get_at((10, 20)) == RED
    assert canvas.get_at((10, 19)) == BLACK
    assert canvas.get_at((10, 24)) == BLACK


def test_player_defaults_and_mutation():
    player = Player()
    assert player.health == 100.0
    assert player.gold == 300
    player.gold -= 10
    assert player == Player(health=100.0, gold=290)