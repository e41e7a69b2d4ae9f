import pygame
import pytest

from derptower.animation import Animation
from derptower.utils import Direction

RED = pygame.Color(255, 0, 0, 255)
BLUE = pygame.Color(0, 0, 255, 255)
BLACK = pygame.Color(0, 0, 0, 255)


def _sprite(color, size=(4, 4)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def _animation():
    return Animation(sprites=[_sprite(RED), _sprite(BLUE)])


def test_does_not_advance_before_next_time():
    anim = _animation()
    assert anim.advance(0) is anim.sprites[0]
    assert anim.current_sprite == 0


def test_advances_and_schedules_next_frame():
    anim = _animation()
    assert anim.advance(1) is anim.sprites[1]
    assert anim.next_sprite_time == 1 + anim.next_sprite_interval
    assert anim.advance(anim.next_sprite_interval) is anim.sprites[1]


def test_wraps_around():
    anim = _animation()
    anim.advance(1)
    frame = anim.advance(2 + anim.next_sprite_interval)
    assert frame is anim.sprites[0]
    assert anim.current_sprite == 0


def test_empty_animation_rejected():
    with pytest.raises(ValueError):
        Animation(sprites=[])


def test_draw_right_places_sprite_at_position():
    anim = _animation()
    target = pygame.Surface((20, 20))
    target.fill(BLACK)
    anim.draw(target, Direction.RIGHT, (5, 5), 0)
    assert target.get_at((5, 5)) == RED
    assert target.get_at((4, 5)) == BLACK


def test_draw_left_mirrors_to_the_left_of_position():
    anim = Animation(sprites=[_sprite(RED)])
    target = pygame.Surface((20, 20))
    target.fill(BLACK)
    anim.draw(target, Direction.LEFT, (10, 5), 0)
    assert target.get_at((9, 5)) == RED
    assert target.get_at((10, 5)) == BLACK


def test_draw_left_flips_the_image():
    sprite = pygame.Surface((4, 1))
    sprite.fill(BLACK)
    sprite.set_at((0, 0), RED)
    anim = Animation(sprites=[sprite])
    target = pygame.Surface((20, 20))
    target.fill(BLACK)
    anim.draw(target, Direction.LEFT, (10, 0), 0)
    assert target.get_at((9, 0)) == RED
    assert target.get_at((6, 0)) == BLACK