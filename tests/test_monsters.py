import math
import random

import pytest

from derptower.components import BLOCK_SIZE, Block, Player
from derptower.monsters import (
    GOLD_DROP_OFFSET,
    GOLD_DROP_VALUE,
    Chicken,
    CoolChicken,
    MonsterState,
    MonsterType,
)
from derptower.utils import Direction


@pytest.fixture(params=[Chicken, CoolChicken])
def monster_cls(request):
    return request.param


def _goal(block, cls):
    half = BLOCK_SIZE / 2 - cls.SIZE / 2
    return (block[0] * BLOCK_SIZE + half, block[1] * BLOCK_SIZE + half)


def test_new_monster_defaults():
    for m in (Chicken(), CoolChicken()):
        assert m.state is MonsterState.WALKING
        assert m.direction is Direction.RIGHT
        assert m.health == 100.0
        assert m.speed == 100.0
        assert m.move_goal == 0


def test_types():
    assert Chicken().TYPE is MonsterType.CHICKEN
    assert CoolChicken().TYPE is MonsterType.COOL_CHICKEN


def test_center():
    assert Chicken(position=(4.0, 6.0)).center() == (
        4.0 + Chicken.SIZE / 2,
        6.0 + Chicken.SIZE / 2,
    )
    assert CoolChicken(position=(4.0, 6.0)).center() == (
        4.0 + CoolChicken.SIZE / 2,
        6.0 + CoolChicken.SIZE / 2,
    )


def test_reaches_goal_without_overshoot(monster_cls):
    m = monster_cls()
    path = [Block((0.0, 0.0))]
    m.update(1.0, path, Player())
    assert m.move_goal == 1
    assert m.position == pytest.approx(_goal((0.0, 0.0), monster_cls))


def test_partial_step_moves_speed_times_elapsed(monster_cls):
    m = monster_cls()
    path = [Block((5.0, 5.0))]
    m.update(0.01, path, Player())
    assert m.move_goal == 0
    assert math.hypot(*m.position) == pytest.approx(m.speed * 0.01)


def test_faces_left_when_goal_is_left(monster_cls):
    m = monster_cls(position=(200.0, 0.0))
    m.update(0.01, [Block((0.0, 0.0))], Player())
    assert m.direction is Direction.LEFT
    assert m.position[0] < 200.0


def test_exact_position_advances_goal(monster_cls):
    m = monster_cls(position=_goal((1.0, 1.0), monster_cls))
    m.update(0.5, [Block((1.0, 1.0)), Block((2.0, 1.0))], Player())
    assert m.move_goal == 1
    assert m.position == _goal((1.0, 1.0), monster_cls)


def test_end_of_path_attacks_then_dies(monster_cls):
    player = Player()
    m = monster_cls(position=_goal((0.0, 0.0), monster_cls), move_goal=1)
    m.update(0.1, [Block((0.0, 0.0))], player)
    assert m.state is MonsterState.ATTACKING
    assert player.health == Player().health
    m.update(0.1, [Block((0.0, 0.0))], player)
    assert m.state is MonsterState.DEAD
    assert player.health == Player().health - monster_cls.DAMAGE
    m.update(0.1, [Block((0.0, 0.0))], player)
    assert player.health == Player().health - monster_cls.DAMAGE


def test_damage_without_death():
    for m in (Chicken(), CoolChicken()):
        piles = []
        m.receive_damage(10.0, piles, None, random.Random(1))
        assert m.health == 90.0
        assert m.state is MonsterState.WALKING
        assert piles == []


def test_death_drops_gold():
    for m in (Chicken(position=(100.0, 50.0)), CoolChicken(position=(100.0, 50.0))):
        piles = []
        m.receive_damage(100.0, piles, None, random.Random(3))
        assert m.state is MonsterState.DEAD
        assert len(piles) == 1
        pile = piles[0]
        assert pile.value == GOLD_DROP_VALUE
        for coord, origin in zip(pile.position, m.position):
            assert origin - 2 * GOLD_DROP_OFFSET <= coord <= origin - GOLD_DROP_OFFSET


def test_dead_monster_ignores_damage():
    for m in (Chicken(), CoolChicken()):
        piles = []
        m.receive_damage(1000.0, piles, None, random.Random(0))
        health = m.health
        m.receive_damage(1000.0, piles, None, random.Random(0))
        assert len(piles) == 1
        assert m.health == health


def test_states_are_ordered():
    assert MonsterState.WALKING < MonsterState.ATTACKING < MonsterState.DEAD
    player = Player()
    m = Chicken(position=_goal((0.0, 0.0), Chicken), move_goal=1)
    seen = [m.state]
    for _ in range(2):
        m.update(0.1, [Block((0.0, 0.0))], player)
        seen.append(m.state)
    assert seen == [MonsterState.WALKING, MonsterState.ATTACKING, MonsterState.DEAD]
    assert seen == sorted(seen)