import random

import pytest

from cometshooter.core import SCREEN_WIDTH, Rect
from cometshooter.monster import Monster, MonsterType
from cometshooter.player import Player


@pytest.mark.parametrize("seed", range(10))
def test_create_monster_ranges(seed):
    m = Monster.create(MonsterType.MONSTER, random.Random(seed))
    assert m.kind is MonsterType.MONSTER
    assert 1350 <= m.rect.x <= SCREEN_WIDTH
    assert (m.rect.y, m.rect.w, m.rect.h) == (325, 200, 200)
    assert 1 <= m.velocity <= 7
    assert 1 <= m.point_loot <= 5
    assert m.health == m.max_health == 100
    assert m.attack == pytest.approx(0.3)
    assert m.is_alive


@pytest.mark.parametrize("seed", range(10))
def test_create_alien_stats(seed):
    a = Monster.create(MonsterType.ALIEN, random.Random(seed))
    assert a.kind is MonsterType.ALIEN
    assert 1350 <= a.rect.x <= SCREEN_WIDTH
    assert (a.rect.y, a.rect.w, a.rect.h) == (150, 400, 400)
    assert a.velocity == 1
    assert 2 <= a.point_loot <= 10
    assert a.health == a.max_health == 250
    assert a.attack == pytest.approx(0.5)


def test_create_rejects_unknown_kind():
    with pytest.raises(ValueError):
        Monster.create("dragon", random.Random(0))


def test_create_is_deterministic_for_seed():
    a = Monster.create(MonsterType.MONSTER, random.Random(42))
    b = Monster.create(MonsterType.MONSTER, random.Random(42))
    assert (a.rect, a.velocity, a.point_loot) == (b.rect, b.velocity, b.point_loot)


def test_forward_moves_left_when_clear():
    m = Monster.create(MonsterType.MONSTER, random.Random(1))
    player = Player()
    start = m.rect.x
    m.forward(player)
    assert start - m.rect.x == int(m.velocity)
    assert player.health == player.max_health


def test_forward_hits_player_on_contact():
    m = Monster.create(MonsterType.MONSTER, random.Random(1))
    player = Player()
    m.rect.x = player.rect.x + 10
    m.rect.y = player.rect.y
    start = m.rect.x
    m.forward(player)
    assert m.rect.x == start
    assert player.health < player.max_health


def test_damage_reduces_health():
    m = Monster.create(MonsterType.MONSTER, random.Random(0))
    before = m.health
    m.damage(10)
    assert before - m.health == 10
    assert m.is_alive


def test_damage_kills_when_too_weak():
    m = Monster.create(MonsterType.MONSTER, random.Random(0))
    m.health = 30
    m.damage(20)
    assert m.health == 30
    assert not m.is_alive


def test_reset_monster_restores():
    m = Monster.create(MonsterType.MONSTER, random.Random(3))
    m.health = 5
    m.is_alive = False
    m.rect.x = 10
    m.reset()
    assert m.health == m.max_health
    assert m.is_alive
    assert 1350 <= m.rect.x <= SCREEN_WIDTH
    assert 1 <= m.velocity <= 5


def test_reset_alien_keeps_velocity():
    a = Monster.create(MonsterType.ALIEN, random.Random(3))
    a.health = 1
    a.is_alive = False
    a.reset()
    assert a.health == a.max_health
    assert a.is_alive
    assert a.velocity == 1


def test_health_bar_full():
    m = Monster(rect=Rect(1000, 325, 200, 200))
    border, fill = m.health_bar()
    assert border == Rect(1050, 305, 100, 5)
    assert fill == border


def test_health_bar_partial_is_proportional():
    m = Monster(rect=Rect(1000, 325, 200, 200), health=50, max_health=100)
    border, fill = m.health_bar()
    assert fill.w * 2 == border.w
    assert (fill.x, fill.y, fill.h) == (border.x, border.y, border.h)


def test_health_bar_zero_max_health():
    m = Monster(health=0, max_health=0)
    _, fill = m.health_bar()
    assert fill.w == 0