from dataclasses import dataclass

from cometshooter.core import SCREEN_WIDTH, Rect
from cometshooter.player import Player
from cometshooter.projectile import Projectile


@dataclass
class FakeMonster:
    rect: Rect
    health: int = 100
    is_alive: bool = True


def far_monster():
    return FakeMonster(Rect(SCREEN_WIDTH + 500, 0, 10, 10))


def test_launch_from_places_projectile_right_of_player_centered():
    player = Player()
    p = Projectile()
    p.angle = 77.0
    p.launch_from(player)
    assert p.rect.x == player.rect.x + player.rect.w
    assert p.rect.y + p.rect.h // 2 == player.rect.y + player.rect.h // 2
    assert p.angle == 0.0


def test_move_advances_and_spins():
    player = Player()
    p = Projectile()
    p.launch_from(player)
    p.active = True
    x0, a0 = p.rect.x, p.angle
    p.move([far_monster()], player)
    assert p.rect.x == x0 + p.velocity
    assert p.angle > a0
    assert p.active is True


def test_move_off_screen_deactivates():
    player = Player()
    p = Projectile()
    p.active = True
    p.rect.x = SCREEN_WIDTH
    p.move([far_monster()], player)
    assert p.active is False


def test_move_hits_first_living_monster_only():
    player = Player()
    p = Projectile()
    p.launch_from(player)
    p.active = True
    target = Rect(p.rect.x, p.rect.y, 100, 100)
    first = FakeMonster(Rect(target.x, target.y, target.w, target.h))
    second = FakeMonster(Rect(target.x, target.y, target.w, target.h))
    p.move([first, second], player)
    assert first.health == 100 - player.attack
    assert second.health == 100
    assert p.active is False


def test_move_ignores_dead_monster():
    player = Player()
    p = Projectile()
    p.launch_from(player)
    p.active = True
    dead = FakeMonster(Rect(p.rect.x, p.rect.y, 100, 100), is_alive=False)
    p.move([dead], player)
    assert dead.health == 100
    assert p.active is True


def test_reset_returns_beside_player_inactive():
    player = Player()
    p = Projectile()
    p.rect.x = 900
    p.active = True
    p.has_hit = True
    p.is_out_of_screen = True
    p.reset(player)
    assert p.rect.x == player.rect.x + player.rect.w
    assert (p.active, p.has_hit, p.is_out_of_screen) == (False, False, False)