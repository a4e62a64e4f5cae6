"""Projectiles fired by the player towards the monsters."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from cometshooter.core import SCREEN_WIDTH, Rect, check_collision

PROJECTILE_SIZE = 50
PROJECTILE_VELOCITY = 5
SPIN_PER_STEP = 12


@dataclass
class Projectile:
    """A spinning projectile travelling to the right."""

    rect: Rect = field(default_factory=lambda: Rect(0, 0, PROJECTILE_SIZE, PROJECTILE_SIZE))
    velocity: int = PROJECTILE_VELOCITY
    angle: float = 0.0
    is_out_of_screen: bool = False
    has_hit: bool = False
    active: bool = False

    def _place_beside(self, player: Any) -> None:
        self.rect.x = player.rect.x + player.rect.w
        self.rect.y = player.rect.y + player.rect.h // 2 - self.rect.h // 2

    def launch_from(self, player: Any) -> None:
        """Size the projectile and put it just right of the player, centred."""
        self.rect.w = PROJECTILE_SIZE
        self.rect.h = PROJECTILE_SIZE
        self._place_beside(player)
        self.velocity = PROJECTILE_VELOCITY
        self.angle = 0.0

    def move(self, monsters: Iterable[Any], player: Any) -> None:
        """Advance one step, spin, and damage the first living monster hit."""
        if monsters is None or player is None:
            return
        self.rect.x += self.velocity
        self.angle += SPIN_PER_STEP
        if self.rect.x > SCREEN_WIDTH:
            self.active = False
        for monster in monsters:
            if monster.is_alive and check_collision(self.rect, monster.rect):
                monster.health -= player.attack
                self.active = False
                break

    def reset(self, player: Any) -> None:
        """Return the projectile beside the player and mark it unused."""
        self._place_beside(player)
        self.has_hit = False
        self.is_out_of_screen = False
        self.active = False