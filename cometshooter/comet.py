"""Comets that rain down on the player during the comet event."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any

from cometshooter.core import SCREEN_WIDTH, Rect, check_collision

COMET_SIZE = 100
SPAWN_HEIGHT = 80
FLOOR_Y = 400


@dataclass
class Comet:
    """A falling comet that hurts the player on contact."""

    rect: Rect = field(default_factory=lambda: Rect(0, 0, COMET_SIZE, COMET_SIZE))
    damage: int = 20
    velocity: int = 2
    is_active: bool = True

    @classmethod
    def spawn(cls, rng: random.Random) -> Comet:
        """Create an active comet at a random spot near the top."""
        comet = cls()
        comet.rect.x = rng.randrange(SCREEN_WIDTH)
        comet.rect.y = rng.randrange(SPAWN_HEIGHT)
        return comet

    def fall(self, player: Any) -> None:
        """Drop one step; vanish on hitting the player or passing the floor."""
        self.rect.y += self.velocity
        if check_collision(self.rect, player.rect):
            self.is_active = False
            player.damage(self.damage)
        if self.rect.y > FLOOR_Y:
            self.is_active = False

    def reset(self, rng: random.Random) -> None:
        """Put the comet back near the top and reactivate it."""
        self.rect.x = rng.randrange(SCREEN_WIDTH)
        self.rect.y = rng.randrange(SPAWN_HEIGHT)
        self.is_active = True