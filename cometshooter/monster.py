"""Monsters walking in from the right towards the player."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import Any

from cometshooter.core import SCREEN_WIDTH, Rect, check_collision

SPAWN_MIN_X = 1350
HEALTH_BAR_OFFSET_X = 50
HEALTH_BAR_OFFSET_Y = 20
HEALTH_BAR_HEIGHT = 5


class MonsterType(enum.Enum):
    """The kinds of monster the game knows."""

    MONSTER = "monster"
    ALIEN = "alien"


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _spawn_x(rng: random.Random) -> int:
    return rng.randint(SPAWN_MIN_X, SCREEN_WIDTH)


@dataclass
class Monster:
    """An enemy that advances left and hurts the player on contact."""

    kind: MonsterType = MonsterType.MONSTER
    rect: Rect = field(default_factory=lambda: Rect(SPAWN_MIN_X, 325, 200, 200))
    health: int = 100
    max_health: int = 100
    point_loot: int = 1
    attack: float = 0.3
    velocity: float = 1.0
    is_alive: bool = True
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @classmethod
    def create(cls, kind: MonsterType, rng: random.Random) -> Monster:
        """Build a monster of the given kind with randomised position and stats."""
        if kind is MonsterType.MONSTER:
            x = _spawn_x(rng)
            velocity = float(rng.randint(1, 7))
            loot = rng.randint(1, 5)
            return cls(
                kind=kind,
                rect=Rect(x, 325, 200, 200),
                health=100,
                max_health=100,
                point_loot=loot,
                attack=0.3,
                velocity=velocity,
                is_alive=True,
                rng=rng,
            )
        if kind is MonsterType.ALIEN:
            x = _spawn_x(rng)
            loot = rng.randint(2, 10)
            return cls(
                kind=kind,
                rect=Rect(x, 150, 400, 400),
                health=250,
                max_health=250,
                point_loot=loot,
                attack=0.5,
                velocity=1.0,
                is_alive=True,
                rng=rng,
            )
        raise ValueError(f"unknown monster kind: {kind!r}")

    def forward(self, player: Any) -> None:
        """Walk left, or hit the player when touching them."""
        if not check_collision(self.rect, player.rect):
            self.rect.x = int(self.rect.x - self.velocity)
        else:
            player.damage(self.attack)

    def damage(self, amount: float) -> None:
        """Lose health, or die if the blow would leave too little."""
        if (self.health - amount) > amount:
            self.health = int(self.health - amount)
        else:
            self.is_alive = False

    def reset(self) -> None:
        """Respawn at the right edge with full health."""
        if self.kind is MonsterType.MONSTER:
            self.rect.x = _spawn_x(self.rng)
            self.velocity = float(self.rng.randint(1, 5))
            self.health = self.max_health
            self.is_alive = True
        elif self.kind is MonsterType.ALIEN:
            self.rect.x = _spawn_x(self.rng)
            self.health = self.max_health
            self.is_alive = True

    def health_bar(self) -> tuple[Rect, Rect]:
        """Return the bar's border and its filled part."""
        border = Rect(
            self.rect.x + HEALTH_BAR_OFFSET_X,
            self.rect.y - HEALTH_BAR_OFFSET_Y,
            self.max_health,
            HEALTH_BAR_HEIGHT,
        )
        width = _trunc_div(self.health * border.w, self.max_health) if self.max_health > 0 else 0
        fill = Rect(border.x, border.y, width, border.h)
        return border, fill