"""The player character: movement, damage and shooting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from cometshooter.core import SCREEN_WIDTH, Rect, check_collision
from cometshooter.projectile import Projectile

HEALTH_BAR_WIDTH = 150
HEALTH_BAR_HEIGHT = 10


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass
class Player:
    """The hero standing on the left of the screen."""

    rect: Rect = field(default_factory=lambda: Rect(0, 350, 200, 200))
    health: int = 100
    max_health: int = 100
    velocity: int = 10
    attack: int = 10
    score: int = 0
    high_score: int = 0
    is_alive: bool = True

    def move_left(self) -> None:
        """Step left unless already at the left edge."""
        if self.rect.x > 0:
            self.rect.x -= self.velocity

    def move_right(self, monster: Any) -> None:
        """Step right unless at the right edge or touching the monster."""
        if self.rect.right < SCREEN_WIDTH and not check_collision(self.rect, monster.rect):
            self.rect.x += self.velocity

    def damage(self, amount: float) -> None:
        """Lose health, or die if the blow would leave too little."""
        if (self.health - amount) > amount:
            self.health = int(self.health - amount)
        else:
            self.is_alive = False

    def launch_projectile(self, projectiles: Iterable[Projectile | None]) -> Projectile | None:
        """Fire the first idle projectile and return it, or None if all are busy."""
        for projectile in projectiles:
            if projectile is not None and not projectile.active:
                projectile.launch_from(self)
                projectile.active = True
                return projectile
        return None

    def health_bar(self) -> tuple[Rect, Rect]:
        """Return the bar's border and its filled part."""
        border = Rect(self.rect.x + 15, self.rect.y + 5, HEALTH_BAR_WIDTH, HEALTH_BAR_HEIGHT)
        fill = Rect(
            border.x,
            border.y,
            _trunc_div(self.health * border.w, self.max_health),
            border.h,
        )
        return border, fill