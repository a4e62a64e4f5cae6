"""Screen constants and rectangle geometry shared by every game entity."""

from __future__ import annotations

from dataclasses import dataclass

SCREEN_WIDTH = 1400
SCREEN_HEIGHT = 600
MAX_MONSTER = 4
MAX_PROJECTILE = 20
MAX_COMET = 20


@dataclass
class Rect:
    """An axis-aligned rectangle with integer position and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: Rect) -> bool:
        """Return True when both rectangles share at least one pixel."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


def check_collision(first: Rect, second: Rect) -> bool:
    """Return True when the two rectangles overlap."""
    return first.intersects(second)