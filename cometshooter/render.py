"""Drawing the home screen and the running game onto a pygame surface."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from cometshooter.core import SCREEN_HEIGHT, SCREEN_WIDTH, Rect
from cometshooter.monster import MonsterType
from cometshooter.projectile import Projectile
from cometshooter.world import World

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
EVENT_BAR_COLOR = (187, 11, 11)

SCORE_POSITION = (50, 50)
EVENT_BAR_X = 20
EVENT_BAR_HEIGHT = 10
BANNER_RECT = Rect(SCREEN_WIDTH // 3, 10, 500, 450)
BUTTON_RECT = Rect(SCREEN_WIDTH // 3 + 60, SCREEN_HEIGHT // 2 + 50, 400, 150)

BACKGROUND_FILE = "bg.jpg"
_OPTIONAL_FILES = {
    "button": "button.png",
    "banner": "banner.png",
    "player": "player.png",
    "mummy": "mummy.png",
    "alien": "alien.png",
    "projectile": "projectile.png",
    "comet": "comet.png",
}


def _load_optional(path: Path) -> pygame.Surface | None:
    if not path.is_file():
        return None
    try:
        return pygame.image.load(str(path))
    except pygame.error:
        return None


@dataclass
class Assets:
    """The images the game draws; only the background is mandatory."""

    background: pygame.Surface
    button: pygame.Surface | None = None
    banner: pygame.Surface | None = None
    player: pygame.Surface | None = None
    mummy: pygame.Surface | None = None
    alien: pygame.Surface | None = None
    projectile: pygame.Surface | None = None
    comet: pygame.Surface | None = None

    @classmethod
    def load(cls, directory: str | Path) -> Assets:
        """Load every image from a directory; raise if the background is missing."""
        root = Path(directory)
        background_path = root / BACKGROUND_FILE
        if not background_path.is_file():
            raise FileNotFoundError(f"background image not found: {background_path}")
        background = pygame.image.load(str(background_path))
        images = {name: _load_optional(root / filename) for name, filename in _OPTIONAL_FILES.items()}
        return cls(background=background, **images)

    def monster_image(self, kind: MonsterType) -> pygame.Surface | None:
        return self.alien if kind is MonsterType.ALIEN else self.mummy


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(rect.x, rect.y, rect.w, rect.h)


def _blit_image(surface: pygame.Surface, image: pygame.Surface | None, rect: Rect) -> None:
    if image is None or rect.is_empty:
        return
    surface.blit(pygame.transform.scale(image, (rect.w, rect.h)), (rect.x, rect.y))


def _blit_full(surface: pygame.Surface, image: pygame.Surface | None) -> None:
    if image is None:
        return
    surface.blit(pygame.transform.scale(image, surface.get_size()), (0, 0))


def _draw_bar(
    surface: pygame.Surface,
    border: Rect,
    fill: Rect,
    border_color: tuple[int, int, int],
    fill_color: tuple[int, int, int],
) -> None:
    if not border.is_empty:
        pygame.draw.rect(surface, border_color, _to_pygame(border), width=1)
    if not fill.is_empty:
        pygame.draw.rect(surface, fill_color, _to_pygame(fill))


def _draw_projectile(surface: pygame.Surface, image: pygame.Surface | None, projectile: Projectile) -> None:
    rect = projectile.rect
    if image is None or rect.is_empty:
        return
    scaled = pygame.transform.scale(image, (rect.w, rect.h))
    # The stored angle turns clockwise; pygame rotates counter-clockwise.
    rotated = pygame.transform.rotate(scaled, -projectile.angle)
    target = rotated.get_rect(center=_to_pygame(rect).center)
    surface.blit(rotated, target)


def event_bar_rect(world: World) -> Rect:
    """Return the rectangle of the comet event progress bar."""
    width = int((SCREEN_WIDTH // 100) * world.event_percent)
    return Rect(EVENT_BAR_X, SCREEN_HEIGHT - 20, width, EVENT_BAR_HEIGHT)


def draw_home(surface: pygame.Surface, assets: Assets) -> None:
    """Draw the home (and pause) screen: background, start button and banner."""
    _blit_full(surface, assets.background)
    _blit_image(surface, assets.button, BUTTON_RECT)
    _blit_image(surface, assets.banner, BANNER_RECT)


def draw_world(
    surface: pygame.Surface,
    world: World,
    assets: Assets,
    font: pygame.font.Font | None,
) -> None:
    """Draw one frame of the running game."""
    surface.fill(BLACK)
    _blit_full(surface, assets.background)

    player = world.player
    _blit_image(surface, assets.player, player.rect)
    _draw_bar(surface, *player.health_bar(), RED, GREEN)

    for monster in world.monsters:
        if monster.is_alive:
            _blit_image(surface, assets.monster_image(monster.kind), monster.rect)
            _draw_bar(surface, *monster.health_bar(), RED, GREEN)

    bar = event_bar_rect(world)
    _draw_bar(surface, bar, bar, BLACK, EVENT_BAR_COLOR)

    if world.event_start:
        for comet in world.comets:
            if comet.is_active:
                _blit_image(surface, assets.comet, comet.rect)

    for projectile in world.projectiles:
        if projectile.active:
            _draw_projectile(surface, assets.projectile, projectile)

    if font is not None:
        text = font.render(f"score : {player.score}", True, WHITE)
        surface.blit(text, SCORE_POSITION)