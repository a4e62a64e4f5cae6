"""Command-line entry point opening the game window and running the main loop."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pygame

from cometshooter.core import SCREEN_HEIGHT, SCREEN_WIDTH
from cometshooter.render import Assets, draw_home, draw_world
from cometshooter.world import Controls, StepResult, World

FPS = 60
FONT_FILE = "font.otf"
FONT_SIZE = 24
TITLE = "Comet Shooter"


def read_controls(pressed: Any) -> Controls:
    """Turn a pygame key-state lookup into the frame's controls."""
    return Controls(
        space=bool(pressed[pygame.K_SPACE]),
        escape=bool(pressed[pygame.K_ESCAPE]),
        right=bool(pressed[pygame.K_RIGHT]),
        left=bool(pressed[pygame.K_LEFT]),
    )


def _run(directory: Path, rng: random.Random) -> int:
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption(TITLE)

    assets = Assets.load(directory)
    font_path = directory / FONT_FILE
    if not font_path.is_file():
        raise FileNotFoundError(f"font not found: {font_path}")
    font = pygame.font.Font(str(font_path), FONT_SIZE)

    world = World.create(rng)
    clock = pygame.time.Clock()

    draw_home(screen, assets)
    pygame.display.flip()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        result = world.step(read_controls(pygame.key.get_pressed()))
        if result is StepResult.PLAYING:
            draw_world(screen, world, assets, font)
            pygame.display.flip()
        elif result is StepResult.GAME_OVER:
            draw_world(screen, world, assets, font)
            draw_home(screen, assets)
            pygame.display.flip()
        elif result is StepResult.PAUSED:
            draw_home(screen, assets)
            pygame.display.flip()

        clock.tick(FPS)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and play until it is closed; return the exit status."""
    parser = argparse.ArgumentParser(prog="cometshooter", description="Side-scrolling comet shooter.")
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="directory holding images and font")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)

    try:
        pygame.display.init()
        pygame.font.init()
        return _run(args.assets, random.Random(args.seed))
    except (OSError, pygame.error) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())