# cometshooter

A small side-scrolling arcade shooter built on pygame.

You stand on the left of the screen. Three mummies and a large alien walk in
from the right and hurt you when they reach you. Shoot them with spinning
projectiles to earn points; a slain monster respawns at the right edge. Meanwhile
an event bar at the bottom of the screen fills up. When it is full, the monsters
are sent back to the right edge and a shower of comets falls from the sky. Once
every comet has landed, the bar empties and the cycle starts again. When your
health runs out the game returns to the home screen and your score is reset.

## Installing

```
pip install .
```

## Playing

```
cometshooter
```

Options:

- `--assets DIR`: directory holding the images and the font (default: `assets`)
- `--seed N`: seed for the random generator, for a repeatable game

The assets directory must contain `bg.jpg` (the background) and `font.otf`
(the score font); without either, the command prints an error and exits with
status 1. The other images are optional and are simply not drawn when missing:
`player.png`, `mummy.png`, `alien.png`, `projectile.png`, `comet.png`,
`button.png` and `banner.png`.

Controls:

- **Space**: start the game from the home screen, then fire a projectile
- **Right / Left arrows**: move the player
- **Escape**: pause and go back to the home screen
- Close the window to quit

## Using the game logic

The simulation has no dependency on a display, so it can be driven directly:

```python
import random

from cometshooter.world import Controls, StepResult, World

world = World.create(random.Random(1))
world.step(Controls(space=True))               # leaves the home screen
result = world.step(Controls(right=True, space=True))
assert result is StepResult.PLAYING
print(world.player.score, world.event_percent)
```

`World.step` returns a `StepResult` (`WAITING`, `STARTED`, `PAUSED`,
`PLAYING` or `GAME_OVER`) telling the caller what to draw.

`cometshooter.core` provides the screen constants, `Rect` and
`check_collision`. The entity classes live in `cometshooter.player`
(`Player`), `cometshooter.monster` (`Monster`, `MonsterType`),
`cometshooter.projectile` (`Projectile`) and `cometshooter.comet` (`Comet`).
Drawing is done by `cometshooter.render` (`Assets`, `draw_home`,
`draw_world`, `event_bar_rect`), and `cometshooter.app` holds the command
(`main`) and `read_controls`, which turns pygame's key state into `Controls`.

## What it does not do

There is no high-score table: scores are not kept between rounds or saved,
and there is no sound.

## Running the tests

```
pip install .[test]
pytest
```