"""Game state and per-frame logic: monsters, projectiles and the comet event."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field

from cometshooter.comet import Comet
from cometshooter.core import MAX_COMET, MAX_MONSTER, MAX_PROJECTILE, SCREEN_WIDTH
from cometshooter.monster import Monster, MonsterType
from cometshooter.player import Player
from cometshooter.projectile import Projectile

EVENT_PERCENT_SPEED = 5.0
PLAYER_START_X = 0
PLAYER_START_Y = 350


@dataclass(frozen=True)
class Controls:
    """Keys held during one frame."""

    space: bool = False
    escape: bool = False
    right: bool = False
    left: bool = False


class StepResult(enum.Enum):
    """What a frame did, telling the caller what to draw."""

    WAITING = "waiting"
    STARTED = "started"
    PAUSED = "paused"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class World:
    """Everything alive in the game and the comet event's progress."""

    player: Player
    monsters: list[Monster]
    projectiles: list[Projectile]
    comets: list[Comet]
    rng: random.Random = field(default_factory=random.Random, repr=False)
    event_start: bool = False
    just_started: bool = True
    is_playing: bool = False
    event_percent: float = 0.0
    event_percent_speed: float = EVENT_PERCENT_SPEED

    @classmethod
    def create(cls, rng: random.Random) -> World:
        """Build a fresh world waiting on the home screen."""
        player = Player()
        monsters = [Monster.create(MonsterType.MONSTER, rng) for _ in range(MAX_MONSTER - 1)]
        monsters.append(Monster.create(MonsterType.ALIEN, rng))
        projectiles = []
        for _ in range(MAX_PROJECTILE):
            projectile = Projectile()
            projectile.launch_from(player)
            projectile.active = False
            projectiles.append(projectile)
        comets = [Comet.spawn(rng) for _ in range(MAX_COMET)]
        return cls(player=player, monsters=monsters, projectiles=projectiles, comets=comets, rng=rng)

    def raise_percent(self) -> None:
        """Fill the event bar a little, capped at 100."""
        self.event_percent = min(self.event_percent + self.event_percent_speed / 100, 100.0)

    def update_event(self) -> None:
        """Start the comet event when the bar is full and end it once all comets fell."""
        if self.event_percent >= 100 and not self.event_start:
            self.event_start = True
            self.just_started = True
        if self.event_start and self.all_comets_fallen():
            self.event_start = False
            self.activate_comets()
            self.event_percent = 0.0
        self.raise_percent()

    def all_comets_fallen(self) -> bool:
        return not any(comet.is_active for comet in self.comets)

    def activate_comets(self) -> None:
        """Rearm every comet just above the screen at a random column."""
        for comet in self.comets:
            comet.is_active = True
            comet.rect.y = -comet.rect.h
            comet.rect.x = self.rng.randrange(SCREEN_WIDTH - comet.rect.w)

    def fall_all_comets(self) -> None:
        for comet in self.comets:
            if comet.is_active:
                comet.fall(self.player)

    def forward_all_monsters(self) -> None:
        """Advance the living monsters; award and respawn the dead ones."""
        for index, monster in enumerate(self.monsters):
            if monster.is_alive:
                monster.forward(self.player)
            if monster.health <= 0:
                monster.is_alive = False
                self.player.score += monster.point_loot
                self.clear_monster(index)

    def move_all_projectiles(self) -> None:
        for projectile in self.projectiles:
            if projectile.active:
                projectile.move(self.monsters, self.player)

    def clear_monster(self, index: int) -> None:
        self.monsters[index].reset()

    def game_over(self) -> None:
        """Return to a fresh round after the player has died."""
        for monster in self.monsters:
            monster.reset()
        self.player.health = self.player.max_health
        self.event_percent = 0.0
        self.is_playing = False
        self.player.score = 0
        self.player.rect.x = PLAYER_START_X
        self.player.rect.y = PLAYER_START_Y

    def step(self, controls: Controls) -> StepResult:
        """Run one frame of input and game logic."""
        if controls.space:
            if not self.is_playing:
                self.is_playing = True
                return StepResult.STARTED
            self.player.launch_projectile(self.projectiles)

        if controls.escape and self.is_playing:
            self.is_playing = False
            return StepResult.PAUSED

        if not self.is_playing:
            return StepResult.WAITING

        if controls.right:
            self.player.move_right(self.monsters[0])
        if controls.left:
            self.player.move_left()

        self.update_event()

        if self.event_start:
            self.fall_all_comets()
            if self.just_started:
                for index in range(len(self.monsters)):
                    self.clear_monster(index)
                self.just_started = False
        else:
            self.forward_all_monsters()

        self.move_all_projectiles()

        if self.player.health <= 0:
            self.game_over()
            return StepResult.GAME_OVER
        return StepResult.PLAYING