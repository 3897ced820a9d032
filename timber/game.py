"""Game state for the chopping game: timer, score, branches, player and sounds."""

from __future__ import annotations

import enum
from typing import Optional

from timber.actors import Bee, Cloud, RandomSource, RngFactory
from timber.branches import BranchColumn, BranchPlacement, Side
from timber.flight import FpsCounter, Log

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080

START_TIME = 10.0
TIME_BAR_START_WIDTH = 400.0
TIME_BAR_HEIGHT = 80.0
TIME_BAR_POSITION = (SCREEN_WIDTH // 2 - TIME_BAR_START_WIDTH / 2, 980.0)
TIME_BAR_WIDTH_PER_SECOND = TIME_BAR_START_WIDTH / START_TIME
CHOP_TIME_BONUS = 0.15

MESSAGE_START = "Press Enter to start!"
MESSAGE_OUT_OF_TIME = "Out of time!! Press Enter to restart."
MESSAGE_SQUISHED = "SQUISHED!! Press Enter to restart."

PLAYER_LEFT_POSITION = (580.0, 720.0)
PLAYER_RIGHT_POSITION = (1200.0, 720.0)
PLAYER_HIDDEN_POSITION = (2000.0, 660.0)

AXE_START_POSITION = (700.0, 830.0)
AXE_POSITION_LEFT = 700.0
AXE_POSITION_RIGHT = 1075.0
AXE_HIDDEN_X = 2000.0

RIP_HIDDEN_POSITION = (675.0, 2000.0)
RIP_DEAD_POSITION = (525.0, 760.0)

LOG_FLY_LEFT_SPEED = -5000.0
LOG_FLY_RIGHT_SPEED = 5000.0

BRANCH_START = BranchPlacement(-2000.0, -2000.0, 0.0)
FRAME_SPAWN_SEEDS = (1, 2, 3, 4, 5)

# (start x, seed factor, initial y) for each cloud, in drawing order.
_CLOUD_LAYOUT = (
    (-200.0, 10, 0.0),
    (-150.0, 20, 150.0),
    (-200.0, 30, 300.0),
    (-200.0, 40, 450.0),
    (-200.0, 50, 600.0),
    (-200.0, 60, 750.0),
)


class Chapter(enum.Enum):
    """How far along the game is built.

    ``BRANCHES`` has the timer, score and branches; ``PLAYER`` adds the
    player, axe and chopping; ``FULL`` adds squishing, the flying log,
    key release, sounds, six clouds and the frame-rate counter.
    """

    BRANCHES = "branches"
    PLAYER = "player"
    FULL = "full"

    @property
    def has_player(self) -> bool:
        return self is not Chapter.BRANCHES

    @property
    def has_sound(self) -> bool:
        return self is Chapter.FULL

    @property
    def scores_every_frame(self) -> bool:
        return self is not Chapter.FULL

    @property
    def spawns_every_frame(self) -> bool:
        return self is not Chapter.FULL

    @property
    def cloud_count(self) -> int:
        return 6 if self is Chapter.FULL else 3


class Sound(enum.Enum):
    """Sound effects the game asks to be played."""

    CHOP = "chop"
    DEATH = "death"
    OUT_OF_TIME = "out_of_time"


class TimberGame:
    """The whole state of one game, advanced frame by frame."""

    def __init__(
        self,
        chapter: Chapter = Chapter.FULL,
        rng: Optional[RandomSource] = None,
        cloud_rng_factory: Optional[RngFactory] = None,
        branch_rng_factory: Optional[RngFactory] = None,
    ) -> None:
        self.chapter = chapter
        self._rng = rng
        self._cloud_rng_factory = cloud_rng_factory
        self._branch_rng_factory = branch_rng_factory

        self.paused = True
        self.score = 0
        self.time_remaining = START_TIME
        self.message = MESSAGE_START

        self.bee = Bee()
        self.clouds = [
            Cloud(start_x=start_x, seed_factor=factor, x=0.0, y=y)
            for start_x, factor, y in _CLOUD_LAYOUT[: chapter.cloud_count]
        ]

        self.branches = BranchColumn()
        self.branch_sprites: list[BranchPlacement] = [BRANCH_START] * len(self.branches)

        self.player_side = Side.LEFT
        self.player_position = PLAYER_LEFT_POSITION
        self.axe_position = AXE_START_POSITION
        self.rip_position = RIP_HIDDEN_POSITION
        self.log = Log()
        self.fps = FpsCounter()
        self.sounds: list[Sound] = []
        self.accept_input = False

        if chapter.has_player:
            self.branches.clear()
            self.accept_input = True

    def _play(self, sound: Sound) -> None:
        if self.chapter.has_sound:
            self.sounds.append(sound)

    def _place_branches(self) -> None:
        self.branch_sprites = [
            BranchPlacement(
                new.x,
                new.y,
                new.rotation if new.rotation is not None else old.rotation,
            )
            for new, old in zip(self.branches.placements(), self.branch_sprites)
        ]

    def toggle_pause(self) -> None:
        """Pause or resume; resuming the full game starts a fresh round."""
        self.paused = not self.paused
        if self.paused or self.chapter is not Chapter.FULL:
            return
        self.rip_position = RIP_HIDDEN_POSITION
        self.player_position = PLAYER_LEFT_POSITION
        self.accept_input = True
        self.score = 0
        self.time_remaining = START_TIME
        self.branches.clear()

    def release_key(self) -> None:
        """A key was released: accept input again and hide the axe."""
        if self.chapter is not Chapter.FULL or self.paused:
            return
        self.accept_input = True
        self.axe_position = (AXE_HIDDEN_X, self.axe_position[1])

    def chop(self, side: Side) -> bool:
        """Chop from ``side``; return whether the chop was taken."""
        if side is Side.NONE:
            raise ValueError("a chop must come from the left or the right")
        if not self.chapter.has_player or self.paused or not self.accept_input:
            return False
        self.player_side = side
        self.score += 1
        self.time_remaining += (2 // self.score) + CHOP_TIME_BONUS
        if side is Side.RIGHT:
            self.axe_position = (AXE_POSITION_RIGHT, self.axe_position[1])
            self.player_position = PLAYER_RIGHT_POSITION
            log_speed = LOG_FLY_LEFT_SPEED
        else:
            self.axe_position = (AXE_POSITION_LEFT, self.axe_position[1])
            self.player_position = PLAYER_LEFT_POSITION
            log_speed = LOG_FLY_RIGHT_SPEED
        self.branches.update(self.score, self._branch_rng_factory)
        if self.chapter is Chapter.FULL:
            self._place_branches()
        self.log.launch(log_speed)
        self.accept_input = False
        self._play(Sound.CHOP)
        return True

    def update(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds; nothing moves while paused."""
        if self.paused:
            return

        self.time_remaining -= dt
        if self.time_remaining <= 0.0:
            self.paused = True
            self.score = 0
            self.time_remaining = START_TIME
            self.message = MESSAGE_OUT_OF_TIME
            self._play(Sound.OUT_OF_TIME)

        if self.chapter.scores_every_frame:
            self.score += 1

        self.bee.update(dt, self._rng)
        for cloud in self.clouds:
            cloud.update(dt, self._cloud_rng_factory)

        self._place_branches()
        if self.chapter.spawns_every_frame:
            for seed in FRAME_SPAWN_SEEDS:
                self.branches.update(seed, self._branch_rng_factory)

        if self.chapter is not Chapter.FULL:
            return

        self.log.update(dt)

        if self.branches.lowest == self.player_side:
            self.paused = True
            self.accept_input = False
            self.rip_position = RIP_DEAD_POSITION
            self.player_position = PLAYER_HIDDEN_POSITION
            self.message = MESSAGE_SQUISHED
            self._play(Sound.DEATH)

        self.fps.tick(dt)

    def time_bar_width(self) -> float:
        """Width of the red time bar for the time remaining."""
        return TIME_BAR_WIDTH_PER_SECOND * self.time_remaining

    def score_text(self) -> str:
        """The score line shown in the corner."""
        return f"Score = {self.score}"