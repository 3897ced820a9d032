"""Background actors that drift across the screen: the bee and the clouds."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

SCREEN_WIDTH = 1920

BEE_SPAWN_X = 2000.0
BEE_EXIT_X = -100.0
BEE_MIN_SPEED = 200
BEE_SPEED_RANGE = 200
BEE_MIN_HEIGHT = 500
BEE_HEIGHT_RANGE = 500

CLOUD_SPEED_RANGE = 150 + 50
CLOUD_HEIGHT_RANGE = 150


class RandomSource(Protocol):
    """Anything that can pick an integer in ``range(n)``."""

    def randrange(self, stop: int) -> int: ...


RngFactory = Callable[[int], RandomSource]


def _time_seeded(factor: int) -> random.Random:
    """A generator seeded from the current second times ``factor``."""
    return random.Random(int(time.time()) * factor)


@dataclass
class Bee:
    """A bee that flies from right to left at a random speed and height."""

    x: float = 0.0
    y: float = 800.0
    speed: float = 0.0
    active: bool = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def update(self, dt: float, rng: Optional[RandomSource] = None) -> None:
        """Spawn the bee off the right edge, or move it left by ``dt`` seconds."""
        if not self.active:
            source = rng if rng is not None else random
            self.speed = float(source.randrange(BEE_SPEED_RANGE) + BEE_MIN_SPEED)
            self.y = float(source.randrange(BEE_HEIGHT_RANGE) + BEE_MIN_HEIGHT)
            self.x = BEE_SPAWN_X
            self.active = True
            return
        self.x -= self.speed * dt
        if self.x < BEE_EXIT_X:
            self.active = False


@dataclass
class Cloud:
    """A cloud that drifts from left to right.

    Each respawn draws its speed and height from generators freshly seeded
    by ``rng_factory(seed_factor)``, so clouds respawning in the same second
    with the same factor share speed and height.
    """

    start_x: float = -200.0
    seed_factor: int = 10
    x: float = 0.0
    y: float = 0.0
    speed: float = 0.0
    active: bool = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def update(self, dt: float, rng_factory: Optional[RngFactory] = None) -> None:
        """Respawn the cloud at its start, or move it right by ``dt`` seconds."""
        if not self.active:
            factory = rng_factory if rng_factory is not None else _time_seeded
            self.speed = float(factory(self.seed_factor).randrange(CLOUD_SPEED_RANGE))
            self.y = float(factory(self.seed_factor).randrange(CLOUD_HEIGHT_RANGE))
            self.x = float(self.start_x)
            self.active = True
            return
        self.x += self.speed * dt
        if self.x > SCREEN_WIDTH:
            self.active = False