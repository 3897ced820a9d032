"""The column of branches hanging off the tree, and where each one is drawn."""

from __future__ import annotations

import enum
import random
import time
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Protocol

NUM_BRANCHES = 6
BRANCH_SPACING = 150
BRANCH_ROLL_RANGE = 5

LEFT_BRANCH_X = 610.0
RIGHT_BRANCH_X = 1330.0
HIDDEN_BRANCH_X = 3000.0
LEFT_ROTATION = 180.0
RIGHT_ROTATION = 0.0


class RandomSource(Protocol):
    """Anything that can pick an integer in ``range(n)``."""

    def randrange(self, stop: int) -> int: ...


RngFactory = Callable[[int], RandomSource]


class Side(enum.Enum):
    """Which side of the tree something is on."""

    LEFT = 0
    RIGHT = 1
    NONE = 2


@dataclass(frozen=True)
class BranchPlacement:
    """Where a branch sprite goes; ``rotation`` is None when it is left as is."""

    x: float
    y: float
    rotation: Optional[float]


def _time_offset_seeded(seed: int) -> random.Random:
    """A generator seeded from the current second plus ``seed``."""
    return random.Random(int(time.time()) + seed)


def side_for_roll(roll: int) -> Side:
    """Map a roll in ``range(5)`` to a side: 0 is left, 1 is right, else none."""
    if roll == 0:
        return Side.LEFT
    if roll == 1:
        return Side.RIGHT
    return Side.NONE


def branch_placement(side: Side, index: int) -> BranchPlacement:
    """Screen position and rotation of the branch at ``index`` on ``side``."""
    height = float(index * BRANCH_SPACING)
    if side is Side.LEFT:
        return BranchPlacement(LEFT_BRANCH_X, height, LEFT_ROTATION)
    if side is Side.RIGHT:
        return BranchPlacement(RIGHT_BRANCH_X, height, RIGHT_ROTATION)
    return BranchPlacement(HIDDEN_BRANCH_X, height, None)


class BranchColumn:
    """The sides of the six branches, top (index 0) to bottom (index 5).

    A fresh column has every branch on the left, as a zeroed array would;
    ``clear`` empties all but the top one.
    """

    def __init__(self) -> None:
        self.positions: list[Side] = [Side.LEFT] * NUM_BRANCHES

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Side]:
        return iter(self.positions)

    def __getitem__(self, index: int) -> Side:
        return self.positions[index]

    @property
    def lowest(self) -> Side:
        """The side of the branch level with the player."""
        return self.positions[-1]

    def update(self, seed: int, rng_factory: Optional[RngFactory] = None) -> Side:
        """Move every branch down one place and spawn a new one at the top."""
        factory = rng_factory if rng_factory is not None else _time_offset_seeded
        self.positions = [Side.NONE] + self.positions[:-1]
        new_side = side_for_roll(factory(seed).randrange(BRANCH_ROLL_RANGE))
        self.positions[0] = new_side
        return new_side

    def clear(self) -> None:
        """Remove every branch below the top one."""
        self.positions[1:] = [Side.NONE] * (NUM_BRANCHES - 1)

    def placements(self) -> list[BranchPlacement]:
        """Where each branch sprite should be drawn, top to bottom."""
        return [branch_placement(side, index) for index, side in enumerate(self.positions)]