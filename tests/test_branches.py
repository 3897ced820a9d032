import pytest

from timber.branches import (
    NUM_BRANCHES,
    BranchColumn,
    Side,
    branch_placement,
    side_for_roll,
)


class _FixedRoll:
    def __init__(self, roll):
        self.roll = roll
        self.stops = []

    def randrange(self, stop):
        self.stops.append(stop)
        return self.roll


class _Factory:
    def __init__(self, roll):
        self.source = _FixedRoll(roll)
        self.seeds = []

    def __call__(self, seed):
        self.seeds.append(seed)
        return self.source


@pytest.mark.parametrize(
    "roll, side",
    [(0, Side.LEFT), (1, Side.RIGHT), (2, Side.NONE), (3, Side.NONE), (4, Side.NONE)],
)
def test_side_for_roll(roll, side):
    assert side_for_roll(roll) is side


def test_left_branch_placement():
    placement = branch_placement(Side.LEFT, 2)
    assert (placement.x, placement.y, placement.rotation) == (610, 300, 180)


def test_right_branch_placement():
    placement = branch_placement(Side.RIGHT, 0)
    assert (placement.x, placement.y, placement.rotation) == (1330, 0, 0)


def test_hidden_branch_keeps_rotation():
    placement = branch_placement(Side.NONE, 1)
    assert placement.x == 3000
    assert placement.y == 150
    assert placement.rotation is None


def test_new_column_is_all_left():
    column = BranchColumn()
    assert list(column) == [Side.LEFT] * NUM_BRANCHES


def test_clear_keeps_top_branch():
    column = BranchColumn()
    column.clear()
    assert column[0] is Side.LEFT
    assert list(column)[1:] == [Side.NONE] * (NUM_BRANCHES - 1)


def test_update_shifts_down_and_spawns_top():
    column = BranchColumn()
    column.clear()
    factory = _Factory(1)
    new_side = column.update(7, factory)
    assert new_side is Side.RIGHT
    assert column[0] is Side.RIGHT
    assert column[1] is Side.LEFT
    assert list(column)[2:] == [Side.NONE] * (NUM_BRANCHES - 2)
    assert factory.seeds == [7]
    assert factory.source.stops == [5]


def test_branch_reaches_bottom_after_enough_updates():
    column = BranchColumn()
    column.clear()
    factory = _Factory(4)
    for seed in range(NUM_BRANCHES - 1):
        column.update(seed, factory)
    assert column.lowest is Side.LEFT
    assert list(column)[:-1] == [Side.NONE] * (NUM_BRANCHES - 1)
    column.update(99, factory)
    assert column.lowest is Side.NONE


def test_length_stays_fixed():
    column = BranchColumn()
    for seed in range(20):
        column.update(seed, _Factory(seed % 5))
    assert len(column) == NUM_BRANCHES


def test_placements_follow_positions():
    column = BranchColumn()
    column.clear()
    column.update(1, _Factory(1))
    placements = column.placements()
    assert len(placements) == NUM_BRANCHES
    for index, (side, placement) in enumerate(zip(column, placements)):
        assert placement == branch_placement(side, index)


def test_default_factory_gives_valid_side():
    column = BranchColumn()
    new_side = column.update(3)
    assert new_side in set(Side)
    assert column[0] is new_side