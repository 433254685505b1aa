import pytest

from sudokuenum.core.grid import Grid, grid_from_rows
from sudokuenum.core.model import InconsistentGridError
from sudokuenum.domains.four import Four, FourDigit
from sudokuenum.domains.nine import Nine


def conflicts_by_brute_force(grid, digit, pos):
    side, b = grid.side, grid.block_side
    r, c = divmod(pos, side)
    for q in range(len(grid)):
        qr, qc = divmod(q, side)
        shares_unit = qr == r or qc == c or (qr // b == r // b and qc // b == c // b)
        if shares_unit and grid[q] == digit:
            return True
    return False


def test_can_accept_matches_brute_force():
    grid = grid_from_rows(
        [
            [1, 0, 0, 0],
            [0, 0, 1, 0],
            [0, 2, 0, 0],
            [0, 0, 0, 4],
        ],
        Four,
    )
    for pos in range(len(grid)):
        for d in Four.digits():
            assert grid.can_accept(d, pos) is not conflicts_by_brute_force(grid, d, pos)


def test_can_accept_row_column_block(empty4):
    empty4[5] = FourDigit.THREE  # row 1, column 1, top-left block
    assert not empty4.can_accept(FourDigit.THREE, 7)  # same row
    assert not empty4.can_accept(FourDigit.THREE, 13)  # same column
    assert not empty4.can_accept(FourDigit.THREE, 0)  # same block
    assert empty4.can_accept(FourDigit.THREE, 10)
    assert empty4.can_accept(FourDigit.TWO, 7)


def test_can_accept_on_a_nine_grid():
    grid = Grid.empty(Nine)
    grid[40] = Nine.from_rank(5)  # centre cell
    assert not grid.can_accept(Nine.from_rank(5), 30)  # same block
    assert not grid.can_accept(Nine.from_rank(5), 44)  # same row
    assert not grid.can_accept(Nine.from_rank(5), 76)  # same column
    assert grid.can_accept(Nine.from_rank(5), 0)


def test_values_round_trip():
    values = [1, 0, 0, 0, 0, 0, 1, 0, 0, 2, 0, 0, 0, 0, 0, 4]
    grid = Grid.from_values(values, Four)
    assert grid.to_values() == values
    assert grid.rows()[2] == [None, FourDigit.TWO, None, None]
    assert grid.is_given(0) and not grid.is_given(1)
    assert not grid.is_complete()


def test_inconsistent_literal_is_rejected():
    with pytest.raises(InconsistentGridError) as exc:
        Grid.from_values([1, 1] + [0] * 14, Four)
    assert "(0, 1)" in str(exc.value)


def test_bad_literals():
    with pytest.raises(ValueError):
        Grid.from_values([0] * 15, Four)
    with pytest.raises(ValueError):
        Grid.from_values([5] + [0] * 15, Four)
    with pytest.raises(ValueError):
        Grid(Four, [None] * 9)


def test_conflicts_and_copy(empty4):
    copy = empty4.copy()
    copy[0] = FourDigit.ONE
    copy[15] = FourDigit.ONE
    assert copy.is_consistent()
    copy[3] = FourDigit.ONE
    assert copy.conflicts() == [(0, 3), (3, 15)]
    assert empty4[0] is None
