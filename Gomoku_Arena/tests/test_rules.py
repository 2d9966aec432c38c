"""Win and draw detection on all four axes."""

import pytest

from Gomoku_Arena.Board import BLACK, WHITE, Board
from Gomoku_Arena.engine import rules

# (start row, start col, d_row, d_col) for a run of five on a 15x15 board
AXIS_RUNS = [
    (7, 3, 0, 1),   # horizontal
    (2, 9, 1, 0),   # vertical
    (4, 4, 1, 1),   # diagonal
    (3, 11, 1, -1),  # anti-diagonal
]


def _run_cells(start_row, start_col, d_row, d_col, length=5):
    return [(start_row + i * d_row, start_col + i * d_col) for i in range(length)]


@pytest.mark.parametrize("start_row, start_col, d_row, d_col", AXIS_RUNS)
def test_every_stone_of_a_five_reports_win(start_row, start_col, d_row, d_col):
    b = Board(size=15)
    cells = _run_cells(start_row, start_col, d_row, d_col)
    for r, c in cells:
        b.place(r, c, BLACK)
    for r, c in cells:
        assert rules.check_win(b, r, c, BLACK)


@pytest.mark.parametrize("start_row, start_col, d_row, d_col", AXIS_RUNS)
def test_stones_outside_the_run_do_not_win(start_row, start_col, d_row, d_col):
    b = Board(size=15)
    for r, c in _run_cells(start_row, start_col, d_row, d_col):
        b.place(r, c, WHITE)
    b.place(0, 0, WHITE)
    b.place(14, 0, BLACK)
    assert not rules.check_win(b, 0, 0, WHITE)
    assert not rules.check_win(b, 14, 0, BLACK)


@pytest.mark.parametrize("start_row, start_col, d_row, d_col", AXIS_RUNS)
def test_four_is_not_a_win(start_row, start_col, d_row, d_col):
    b = Board(size=15)
    cells = _run_cells(start_row, start_col, d_row, d_col, length=4)
    for r, c in cells:
        b.place(r, c, BLACK)
    assert not any(rules.check_win(b, r, c, BLACK) for r, c in cells)


def test_overline_wins():
    b = Board(size=15)
    for col in range(6):
        b.place(3, col, WHITE)
    assert rules.check_win(b, 3, 5, WHITE)
    assert rules.check_win(b, 3, 0, WHITE)


def test_find_winning_move_scans_row_major_and_leaves_board_untouched():
    b = Board(size=15)
    for col in range(4, 8):
        b.place(7, col, BLACK)
    before = b.clone()
    assert rules.find_winning_move(b, BLACK) == (7, 3)
    assert rules.find_winning_move(b, WHITE) is None
    assert b == before


def test_outcome_after_move():
    b = Board(size=5)
    for col in range(5):
        b.place(0, col, BLACK)
    assert rules.outcome_after_move(b, 0, 4, BLACK) == BLACK

    b = Board(size=5)
    b.place(0, 0, WHITE)
    assert rules.outcome_after_move(b, 0, 0, WHITE) is None


def test_full_board_without_five_is_a_draw():
    # Pairs of columns alternate colors so no line reaches five.
    b = Board(size=5)
    for r in range(5):
        for c in range(5):
            if (r, c) != (4, 4):
                b.cells[r][c] = BLACK if (c // 2 + r) % 2 == 0 else WHITE
    assert not rules.is_draw(b)

    b.place(4, 4, BLACK if (4 // 2 + 4) % 2 == 0 else WHITE)
    assert rules.is_draw(b)
    assert rules.outcome_after_move(b, 4, 4, b.cells[4][4]) == rules.DRAW


def test_find_winning_move_skips_occupied_cells():
    b = Board(size=9)
    for col in range(1, 5):
        b.place(0, col, WHITE)
    b.place(0, 0, BLACK)
    # (0, 0) is taken, so the only completion is on the right.
    assert rules.find_winning_move(b, WHITE) == (0, 5)


def test_referee_checks_activity_before_position():
    from Gomoku_Arena.engine import referee
    from Gomoku_Arena.engine.errors import CellOccupiedError, GameNotActiveError, OutOfBoundsError

    b = Board(size=9)
    b.place(4, 4, BLACK)
    with pytest.raises(GameNotActiveError):
        referee.check_move(b, (20, 20), active=False)
    with pytest.raises(OutOfBoundsError):
        referee.check_move(b, (20, 20))
    with pytest.raises(CellOccupiedError):
        referee.check_move(b, (4, 4))
    assert referee.check_move(b, (0, 0)) is True
