"""Run classification, threat bonuses and whole-board evaluation."""

import pytest

from Gomoku_Arena.Board import BLACK, WHITE, Board
from Gomoku_Arena.ai import heuristic


def _board_with(size, stones):
    b = Board(size=size)
    for (r, c), color in stones.items():
        b.place(r, c, color)
    return b


def test_single_stone_scores_one_per_axis():
    b = _board_with(9, {(2, 2): WHITE})
    assert heuristic.stone_score(b, 2, 2, WHITE) == 4


@pytest.mark.parametrize(
    "cols, blockers, expected_axis_score",
    [
        ((4, 5), (), 50),
        ((4, 5), (3,), 5),
        ((4, 5), (3, 6), 5),
        ((3, 4, 5), (), 800),
        ((3, 4, 5), (2,), 150),
        ((3, 4, 5), (2, 6), 15),
        ((2, 3, 4, 5), (), 10000),
        ((2, 3, 4, 5), (1,), 2000),
        ((2, 3, 4, 5), (1, 6), 150),
        ((2, 3, 4, 5, 6), (1, 7), 100000),
    ],
)
def test_stone_score_table(cols, blockers, expected_axis_score):
    stones = {(4, c): WHITE for c in cols}
    stones.update({(4, c): BLACK for c in blockers})
    b = _board_with(9, stones)
    # the other three axes hold a lone stone each
    assert heuristic.stone_score(b, 4, cols[0], WHITE) == expected_axis_score + 3


def test_board_edge_closes_a_run():
    b = _board_with(9, {(0, c): WHITE for c in range(4)})
    assert heuristic.stone_score(b, 0, 0, WHITE) == 2000 + 3


def test_placement_score_uses_ordering_table():
    b = _board_with(9, {(4, 4): WHITE})
    assert heuristic.placement_score(b, 0, 0, WHITE) == 40
    assert heuristic.placement_score(b, 4, 5, WHITE) == 100 + 30
    assert heuristic.placement_score(b, 4, 5, BLACK) == 40
    assert b.is_empty(4, 5)


def test_placement_score_blocked_runs():
    b = _board_with(9, {(4, 3): BLACK, (4, 4): WHITE, (4, 5): WHITE})
    # (4, 6) would make a three closed on the left
    assert heuristic.placement_score(b, 4, 6, WHITE) == 500 + 30


def test_open_three_counts_once_per_stone():
    b = _board_with(9, {(4, c): WHITE for c in (3, 4, 5)})
    assert heuristic.count_threes(b, WHITE) == (3, 3)
    assert heuristic.strategic_bonus(b, WHITE) == 3000 + 1000
    assert heuristic.strategic_bonus(b, BLACK) == 0


def test_closed_three_gets_only_multi_three_bonus():
    b = _board_with(9, {(4, 2): BLACK, (4, 3): WHITE, (4, 4): WHITE, (4, 5): WHITE})
    assert heuristic.count_threes(b, WHITE) == (3, 0)
    assert heuristic.strategic_bonus(b, WHITE) == 1000


def test_evaluate_board_empty_is_zero():
    assert heuristic.evaluate_board(Board(size=9)) == 0


def test_evaluate_board_weights_black_more():
    white_only = _board_with(9, {(4, 4): WHITE})
    black_only = _board_with(9, {(4, 4): BLACK})
    assert heuristic.evaluate_board(white_only) == pytest.approx(4)
    assert heuristic.evaluate_board(black_only) == pytest.approx(-4 * 1.05)


def test_evaluate_board_includes_strategic_bonus():
    white_three = _board_with(9, {(4, c): WHITE for c in (3, 4, 5)})
    assert heuristic.evaluate_board(white_three) == pytest.approx(3 * 803 + 4000)

    black_three = _board_with(9, {(4, c): BLACK for c in (3, 4, 5)})
    assert heuristic.evaluate_board(black_three) == pytest.approx(-(3 * 803 + 4000) * 1.05)
