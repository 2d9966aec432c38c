"""Run-based position evaluation: per-stone scores, threat bonuses, and whole-board score."""

from ..Board import BLACK, WHITE
from ..engine.rules import DIRECTIONS

FIVE_SCORE = 100000

# run length -> (both ends open, one end open, no end open)
STONE_WEIGHTS = {
    4: (10000, 2000, 150),
    3: (800, 150, 15),
    2: (50, 5, 5),
}
SINGLE_STONE_SCORE = 1

# Move-ordering table: (both ends open, otherwise)
PLACEMENT_WEIGHTS = {
    4: (10000, 5000),
    3: (1000, 500),
    2: (100, 50),
}
PLACEMENT_SINGLE_SCORE = 10

DEFENSE_WEIGHT = 1.05  # Black's side is weighted up so the engine leans toward defence
DOUBLE_THREAT_BONUS = 3000
MULTI_THREE_BONUS = 1000


def _open_ends(board, row, col, d_row, d_col, player):
    return (
        int(board.is_open_end(row, col, d_row, d_col, player))
        + int(board.is_open_end(row, col, -d_row, -d_col, player))
    )


def stone_score(board, row, col, player):
    """
    Score a stone of player at (row, col) from the runs it belongs to.
    The cell is expected to hold player already.
    """
    score = 0
    for d_row, d_col in DIRECTIONS:
        count = board.line_length(row, col, d_row, d_col, player)
        if count >= 5:
            score += FIVE_SCORE
        elif count in STONE_WEIGHTS:
            both, one, none = STONE_WEIGHTS[count]
            ends = _open_ends(board, row, col, d_row, d_col, player)
            score += (none, one, both)[ends]
        else:
            score += SINGLE_STONE_SCORE
    return score


def placement_score(board, row, col, player):
    """Score an empty cell as if player moved there (used to order candidates)."""
    score = 0
    with board.trial(row, col, player):
        for d_row, d_col in DIRECTIONS:
            count = board.line_length(row, col, d_row, d_col, player)
            if count >= 5:
                score += FIVE_SCORE
            elif count in PLACEMENT_WEIGHTS:
                open_both, other = PLACEMENT_WEIGHTS[count]
                ends = _open_ends(board, row, col, d_row, d_col, player)
                score += open_both if ends == 2 else other
            else:
                score += PLACEMENT_SINGLE_SCORE
    return score


def count_threes(board, player):
    """
    Return (threes, open_threes) seen from every stone of player.
    Each stone of a three counts it, so a single three contributes three times.
    """
    threes = 0
    open_threes = 0
    size = board.size
    cells = board.cells
    for row in range(size):
        for col in range(size):
            if cells[row][col] != player:
                continue
            for d_row, d_col in DIRECTIONS:
                if board.line_length(row, col, d_row, d_col, player) != 3:
                    continue
                threes += 1
                if _open_ends(board, row, col, d_row, d_col, player) == 2:
                    open_threes += 1
    return threes, open_threes


def strategic_bonus(board, player):
    """Bonus for multiple simultaneous threats (double open three, many threes)."""
    threes, open_threes = count_threes(board, player)
    score = 0
    if open_threes >= 2:
        score += DOUBLE_THREAT_BONUS
    if threes >= 3:
        score += MULTI_THREE_BONUS
    return score


def evaluate_board(board):
    """Whole-board score. Positive favors White, negative favors Black."""
    score = 0.0
    cells = board.cells
    for row in range(board.size):
        for col in range(board.size):
            v = cells[row][col]
            if v == WHITE:
                score += stone_score(board, row, col, WHITE)
            elif v == BLACK:
                score -= stone_score(board, row, col, BLACK) * DEFENSE_WEIGHT

    score += strategic_bonus(board, WHITE) - strategic_bonus(board, BLACK) * DEFENSE_WEIGHT
    return score
