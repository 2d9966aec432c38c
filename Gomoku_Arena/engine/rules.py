"""Connect-five rules: win detection on the four axes and draw detection."""

from ..Board import EMPTY

DRAW = 0
WIN_LENGTH = 5

# horizontal, vertical, diagonal, anti-diagonal
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


def check_win(board, row, col, player) -> bool:
    """True if the stone of player at (row, col) is part of a run of five or more."""
    for d_row, d_col in DIRECTIONS:
        if board.line_length(row, col, d_row, d_col, player) >= WIN_LENGTH:
            return True
    return False


def find_winning_move(board, player):
    """First empty cell (row-major) that completes a five for player, or None."""
    for row in range(board.size):
        for col in range(board.size):
            if board.cells[row][col] != EMPTY:
                continue
            with board.trial(row, col, player):
                if check_win(board, row, col, player):
                    return (row, col)
    return None


def is_draw(board) -> bool:
    return board.is_full()


def outcome_after_move(board, row, col, player):
    """
    Assumes the stone is already placed.
    Returns player on a win, DRAW if the board filled up, otherwise None.
    """
    if check_win(board, row, col, player):
        return player
    if is_draw(board):
        return DRAW
    return None
