"""Move validation: game activity, bounds, and occupancy."""

from .errors import CellOccupiedError, GameNotActiveError, OutOfBoundsError


def check_move(board, move, active=True):
    """
    Validate a move before it touches the board.
    Raises GameNotActiveError/OutOfBoundsError/CellOccupiedError on invalid moves.
    """
    if not active:
        raise GameNotActiveError("No game in progress")

    row, col = move
    if not board.in_bounds(row, col):
        raise OutOfBoundsError(f"Move ({row}, {col}) out of bounds")
    if not board.is_empty(row, col):
        raise CellOccupiedError(f"Cell ({row}, {col}) already occupied")

    return True
