"""Game error types. All are recoverable; a rejected move leaves the game untouched."""


class GomokuError(ValueError):
    """Base class for rejected game operations."""


class OutOfBoundsError(GomokuError):
    pass


class CellOccupiedError(GomokuError):
    pass


class GameNotActiveError(GomokuError):
    """Move attempted before the game started, after it ended, or on the computer's turn."""


class BoardSizeError(GomokuError):
    pass
