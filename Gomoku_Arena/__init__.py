"""Gomoku_Arena package exports."""

from .Board import BLACK, EMPTY, WHITE, Board
from .GameSession import GameSession, GameState, Move
from .Match import Match
from .Player import Player, HumanPlayer, ComputerPlayer
from .engine.errors import (
    BoardSizeError,
    CellOccupiedError,
    GameNotActiveError,
    GomokuError,
    OutOfBoundsError,
)

# Subpackages for rules, AI search, GUI, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "BLACK",
    "EMPTY",
    "WHITE",
    "Board",
    "GameSession",
    "GameState",
    "Move",
    "Match",
    "Player",
    "HumanPlayer",
    "ComputerPlayer",
    "BoardSizeError",
    "CellOccupiedError",
    "GameNotActiveError",
    "GomokuError",
    "OutOfBoundsError",
    "ai",
    "engine",
    "gui",
    "utils",
]
