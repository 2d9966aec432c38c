"""Game session: board ownership, turn order, move history, undo, and AI turns."""

import logging
from dataclasses import dataclass
from typing import Optional

from .Board import BLACK, WHITE, Board, color_name
from .ai import search_minimax
from .engine import referee, rules
from .engine.errors import GameNotActiveError

LOGGER = logging.getLogger(__name__)

NOT_STARTED = "not_started"
IN_PROGRESS = "in_progress"
ENDED = "ended"

PVP = "pvp"
VS_COMPUTER = "vs-computer"
AI_VS_AI = "ai-vs-ai"
MODES = (PVP, VS_COMPUTER, AI_VS_AI)

DRAW = rules.DRAW


@dataclass(frozen=True)
class Move:
    row: int
    col: int
    player: int


@dataclass(frozen=True)
class GameState:
    status: str
    active_player: Optional[int] = None
    outcome: Optional[int] = None


def outcome_text(outcome):
    if outcome == DRAW:
        return "Draw"
    return f"{color_name(outcome)} wins"


class GameSession:
    """
    Owns one game: the board, the move history and whose turn it is.
    In vs-computer mode the human plays Black and the computer White.
    """

    def __init__(self, size=15, mode=PVP, depth=None, root_limit=search_minimax.ROOT_CANDIDATE_LIMIT, node_limit=search_minimax.NODE_CANDIDATE_LIMIT):
        self._check_mode(mode)
        self.board = Board(size)
        self.mode = mode
        self.depth = depth
        self.root_limit = root_limit
        self.node_limit = node_limit
        self.history = []
        self.status = NOT_STARTED
        self.active_player = BLACK
        self.outcome = None
        self.last_outcome = None
        self.paused = False
        # Bumped on every change of position or control; stale search results compare against it.
        self.generation = 0

    @staticmethod
    def _check_mode(mode):
        if mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {mode!r}")

    @property
    def size(self):
        return self.board.size

    @property
    def state(self):
        active = self.active_player if self.status == IN_PROGRESS else None
        return GameState(self.status, active, self.outcome)

    @property
    def computer_colors(self):
        if self.mode == VS_COMPUTER:
            return (WHITE,)
        if self.mode == AI_VS_AI:
            return (BLACK, WHITE)
        return ()

    @property
    def is_computer_turn(self):
        return self.status == IN_PROGRESS and self.active_player in self.computer_colors

    def new_game(self, size=None, mode=None):
        """Start a fresh game; Black moves first."""
        if mode is not None:
            self._check_mode(mode)
        board = Board(self.size if size is None else size)
        if mode is not None:
            self.mode = mode
        self.board = board
        self.history = []
        self.status = IN_PROGRESS
        self.active_player = BLACK
        self.outcome = None
        self.paused = False
        self.generation += 1
        LOGGER.info("New %dx%d game (%s)", self.size, self.size, self.mode)
        return self.state

    def reset(self):
        """Back to an empty board with no game in progress."""
        self.board = Board(self.size)
        self.history = []
        self.status = NOT_STARTED
        self.active_player = BLACK
        self.outcome = None
        self.paused = False
        self.generation += 1
        return self.state

    def resize(self, delta):
        """Grow or shrink the board by delta; ends any game in progress."""
        self.board = Board(self.size + delta)
        return self.reset()

    def _ensure_active(self):
        if self.status != IN_PROGRESS:
            raise GameNotActiveError("No game in progress")

    def _commit(self, row, col):
        player = self.active_player
        referee.check_move(self.board, (row, col), active=self.status == IN_PROGRESS)
        self.board.place(row, col, player)
        self.history.append(Move(row, col, player))
        self.generation += 1

        result = rules.outcome_after_move(self.board, row, col, player)
        if result is not None:
            self.status = ENDED
            self.outcome = result
            self.last_outcome = result
            LOGGER.info("Game over after %d moves: %s", len(self.history), outcome_text(result))
        else:
            self.active_player = -player
        return self.state

    def apply_human_move(self, row, col):
        """Play (row, col) for the side to move. Rejected moves leave the game unchanged."""
        self._ensure_active()
        if self.is_computer_turn:
            raise GameNotActiveError(f"{color_name(self.active_player)} is played by the computer")
        return self._commit(row, col)

    def request_ai_move(self):
        """Search a move for the side to move without changing the board."""
        self._ensure_active()
        return search_minimax.choose_move(
            self.board,
            self.active_player,
            depth=self.depth,
            root_limit=self.root_limit,
            node_limit=self.node_limit,
        )

    def apply_ai_move(self, result, generation=None):
        """Commit a search result; False if the position changed since it was requested."""
        if generation is not None and generation != self.generation:
            LOGGER.debug("Discarding stale search result %s (generation %d != %d)", result.move, generation, self.generation)
            return False
        self._commit(*result.move)
        return True

    def play_ai_turn(self):
        result = self.request_ai_move()
        self.apply_ai_move(result)
        return result

    def undo(self):
        """
        Take back the last ply, or the last two against the computer so the
        human gets their own turn back. Returns the number of plies removed.
        """
        if self.status != IN_PROGRESS or not self.history:
            return 0

        plies = 1
        if self.mode == VS_COMPUTER and self.active_player not in self.computer_colors and len(self.history) >= 2:
            plies = 2

        for _ in range(plies):
            move = self.history.pop()
            self.board.clear(move.row, move.col)
            self.active_player = move.player
        self.generation += 1
        return plies

    def suggest_move(self):
        """Hint for a human side to move."""
        self._ensure_active()
        if self.is_computer_turn:
            raise GameNotActiveError("Wait for the computer's move")
        return self.request_ai_move()

    def apply_hint(self):
        """Play the suggested move for the human side to move."""
        result = self.suggest_move()
        return self._commit(*result.move)

    def pause(self):
        if self.mode != AI_VS_AI or self.status != IN_PROGRESS:
            return False
        self.paused = True
        self.generation += 1
        return True

    def resume(self):
        if self.mode != AI_VS_AI or not self.paused:
            return False
        self.paused = False
        self.generation += 1
        return True

    def take_over(self):
        """Turn a paused AI-vs-AI game into a vs-computer game with the human on Black."""
        if self.mode != AI_VS_AI or not self.paused:
            return False
        self.mode = VS_COMPUTER
        self.paused = False
        self.generation += 1
        return True
