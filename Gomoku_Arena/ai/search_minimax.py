"""Minimax with alpha-beta pruning behind immediate win/block and opening shortcuts."""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from . import heuristic
from . import move_selector
from ..Board import BLACK, WHITE, color_name
from ..engine import rules

LOGGER = logging.getLogger(__name__)

WIN_SCORE = 100000
ROOT_CANDIDATE_LIMIT = 20
NODE_CANDIDATE_LIMIT = 15

# (more than this many candidates, depth)
DEPTH_SCHEDULE = ((200, 4), (100, 5))
LATE_GAME_DEPTH = 6
CANCEL_CHECK_MASK = 255  # check every 256 nodes


class SearchCancelled(Exception):
    """Raised inside a search whose result is no longer wanted."""


@dataclass(frozen=True)
class SearchResult:
    move: Tuple[int, int]
    score: Optional[float] = None
    depth: int = 0
    nodes: int = 0
    reason: str = "search"


def depth_for(candidate_count):
    """Search deeper as the board fills up and the branching factor narrows."""
    for threshold, depth in DEPTH_SCHEDULE:
        if candidate_count > threshold:
            return depth
    return LATE_GAME_DEPTH


class MinimaxSearcher:
    """
    Encapsulates the state and logic for a minimax search.
    White is always the maximizing side and Black the minimizing side,
    whichever color the searcher plays.
    """

    def __init__(self, color, root_limit=ROOT_CANDIDATE_LIMIT, node_limit=NODE_CANDIDATE_LIMIT, depth=None, cancel_event=None):
        if color not in (BLACK, WHITE):
            raise ValueError("color must be -1 (black) or 1 (white)")
        self.color = color
        self.root_limit = root_limit
        self.node_limit = node_limit
        self.fixed_depth = depth
        self.cancel_event = cancel_event

        # Internal state
        self.node_counter = 0
        self.start_time = None

    def choose_move(self, board):
        """Return a SearchResult for self.color. The board is left exactly as it was given."""
        if board.is_full():
            raise ValueError("No empty cell available for search")

        self.node_counter = 0
        self.start_time = time.time()

        # Tactical guardrails: immediate win or block before deeper search.
        win_move = rules.find_winning_move(board, self.color)
        if win_move is not None:
            return self._finish(SearchResult(win_move, reason="win"))
        block_move = rules.find_winning_move(board, -self.color)
        if block_move is not None:
            return self._finish(SearchResult(block_move, reason="block"))

        if move_selector.in_opening(board):
            opening = move_selector.opening_move(board)
            if opening is not None:
                return self._finish(SearchResult(opening, reason="opening"))

        candidates = move_selector.generate_candidates(board)
        depth = self.fixed_depth or depth_for(len(candidates))
        score, move = self._search_root(board, candidates, depth)
        return self._finish(SearchResult(move, score=score, depth=depth, nodes=self.node_counter))

    def _search_root(self, board, candidates, depth):
        maximizing = self.color == WHITE
        best_score = -float("inf") if maximizing else float("inf")
        best_move = candidates[0]

        for move in candidates[: self.root_limit]:
            row, col = move
            with board.trial(row, col, self.color):
                score = self._minimax(board, depth - 1, -float("inf"), float("inf"), not maximizing, move)

            if (maximizing and score > best_score) or (not maximizing and score < best_score):
                best_score = score
                best_move = move

        return best_score, best_move

    def _check_cancel(self):
        self.node_counter += 1
        if self.cancel_event is not None and (self.node_counter & CANCEL_CHECK_MASK) == 0:
            if self.cancel_event.is_set():
                raise SearchCancelled("Search cancelled")

    def _minimax(self, board, depth, alpha, beta, maximizing, last_move):
        self._check_cancel()

        # Only the stone just placed can have completed a five.
        row, col = last_move
        mover = board.cells[row][col]
        if rules.check_win(board, row, col, mover):
            return WIN_SCORE + depth if mover == WHITE else -WIN_SCORE - depth
        if depth == 0 or board.is_full():
            return heuristic.evaluate_board(board)

        candidates = move_selector.generate_candidates(board)[: self.node_limit]

        if maximizing:
            max_score = -float("inf")
            for move in candidates:
                with board.trial(move[0], move[1], WHITE):
                    score = self._minimax(board, depth - 1, alpha, beta, False, move)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return max_score

        min_score = float("inf")
        for move in candidates:
            with board.trial(move[0], move[1], BLACK):
                score = self._minimax(board, depth - 1, alpha, beta, True, move)
            min_score = min(min_score, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return min_score

    def _finish(self, result):
        elapsed = max(time.time() - self.start_time, 1e-9)
        LOGGER.debug(
            "%s plays %s (%s, depth=%d, nodes=%d, score=%s, %.2fs)",
            color_name(self.color),
            result.move,
            result.reason,
            result.depth,
            result.nodes,
            result.score,
            elapsed,
        )
        return result


def choose_move(board, color, depth=None, root_limit=ROOT_CANDIDATE_LIMIT, node_limit=NODE_CANDIDATE_LIMIT, cancel_event=None):
    """Public function to start a search. Instantiates and uses MinimaxSearcher."""
    searcher = MinimaxSearcher(
        color=color,
        root_limit=root_limit,
        node_limit=node_limit,
        depth=depth,
        cancel_event=cancel_event,
    )
    return searcher.choose_move(board)
