"""Background search thread whose result is dropped if the game moved on meanwhile."""

import logging
import threading

from . import search_minimax
from ..Board import color_name

LOGGER = logging.getLogger(__name__)


class SearchJob(threading.Thread):
    """Searches a private copy of the board; never touches the live session."""

    def __init__(self, board, color, generation, delay=0.0, depth=None, root_limit=search_minimax.ROOT_CANDIDATE_LIMIT, node_limit=search_minimax.NODE_CANDIDATE_LIMIT, hint=False):
        super().__init__(daemon=True)
        self.hint = hint
        self.board = board
        self.color = color
        self.generation = generation
        self.delay = delay
        self.depth = depth
        self.root_limit = root_limit
        self.node_limit = node_limit
        self.cancelled = threading.Event()
        self.result = None
        self.error = None

    def run(self):
        # Pacing delay so front ends can show the previous move before the reply.
        if self.delay > 0 and self.cancelled.wait(self.delay):
            return
        try:
            self.result = search_minimax.choose_move(
                self.board,
                self.color,
                depth=self.depth,
                root_limit=self.root_limit,
                node_limit=self.node_limit,
                cancel_event=self.cancelled,
            )
        except search_minimax.SearchCancelled:
            LOGGER.debug("Search for generation %d cancelled", self.generation)
        except Exception as exc:
            self.error = exc


class SearchWorker:
    """
    Runs the computer's search off the caller's thread.
    The caller polls; a finished result is committed to the session only if
    the session's generation still matches the one the search started from.
    Hint searches use the same path but only publish their move in `hint`.
    """

    def __init__(self, session, delay=0.0):
        self.session = session
        self.delay = delay
        self.job = None
        self.hint = None
        self.error = None

    @property
    def busy(self):
        return self.job is not None

    def start(self, hint=False):
        """
        Begin searching for the side to move, unless a search is already running.
        With hint=True the move is only suggested, never played, and no pacing delay applies.
        """
        if self.job is not None:
            return False
        session = self.session
        self.hint = None
        self.error = None
        self.job = SearchJob(
            session.board.clone(),
            session.active_player,
            session.generation,
            delay=0.0 if hint else self.delay,
            depth=session.depth,
            root_limit=session.root_limit,
            node_limit=session.node_limit,
            hint=hint,
        )
        self.job.start()
        return True

    def start_hint(self):
        return self.start(hint=True)

    def cancel(self):
        self.hint = None
        self.error = None
        if self.job is not None:
            self.job.cancelled.set()
            self.job = None

    def poll(self):
        """
        Return the SearchResult once the search finishes, else None.
        Stale, cancelled or failed searches yield None; a failure is logged and kept in `error`.
        """
        job = self.job
        if job is None or job.is_alive():
            return None
        self.job = None
        if job.error is not None:
            self.error = job.error
            LOGGER.error("Search for %s failed", color_name(job.color), exc_info=job.error)
            return None
        if job.result is None:
            return None
        if job.hint:
            if job.generation != self.session.generation:
                return None
            self.hint = job.result.move
            return job.result
        if not self.session.apply_ai_move(job.result, generation=job.generation):
            return None
        return job.result

    def wait(self, timeout=None):
        """Block until the running search finishes, then poll it."""
        job = self.job
        if job is not None:
            job.join(timeout)
        return self.poll()
