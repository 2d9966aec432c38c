"""Pygame-based board renderer and event loop driving a GameSession."""

import logging

from ..Board import BLACK, color_name
from ..GameSession import AI_VS_AI, ENDED, IN_PROGRESS, outcome_text
from ..ai.worker import SearchWorker
from ..engine.errors import GomokuError

LOGGER = logging.getLogger(__name__)


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_WOOD = (209, 179, 135)
    COLOR_GRID = (60, 40, 20)
    COLOR_TEXT = (230, 230, 230)
    COLOR_RED = (200, 0, 0)
    COLOR_BLACK_STONE = (20, 20, 20)
    COLOR_WHITE_STONE = (240, 240, 235)
    COLOR_HINT = (60, 160, 60)

    PANEL_HEIGHT = 80
    MARGIN_RATIO = 23 / 540

    def __init__(self, board_size, window_size=800):
        import pygame

        self._pygame = pygame
        self.window_size = window_size
        self.message = ""
        self.hint = None

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size))
        pygame.display.set_caption("Gomoku Arena")

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)

        self.board_display_size = window_size - self.PANEL_HEIGHT
        self.set_board_size(board_size)

    def set_board_size(self, board_size):
        """Recompute the grid geometry for a new board size."""
        self.board_size = board_size
        self.margin_px = self.board_display_size * self.MARGIN_RATIO
        self.tile_size = (self.board_display_size - 2 * self.margin_px) / (board_size - 1)
        self.board_surface = self._build_board_surface(self.board_display_size)
        # The board is offset by the panel height
        self.board_origin = (
            (self.window_size - self.board_display_size) // 2,
            self.PANEL_HEIGHT,
        )

    def _grid_origin(self):
        ox, oy = self.board_origin
        return ox + self.margin_px, oy + self.margin_px

    def _build_board_surface(self, size_px):
        pygame = self._pygame
        surf = pygame.Surface((size_px, size_px))
        surf.fill(self.COLOR_WOOD)
        grid_start = self.margin_px
        grid_end = size_px - self.margin_px
        for i in range(self.board_size):
            offset = grid_start + i * self.tile_size
            pygame.draw.line(surf, self.COLOR_GRID, (grid_start, offset), (grid_end, offset), 1)
            pygame.draw.line(surf, self.COLOR_GRID, (offset, grid_start), (offset, grid_end), 1)
        return surf

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def cell_center(self, row, col):
        gx, gy = self._grid_origin()
        return gx + col * self.tile_size, gy + row * self.tile_size

    def _draw_stones(self, board):
        radius = self.tile_size * 0.45
        for row, line in enumerate(board.cells):
            for col, stone in enumerate(line):
                if stone == 0:
                    continue
                color = self.COLOR_BLACK_STONE if stone == BLACK else self.COLOR_WHITE_STONE
                self._pygame.draw.circle(self.screen, color, self.cell_center(row, col), radius)

    def _draw_marker(self, cell, color, scale):
        if not cell:
            return
        self._pygame.draw.circle(self.screen, color, self.cell_center(*cell), self.tile_size * scale)

    def _status_text(self, session):
        if self.message:
            return self.message
        if session.status == ENDED:
            return outcome_text(session.outcome) + "!"
        if session.status != IN_PROGRESS:
            return "Click to start"
        if session.paused:
            return "Paused - click the board to take over"
        if session.is_computer_turn:
            return f"{color_name(session.active_player)} AI thinking..."
        return f"{color_name(session.active_player)} to move"

    def _draw_info_panel(self, session):
        panel_rect = self._pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_GRID, panel_rect)
        font = self.font_large if session.status == ENDED else self.font_medium
        self._draw_text(self._status_text(session), font, self.COLOR_TEXT, (self.window_size / 2, self.PANEL_HEIGHT / 2))

    def render(self, session):
        self.screen.fill(self.COLOR_BACKGROUND)
        self.screen.blit(self.board_surface, self.board_origin)

        self._draw_stones(session.board)
        last = session.history[-1] if session.history else None
        self._draw_marker((last.row, last.col) if last else None, self.COLOR_RED, 0.15)
        self._draw_marker(self.hint, self.COLOR_HINT, 0.2)
        self._draw_info_panel(session)

        self._pygame.display.flip()

    def coords_from_mouse(self, pos):
        """Map a pixel position to (row, col), or None when off the grid."""
        mx, my = pos
        gx, gy = self._grid_origin()
        half = self.tile_size / 2
        span = self.tile_size * (self.board_size - 1)

        if not (gx - half <= mx <= gx + span + half and gy - half <= my <= gy + span + half):
            return None

        col = int(round((mx - gx) / self.tile_size))
        row = int(round((my - gy) / self.tile_size))

        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return row, col
        return None

    def handle_click(self, session, worker, pos):
        if session.status != IN_PROGRESS:
            session.new_game()
            return
        if session.paused:
            worker.cancel()
            session.take_over()
            return
        cell = self.coords_from_mouse(pos)
        if cell is None:
            return
        try:
            session.apply_human_move(*cell)
            worker.cancel()
            self.hint = None
        except GomokuError as exc:
            LOGGER.debug("Rejected click at %s: %s", cell, exc)

    def handle_key(self, session, worker, key):
        pygame = self._pygame
        if key == pygame.K_u:
            worker.cancel()
            session.undo()
        elif key in (pygame.K_h, pygame.K_a) and session.status == IN_PROGRESS and not session.is_computer_turn:
            # h shows the suggested move, a plays it
            self.hint = None
            worker.cancel()
            worker.start(hint=key == pygame.K_h)
        elif key == pygame.K_SPACE and session.mode == AI_VS_AI:
            if session.paused:
                session.resume()
            else:
                worker.cancel()
                session.pause()
        elif key == pygame.K_n:
            worker.cancel()
            session.new_game()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_MINUS):
            try:
                worker.cancel()
                session.resize(-1 if key == pygame.K_MINUS else 1)
                self.set_board_size(session.size)
            except GomokuError as exc:
                self.message = str(exc)

    def update_search(self, session, worker):
        """Collect a finished search and start the computer's search when it is due."""
        if worker.busy:
            worker.poll()
            if worker.error is not None:
                self.message = "Search failed, see log"
        elif session.is_computer_turn and not session.paused and worker.error is None:
            worker.start()
        self.hint = worker.hint

    def run(self, session, delay=0.0):
        """Event loop: human input, computer turns on a worker thread, redraws."""
        pygame = self._pygame
        worker = SearchWorker(session, delay=delay)
        clock = pygame.time.Clock()
        try:
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return session.last_outcome
                    if event.type == pygame.MOUSEBUTTONDOWN:
                        self.message = ""
                        self.handle_click(session, worker, event.pos)
                    elif event.type == pygame.KEYDOWN:
                        self.message = ""
                        self.handle_key(session, worker, event.key)

                self.update_search(session, worker)
                self.render(session)
                clock.tick(30)
        finally:
            worker.cancel()
            self.close()

    def close(self):
        self._pygame.quit()
