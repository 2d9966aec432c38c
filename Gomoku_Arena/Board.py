"""Board state container, placement rules, and line-counting primitives."""

from contextlib import contextmanager

from .engine.errors import BoardSizeError, CellOccupiedError, OutOfBoundsError

BLACK = -1
EMPTY = 0
WHITE = 1

MIN_SIZE = 5
MAX_SIZE = 25

STONE_CHARS = {BLACK: "X", EMPTY: ".", WHITE: "O"}


def color_name(player):
    return "Black" if player == BLACK else "White"


class Board:
    def __init__(self, size=15):
        if not isinstance(size, int) or not MIN_SIZE <= size <= MAX_SIZE:
            raise BoardSizeError(f"board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size!r}")
        # Store cells as -1 (black), 0 (empty), 1 (white); indexed cells[row][col]
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]

    @property
    def stone_count(self):
        return sum(1 for row in self.cells for v in row if v != EMPTY)

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def empty_cells(self):
        return [(r, c) for r in range(self.size) for c in range(self.size) if self.cells[r][c] == EMPTY]

    def place(self, row, col, player):
        """Place a stone; raise if out of bounds or occupied."""
        if player not in (BLACK, WHITE):
            raise ValueError("player must be -1 (black) or 1 (white)")
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(f"move ({row}, {col}) out of bounds for {self.size}x{self.size} board")
        if self.cells[row][col] != EMPTY:
            raise CellOccupiedError(f"cell ({row}, {col}) already occupied")
        self.cells[row][col] = player

    def clear(self, row, col):
        self.cells[row][col] = EMPTY

    def is_full(self):
        return all(v != EMPTY for row in self.cells for v in row)

    @contextmanager
    def trial(self, row, col, player):
        """Temporarily place a stone; it is always removed when the block exits."""
        self.cells[row][col] = player
        try:
            yield self
        finally:
            self.cells[row][col] = EMPTY

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        return new_board

    def count_dir(self, row, col, d_row, d_col, player):
        """Count contiguous stones of player from (row, col) (exclusive) in (d_row, d_col)."""
        count = 0
        r, c = row + d_row, col + d_col
        while self.in_bounds(r, c) and self.cells[r][c] == player:
            count += 1
            r += d_row
            c += d_col
        return count

    def line_length(self, row, col, d_row, d_col, player):
        """Length of the run through (row, col) along one axis, origin counted once."""
        forward = self.count_dir(row, col, d_row, d_col, player)
        backward = self.count_dir(row, col, -d_row, -d_col, player)
        return 1 + forward + backward

    def is_open_end(self, row, col, d_row, d_col, player):
        """True if the cell just past the run of player starting at (row, col) is empty."""
        r, c = row, col
        while self.in_bounds(r, c) and self.cells[r][c] == player:
            r += d_row
            c += d_col
        return self.in_bounds(r, c) and self.cells[r][c] == EMPTY

    def render(self):
        header = "   " + " ".join(f"{c % 10}" for c in range(self.size))
        rows = [header]
        for r, line in enumerate(self.cells):
            rows.append(f"{r:2d} " + " ".join(STONE_CHARS[v] for v in line))
        return "\n".join(rows)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __repr__(self):
        return f"Board(size={self.size}, stones={self.stone_count})"
