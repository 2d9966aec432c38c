"""Candidate move generation (proximity filter, heuristic ordering, opening book)."""

from . import heuristic
from ..Board import BLACK, EMPTY, WHITE

NEIGHBOR_RADIUS = 2
OPENING_MAX_STONES = 2

# Around the centre, clockwise starting from the cell above it
CENTER_RING = (
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
)


def neighborhood(board, radius=NEIGHBOR_RADIUS):
    """Empty cells within Chebyshev radius of at least one stone."""
    size = board.size
    cells = board.cells
    found = set()
    for row in range(size):
        for col in range(size):
            if cells[row][col] == EMPTY:
                continue
            for r in range(max(0, row - radius), min(size, row + radius + 1)):
                for c in range(max(0, col - radius), min(size, col + radius + 1)):
                    if cells[r][c] == EMPTY:
                        found.add((r, c))
    return found


def generate_candidates(board):
    """
    Empty cells near existing stones, best first.
    - Score = placement score for White + placement score for Black at the cell.
    - Equal scores keep row-major scan order.
    - If no cell qualifies (e.g. empty board): every empty cell, row-major.
    """
    near = neighborhood(board)
    if not near:
        return board.empty_cells()

    scored = []
    for row, col in near:
        score = heuristic.placement_score(board, row, col, WHITE) + heuristic.placement_score(board, row, col, BLACK)
        scored.append((-score, row, col))
    scored.sort()
    return [(row, col) for _, row, col in scored]


def opening_move(board):
    """Centre of the board, else the first free cell around it; None if all are taken."""
    center = board.size // 2
    if board.is_empty(center, center):
        return (center, center)
    for d_row, d_col in CENTER_RING:
        r, c = center + d_row, center + d_col
        if board.is_empty(r, c):
            return (r, c)
    return None


def in_opening(board):
    return board.stone_count <= OPENING_MAX_STONES
