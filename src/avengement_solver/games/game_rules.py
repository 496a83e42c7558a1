"""
Board geometry helpers for the 3x3 grid.

Movement covers 1-2 squares along a rank, file, or diagonal; adjacency
is the 8-neighbourhood.
"""

from __future__ import annotations

from typing import List

import numpy as np

from avengement_solver.core.types import Position


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def is_valid_move_distance(src: Position, dst: Position) -> bool:
    """1-2 squares in a straight line (orthogonal or diagonal)."""
    row_diff = abs(src[0] - dst[0])
    col_diff = abs(src[1] - dst[1])
    distance = max(row_diff, col_diff)

    if distance < 1 or distance > 2:
        return False
    if row_diff != 0 and col_diff != 0 and row_diff != col_diff:
        return False
    return True


def reachable_cells(board: np.ndarray, src: Position) -> List[Position]:
    """Empty cells a piece at `src` can move to, in row-major order."""
    rows, cols = board.shape
    return [
        (r, c)
        for r in range(rows)
        for c in range(cols)
        if board[r, c] == 0 and is_valid_move_distance(src, (r, c))
    ]


def adjacent_cells_with(board: np.ndarray, pos: Position, value: int) -> List[Position]:
    """Cells in the 8-neighbourhood of `pos` holding `value`."""
    found = []
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            r, c = pos[0] + dr, pos[1] + dc
            if in_bounds(board, r, c) and board[r, c] == value:
                found.append((r, c))
    return found
