"""
State hashing for the transposition table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from avengement_solver.games.game_state import GameState


def hash_state(state: "GameState") -> str:
    """
    Canonical key for a state.

    Format: currentPlayer|p1hp|p1ap|p1row|p1col|p1stunned|p2hp|p2ap|p2row|p2col|p2stunned

    last_position and turn_start_ap are left out on purpose: positions that
    differ only in turn-local bookkeeping share one entry.
    """
    parts = [str(state.current_player)]
    for pid in (1, 2):
        p = state.players[pid]
        row, col = p.position
        parts.extend((str(p.hp), str(p.ap), str(row), str(col), "1" if p.stunned else "0"))
    return "|".join(parts)
