"""
Games module - Avengement Lite state model and rule engine.
"""

from avengement_solver.games.game_state import GameState, PlayerStats, initial_state
from avengement_solver.games.game_rules import (
    in_bounds,
    is_valid_move_distance,
    reachable_cells,
    adjacent_cells_with,
)
from avengement_solver.games.avengement import (
    legal_moves,
    apply_move,
    end_turn,
    execute_lunging,
    has_instant_win,
    is_terminal,
    winner,
)

__all__ = [
    "GameState",
    "PlayerStats",
    "initial_state",
    "in_bounds",
    "is_valid_move_distance",
    "reachable_cells",
    "adjacent_cells_with",
    "legal_moves",
    "apply_move",
    "end_turn",
    "execute_lunging",
    "has_instant_win",
    "is_terminal",
    "winner",
]
