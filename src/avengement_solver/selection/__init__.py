"""
Selection module - tree policy (UCT) and default policy (rollouts).

Tree policy:
    select_child()        UCB1 over a fully expanded node's children

Default policy:
    rollout()             Biased random playout to a winner or draw
    choose_rollout_move() Single biased move choice
"""

from avengement_solver.selection.uct import select_child, uct_score
from avengement_solver.selection.rollout import (
    MAX_ROLLOUT_ACTIONS,
    choose_rollout_move,
    rollout,
)

__all__ = [
    "select_child",
    "uct_score",
    "rollout",
    "choose_rollout_move",
    "MAX_ROLLOUT_ACTIONS",
]
