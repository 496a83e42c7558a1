"""
Biased random playouts.

The policy leans aggressive so that playouts end in a decision rather
than drifting: strikes are taken most of the time, lunging sometimes,
and turns are handed over once AP runs dry.
"""

from __future__ import annotations

import random
from typing import List, Optional

from avengement_solver.core.types import DRAW, Move, MoveKind
from avengement_solver.games.avengement import apply_move, legal_moves
from avengement_solver.games.game_state import GameState

MAX_ROLLOUT_ACTIONS = 500

STRIKE_PROB = 0.7
LUNGING_PROB = 0.3
LUNGING_MIN_AP = 4
LOW_AP_END_TURN_PROB = 0.6
ACTION_PROB = 0.7


def choose_rollout_move(moves: List[Move], state: GameState, rng=random) -> Move:
    """Pick a move from `moves` with an aggressive bias."""
    player = state.mover

    strikes = [m for m in moves if m.kind is MoveKind.STRIKE]
    if strikes and rng.random() < STRIKE_PROB:
        return rng.choice(strikes)

    lunging = [m for m in moves if m.kind is MoveKind.LUNGING]
    if lunging and player.ap >= LUNGING_MIN_AP and rng.random() < LUNGING_PROB:
        return lunging[0]

    end_turns = [m for m in moves if m.kind is MoveKind.END_TURN]
    if player.ap == 0 or (player.ap == 1 and not strikes and rng.random() < LOW_AP_END_TURN_PROB):
        if end_turns:
            return end_turns[0]

    actions = [m for m in moves if m.kind is not MoveKind.END_TURN]
    if actions and rng.random() < ACTION_PROB:
        return rng.choice(actions)

    return rng.choice(moves)


def rollout(
    state: GameState,
    rng: Optional[random.Random] = None,
    max_actions: int = MAX_ROLLOUT_ACTIONS,
) -> int:
    """
    Play `state` out with the biased policy.

    Returns:
        The winning player id, or DRAW (0) if `max_actions` is reached.
    """
    rng = rng or random
    sim_state = state.copy()

    for _ in range(max_actions):
        if sim_state.game_over:
            break
        moves = legal_moves(sim_state)
        move = choose_rollout_move(moves, sim_state, rng)
        sim_state = apply_move(sim_state, move, validated=True, rng=rng)

        if sim_state.players[1].hp <= 0:
            return 2
        if sim_state.players[2].hp <= 0:
            return 1
    else:
        return DRAW

    # Started from a finished position
    return 1 if sim_state.players[1].hp > sim_state.players[2].hp else 2
