"""
Avengement Solver - perfect-play analysis of Avengement Lite.

Combines Monte Carlo Tree Search with backward-induction proofs and a
persistent transposition table to decide whether the opening position of
the 3x3 combat game is a forced win.

Quick Start:
    from avengement_solver import analyze_game, solve_until_proven

    result = analyze_game(iterations=100_000)
    print(result.win_rate, result.best_move, result.is_proven)

    batch = solve_until_proven(iterations_per_run=1_000_000, max_runs=10)

Modules:
    core       - Constants, moves, proof records, result types, state hashing
    games      - GameState and the rule engine
    memory     - Transposition table and its SQLite persistence
    search     - Arena search tree and proof propagation
    selection  - UCT tree policy and biased rollouts
    simulation - Search driver (MCTSSolver) and batch driver
"""

from avengement_solver.api import (
    analyze_game,
    solve_until_proven,
    describe_result,
    verdict,
)
from avengement_solver.core import ProofStatus, SearchResult, BatchResult
from avengement_solver.games import GameState, initial_state
from avengement_solver.memory import TranspositionTable
from avengement_solver.simulation import MCTSSolver

__version__ = "1.0.0"

__all__ = [
    # Main API
    "analyze_game",
    "solve_until_proven",
    "describe_result",
    "verdict",
    "MCTSSolver",
    "TranspositionTable",
    # Types
    "GameState",
    "initial_state",
    "ProofStatus",
    "SearchResult",
    "BatchResult",
]
