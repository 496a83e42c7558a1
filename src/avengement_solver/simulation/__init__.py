"""
Simulation module - search driver and batch driver.

Provides the MCTS-Solver loop for a single run and the outer loop that
repeats runs against the persisted transposition table.
"""

from avengement_solver.simulation.runner import MCTSSolver
from avengement_solver.simulation.batch import solve_until_proven

__all__ = [
    "MCTSSolver",
    "solve_until_proven",
]
