"""
Public API for solving Avengement Lite.

Usage:
    from avengement_solver import analyze_game, solve_until_proven

    result = analyze_game(iterations=100_000)
    batch = solve_until_proven(iterations_per_run=1_000_000, max_runs=5)
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import List, Optional

from avengement_solver.core.types import ProofStatus, SearchResult
from avengement_solver.games.game_state import GameState, initial_state
from avengement_solver.simulation import MCTSSolver, solve_until_proven
from avengement_solver.utils.config import Config, DEFAULT_CACHE_PATH

ADVANTAGE_THRESHOLD = 0.55


def analyze_game(
    iterations: int = 10_000,
    cache_path: Optional[str | Path] = DEFAULT_CACHE_PATH,
    config: Optional[Config] = None,
    initial: Optional[GameState] = None,
    rng: Optional[random.Random] = None,
) -> SearchResult:
    """
    Run one search from `initial` (default: the fixed opening).

    Parameters
    ----------
    iterations : int
        Iteration budget; overrides the budget in `config`.
    cache_path : path, optional
        Persisted transposition table to load and update. None keeps the
        table in memory for this call only.
    config : Config, optional
        Exploration constant and report/save cadence.
    initial : GameState, optional
        Position to analyse.
    rng : random.Random, optional
        Random source for rollouts and lunging.
    """
    base = config or Config()
    run_config = Config(
        iterations=iterations,
        exploration=base.exploration,
        report_every=base.report_every,
        save_every=base.save_every,
        max_rollout_actions=base.max_rollout_actions,
    )
    solver = MCTSSolver.from_cache(run_config, cache_path, rng=rng)
    return solver.search(initial if initial is not None else initial_state())


def describe_result(result: SearchResult) -> List[str]:
    """Human-readable verdict and best moves for a search result."""
    lines = [
        f"Total simulations: {result.total_simulations}",
        f"Total proven nodes: {result.proven_nodes}",
        f"Transposition table size: {result.cache_size}",
        f"Cache hit rate: {result.hit_rate * 100:.1f}% "
        f"({result.cache_hits} hits, {result.cache_misses} misses)",
    ]
    if result.total_simulations:
        lines.append(f"Player 1 wins: {result.player1_wins} ({result.win_rate * 100:.2f}%)")
        lines.append(f"Player 2 wins: {result.player2_wins} ({(1 - result.win_rate) * 100:.2f}%)")

    if result.ranked_moves:
        lines.append("")
        lines.append("Best moves for Player 1:")
        for summary in result.ranked_moves:
            proof = f" [{summary.proof_status.value.upper()}]" if summary.proof_status else ""
            lines.append(
                f"  {summary.description}: {summary.win_rate * 100:.2f}% win rate "
                f"({summary.visits} visits){proof}"
            )

    lines.append("")
    lines.append(verdict(result))
    return lines


def verdict(result: SearchResult) -> str:
    """One-line conclusion: the proof if there is one, else the leaning."""
    if result.is_proven:
        if result.proof_status is ProofStatus.PROVEN_WIN:
            return f"PROVEN: Player {result.proof_player} wins with optimal play!"
        return f"PROVEN: Player {result.proof_player} loses with optimal play!"

    rate = result.win_rate
    if rate > ADVANTAGE_THRESHOLD:
        return f"Player 1 has advantage ({rate * 100:.2f}% win rate) - NOT YET PROVEN"
    if rate < 1 - ADVANTAGE_THRESHOLD:
        return f"Player 2 has advantage ({(1 - rate) * 100:.2f}% win rate) - NOT YET PROVEN"
    return f"Game appears balanced ({rate * 100:.2f}% / {(1 - rate) * 100:.2f}%) - NOT YET PROVEN"


__all__ = [
    "analyze_game",
    "solve_until_proven",
    "describe_result",
    "verdict",
]
