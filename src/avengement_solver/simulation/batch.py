"""
Batch driver: repeat independent search runs until the root is proven.

Each run starts from a fresh tree but reloads the persisted
transposition table, so proofs accumulate across runs.
"""

from __future__ import annotations

import logging
import random
import time
from pathlib import Path
from typing import Optional

from avengement_solver.core.types import BatchResult, ProofStatus, SearchResult
from avengement_solver.games.game_state import GameState, initial_state
from avengement_solver.simulation.runner import MCTSSolver
from avengement_solver.utils.config import Config, DEFAULT_CACHE_PATH

logger = logging.getLogger(__name__)


def solve_until_proven(
    iterations_per_run: int,
    max_runs: int = 1,
    cache_path: Optional[str | Path] = DEFAULT_CACHE_PATH,
    config: Optional[Config] = None,
    initial: Optional[GameState] = None,
    rng: Optional[random.Random] = None,
) -> BatchResult:
    """
    Run up to `max_runs` searches of `iterations_per_run` iterations each.

    Args:
        iterations_per_run: Iteration budget of each run.
        max_runs: Maximum number of runs.
        cache_path: Persisted transposition table shared by the runs.
        config: Base configuration; its iteration budget is replaced by
                `iterations_per_run`.
        initial: Starting position (default: the fixed opening).
        rng: Random source passed to every run.

    Returns:
        BatchResult with status "proven" as soon as a run proves the root,
        otherwise "unresolved" with the last run's result.
    """
    if max_runs <= 0:
        raise ValueError(f"max_runs must be positive, got {max_runs}")

    base = config or Config()
    run_config = Config(
        iterations=iterations_per_run,
        exploration=base.exploration,
        report_every=base.report_every,
        save_every=base.save_every,
        max_rollout_actions=base.max_rollout_actions,
    )
    start_state = initial if initial is not None else initial_state()

    logger.info(
        "Starting continuous solver: %s iterations per batch, at most %d batches",
        f"{iterations_per_run:,}", max_runs,
    )

    start = time.perf_counter()
    total_iterations = 0
    result: Optional[SearchResult] = None

    for run in range(1, max_runs + 1):
        logger.info("--- Batch %d ---", run)
        batch_start = time.perf_counter()

        solver = MCTSSolver.from_cache(run_config, cache_path, rng=rng)
        result = solver.search(start_state)

        total_iterations += result.total_simulations
        now = time.perf_counter()
        elapsed = now - start
        rate = total_iterations / elapsed if elapsed > 0 else 0.0
        logger.info(
            "Batch completed in %.1fs | Total: %s iterations in %.1fs (%.0f/sec)",
            now - batch_start, f"{total_iterations:,}", elapsed, rate,
        )

        if result.is_proven:
            winner = _proven_winner(result)
            logger.info(
                "Game solved after %d batches: player %s wins with perfect play (%d proven nodes)",
                run, winner, result.proven_nodes,
            )
            return BatchResult("proven", run, total_iterations, elapsed, result)

        logger.info("Progress: %d proven nodes, %.4f win rate", result.proven_nodes, result.win_rate)

    elapsed = time.perf_counter() - start
    logger.warning("Reached maximum %d batches without proof", max_runs)
    return BatchResult("unresolved", max_runs, total_iterations, elapsed, result)


def _proven_winner(result: SearchResult) -> Optional[int]:
    if result.proof_status is ProofStatus.PROVEN_WIN:
        return result.proof_player
    if result.proof_status is ProofStatus.PROVEN_LOSS:
        return 3 - result.proof_player
    return None
