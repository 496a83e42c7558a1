"""
Command-line interface for the Avengement Lite solver.
"""

import argparse
import logging
import random
from typing import List, Optional

from avengement_solver.api import describe_result, solve_until_proven
from avengement_solver.utils.config import (
    Config,
    DEFAULT_CACHE_PATH,
    DEFAULT_EXPLORATION,
    DEFAULT_ITERATIONS,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Solve Avengement Lite with MCTS and proof propagation"
    )
    parser.add_argument(
        "--iterations", "-i",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"Iterations per batch (default: {DEFAULT_ITERATIONS})",
    )
    parser.add_argument(
        "--runs", "-r",
        type=int,
        default=1,
        help="Maximum number of batches (default: 1)",
    )
    parser.add_argument(
        "--cache", "-c",
        type=str,
        default=str(DEFAULT_CACHE_PATH),
        help=f"Transposition table file (default: {DEFAULT_CACHE_PATH})",
    )
    parser.add_argument(
        "--exploration",
        type=float,
        default=DEFAULT_EXPLORATION,
        help="UCT exploration constant (default: sqrt(2))",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible runs",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every proof as it is found",
    )
    args = parser.parse_args(argv)

    if args.iterations <= 0:
        parser.error("--iterations must be positive")
    if args.runs <= 0:
        parser.error("--runs must be positive")
    if args.exploration < 0:
        parser.error("--exploration must be non-negative")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    config = Config(iterations=args.iterations, exploration=args.exploration)

    batch = solve_until_proven(
        iterations_per_run=args.iterations,
        max_runs=args.runs,
        cache_path=args.cache,
        config=config,
        rng=rng,
    )

    print("\n=== MCTS-Solver Analysis Complete ===")
    print(
        f"Batches: {batch.runs} | Iterations: {batch.total_iterations:,} | "
        f"Time: {batch.elapsed_seconds:.1f}s | Status: {batch.status}"
    )
    if batch.result is not None:
        for line in describe_result(batch.result):
            print(line)

    return 0 if batch.is_proven else 1


if __name__ == "__main__":
    raise SystemExit(main())
