"""
Configuration and default paths.
"""

import math
from pathlib import Path

from avengement_solver.selection.rollout import MAX_ROLLOUT_ACTIONS


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

PACKAGE_DIR = Path(__file__).parent.parent  # src/avengement_solver/
DATA_DIR = PACKAGE_DIR / "data"
CACHE_DIR = DATA_DIR / "cache"
DEFAULT_CACHE_PATH = CACHE_DIR / "mcts_cache.db"


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_ITERATIONS = 10_000
DEFAULT_EXPLORATION = math.sqrt(2)
REPORT_EVERY = 1_000
SAVE_EVERY = 10_000


class Config:
    """Search configuration with sensible defaults."""

    def __init__(
        self,
        iterations: int = DEFAULT_ITERATIONS,
        exploration: float = DEFAULT_EXPLORATION,
        report_every: int = REPORT_EVERY,
        save_every: int = SAVE_EVERY,
        max_rollout_actions: int = MAX_ROLLOUT_ACTIONS,
    ):
        for name, value in (
            ("iterations", iterations),
            ("report_every", report_every),
            ("save_every", save_every),
            ("max_rollout_actions", max_rollout_actions),
        ):
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if exploration < 0:
            raise ValueError(f"exploration must be non-negative, got {exploration}")

        self.iterations = iterations
        self.exploration = exploration
        self.report_every = report_every
        self.save_every = save_every
        self.max_rollout_actions = max_rollout_actions

    def __repr__(self) -> str:
        return (
            f"Config(iterations={self.iterations}, exploration={self.exploration:.4f}, "
            f"report_every={self.report_every}, save_every={self.save_every}, "
            f"max_rollout_actions={self.max_rollout_actions})"
        )


# Default configuration
DEFAULT_CONFIG = Config()
