"""
Shared test fixtures for avengement_solver tests.

Design principles:
- Positions are built explicitly so each test shows the board it uses
- Seeded random sources keep lunging and rollouts reproducible
- Minimal, focused fixtures
"""

import random
import tempfile
from pathlib import Path
from typing import Callable, Generator, Optional, Tuple

import numpy as np
import pytest

from avengement_solver.games.game_state import GameState, PlayerStats, initial_state
from avengement_solver.memory.transposition_table import TranspositionTable


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Temporary directory with cleanup."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def cache_path(temp_dir: Path) -> Path:
    """Cache file location that does not exist yet."""
    return temp_dir / "cache" / "mcts_cache.db"


# =============================================================================
# Random Fixtures
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


# =============================================================================
# State Fixtures
# =============================================================================

def build_state(
    p1: Tuple[int, int],
    p2: Tuple[int, int],
    *,
    p1_hp: int = 7,
    p2_hp: int = 7,
    p1_ap: int = 0,
    p2_ap: int = 0,
    current_player: int = 1,
    p1_stunned: bool = False,
    p2_stunned: bool = False,
    turn_start_ap: Optional[int] = None,
    last_position: Optional[Tuple[int, int]] = None,
) -> GameState:
    """Build a position with both fighters placed on the board."""
    board = np.zeros((3, 3), dtype=np.int8)
    board[p1] = 1
    board[p2] = 2
    players = {
        1: PlayerStats(hp=p1_hp, max_hp=7, ap=p1_ap, position=p1, stunned=p1_stunned),
        2: PlayerStats(hp=p2_hp, max_hp=7, ap=p2_ap, position=p2, stunned=p2_stunned),
    }
    if turn_start_ap is None:
        turn_start_ap = players[current_player].ap
    return GameState(
        board,
        players,
        current_player=current_player,
        turn_start_ap=turn_start_ap,
        last_position=last_position,
    )


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Factory for custom positions (see build_state)."""
    return build_state


@pytest.fixture
def opening() -> GameState:
    """The fixed initial position."""
    return initial_state()


@pytest.fixture
def adjacent_state() -> GameState:
    """P1 at (1,1) next to P2 at (2,1), P1 to move with 1 AP."""
    return build_state((1, 1), (2, 1), p1_ap=1)


# =============================================================================
# Table Fixtures
# =============================================================================

@pytest.fixture
def table() -> TranspositionTable:
    return TranspositionTable()
