"""
Core module - fundamental types, constants and hashing.

This module provides the building blocks used throughout the solver.
"""

from avengement_solver.core.types import (
    BOARD_SIZE,
    MAX_AP,
    STARTING_HP,
    DRAW,
    Move,
    MoveKind,
    ProofStatus,
    TranspositionRecord,
    MoveSummary,
    SearchResult,
    BatchResult,
    opponent,
)
from avengement_solver.core.hashing import hash_state

__all__ = [
    # Constants
    "BOARD_SIZE",
    "MAX_AP",
    "STARTING_HP",
    "DRAW",
    # Types
    "Move",
    "MoveKind",
    "ProofStatus",
    "TranspositionRecord",
    "MoveSummary",
    "SearchResult",
    "BatchResult",
    # Functions
    "opponent",
    "hash_state",
]
