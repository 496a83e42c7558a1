"""
Memory module - transposition table of proven positions.

The table is created empty or loaded from disk and handed to each search
run explicitly; there is no module-level cache.
"""

from __future__ import annotations

from pathlib import Path

from avengement_solver.memory.transposition_table import TranspositionTable


def open_table(path: str | Path) -> TranspositionTable:
    """Load the table persisted at `path` (empty if missing or unreadable)."""
    return TranspositionTable.load(path)


__all__ = [
    "TranspositionTable",
    "open_table",
]
