"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the solver:
- Game constants (board size, AP cap, damage values)
- Move: tagged action variant produced by the rule engine
- ProofStatus / TranspositionRecord: exact results cached across runs
- SearchResult / BatchResult: summaries returned by the drivers
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Tuple


# ─── Game constants ───────────────────────────────────────────────────────────

BOARD_SIZE = 3
MAX_AP = 6
STARTING_HP = 7
STRIKE_DAMAGE = 2
STRIKE_COST = 1
MOVE_COST = 1
LUNGING_COST = 3
LUNGING_COMBOS = 3

# Instant-win arithmetic: four strikes (or lunging + strike) deal >= 8 damage
INSTANT_WIN_AP = 4
INSTANT_WIN_HP = 7

# Rollout draw marker (no winner within the action ceiling)
DRAW = 0

Position = Tuple[int, int]


def opponent(player: int) -> int:
    """Return the other player's id (1 <-> 2)."""
    return 3 - player


# ─── Moves ────────────────────────────────────────────────────────────────────

class MoveKind(Enum):
    REST = auto()
    MOVE = auto()
    STRIKE = auto()
    LUNGING = auto()
    END_TURN = auto()


@dataclass(frozen=True)
class Move:
    """
    A single action. MOVE and STRIKE carry a target cell.

    The description is for reporting only and does not take part in equality.
    """
    kind: MoveKind
    target: Optional[Position] = None
    description: str = field(default="", compare=False)

    @classmethod
    def rest(cls) -> "Move":
        return cls(MoveKind.REST, description="Rest (+1 HP, +1 AP)")

    @classmethod
    def move_to(cls, row: int, col: int) -> "Move":
        return cls(MoveKind.MOVE, (row, col), f"Move to ({row},{col})")

    @classmethod
    def strike_at(cls, row: int, col: int) -> "Move":
        return cls(MoveKind.STRIKE, (row, col), f"Strike at ({row},{col})")

    @classmethod
    def lunging(cls) -> "Move":
        return cls(MoveKind.LUNGING, description="Lunging Strikes (3 AP, then stunned)")

    @classmethod
    def end_turn(cls, stunned: bool = False) -> "Move":
        return cls(MoveKind.END_TURN, description="End Turn (Stunned)" if stunned else "End Turn")

    def __str__(self) -> str:
        return self.description


# ─── Proofs ───────────────────────────────────────────────────────────────────

class ProofStatus(Enum):
    """Exact outcome of a position for `proof_player`."""
    PROVEN_WIN = "proven-win"
    PROVEN_LOSS = "proven-loss"


@dataclass(frozen=True)
class TranspositionRecord:
    """Cached proof for a canonical state key."""
    proof_status: ProofStatus
    proof_player: int

    @property
    def winner(self) -> int:
        """Player who wins under this proof."""
        if self.proof_status is ProofStatus.PROVEN_WIN:
            return self.proof_player
        return opponent(self.proof_player)


# ─── Results ──────────────────────────────────────────────────────────────────

@dataclass
class MoveSummary:
    """Statistics for one root child, used in reports."""
    description: str
    win_rate: float
    visits: int
    proof_status: Optional[ProofStatus] = None
    proof_player: Optional[int] = None


@dataclass
class SearchResult:
    """Summary of one Search Driver run."""
    win_rate: float
    total_simulations: int
    player1_wins: int
    player2_wins: int
    best_move: Optional[str]
    is_proven: bool
    proof_status: Optional[ProofStatus]
    proof_player: Optional[int]
    proven_nodes: int
    cache_hits: int = 0
    cache_misses: int = 0
    cache_size: int = 0
    ranked_moves: List[MoveSummary] = field(default_factory=list)

    @property
    def hit_rate(self) -> float:
        lookups = self.cache_hits + self.cache_misses
        return self.cache_hits / lookups if lookups else 0.0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["proof_status"] = self.proof_status.value if self.proof_status else None
        for summary in data["ranked_moves"]:
            status = summary["proof_status"]
            summary["proof_status"] = status.value if status else None
        return data


@dataclass
class BatchResult:
    """Outcome of repeated Search Driver runs."""
    status: str  # "proven" or "unresolved"
    runs: int
    total_iterations: int
    elapsed_seconds: float
    result: Optional[SearchResult] = None

    @property
    def is_proven(self) -> bool:
        return self.status == "proven"
