"""
GameState - value-type snapshot of an Avengement Lite position.

Optimized for fast copying: the board is a contiguous int8 array and
player records are small slotted dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional

import numpy as np

from avengement_solver.core.types import BOARD_SIZE, MAX_AP, STARTING_HP, Position

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "1", 2: "2"}


@dataclass(slots=True)
class PlayerStats:
    hp: int
    max_hp: int
    ap: int
    position: Position
    stunned: bool = False
    stunned_this_turn: bool = False

    def clamp(self) -> None:
        """Keep hp in [0, max_hp] and ap in [0, MAX_AP]."""
        self.hp = max(0, min(self.max_hp, self.hp))
        self.ap = max(0, min(MAX_AP, self.ap))


class GameState:
    """
    Lightweight game state container.

    Uses int8 board:
        0 = empty
        1 = player 1
        2 = player 2
    """
    __slots__ = ('board', 'players', 'current_player', 'game_over', 'turn_start_ap', 'last_position')

    def __init__(
        self,
        board: np.ndarray,
        players: Dict[int, PlayerStats],
        current_player: int = 1,
        game_over: bool = False,
        turn_start_ap: int = 0,
        last_position: Optional[Position] = None,
    ):
        self.board = board
        self.players = players
        self.current_player = current_player
        self.game_over = game_over
        self.turn_start_ap = turn_start_ap
        self.last_position = last_position

    def copy(self) -> "GameState":
        """Independent deep copy; nothing is shared with the original."""
        return GameState(
            self.board.copy(),
            {pid: replace(p) for pid, p in self.players.items()},
            self.current_player,
            self.game_over,
            self.turn_start_ap,
            self.last_position,
        )

    @property
    def mover(self) -> PlayerStats:
        return self.players[self.current_player]

    @property
    def enemy(self) -> PlayerStats:
        return self.players[3 - self.current_player]

    def is_consistent(self) -> bool:
        """Every occupant on the board matches exactly one recorded position."""
        occupied = {(int(r), int(c)) for r, c in np.argwhere(self.board != 0)}
        expected = {p.position for p in self.players.values()}
        if occupied != expected or len(expected) != len(self.players):
            return False
        return all(self.board[p.position] == pid for pid, p in self.players.items())

    def state_string(self) -> str:
        lines = ["╭───┬───┬───╮"]
        for i in range(BOARD_SIZE):
            row = "│ " + " │ ".join(CELL_STRINGS[int(self.board[i, j])] for j in range(BOARD_SIZE)) + " │"
            lines.append(row)
            if i < BOARD_SIZE - 1:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        for pid, p in self.players.items():
            flag = " stunned" if p.stunned else ""
            marker = "*" if pid == self.current_player else " "
            lines.append(f"{marker}P{pid}: HP {p.hp}/{p.max_hp}  AP {p.ap}{flag}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GameState(current_player={self.current_player}, game_over={self.game_over}, "
            f"p1={self.players[1]!r}, p2={self.players[2]!r})"
        )


def initial_state() -> GameState:
    """Fixed starting position: P1 at (0,1), P2 at (2,1), both 7 HP / 0 AP, P1 to move."""
    board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    players = {
        1: PlayerStats(hp=STARTING_HP, max_hp=STARTING_HP, ap=0, position=(0, 1)),
        2: PlayerStats(hp=STARTING_HP, max_hp=STARTING_HP, ap=0, position=(2, 1)),
    }
    for pid, p in players.items():
        board[p.position] = pid
    return GameState(board, players, current_player=1, turn_start_ap=0)
