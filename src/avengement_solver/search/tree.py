"""
Arena-backed search tree.

Nodes live in a flat list and refer to each other by integer handle:
each node stores its parent handle and the handles of the children it
owns. The whole arena is discarded at the end of a search run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from avengement_solver.core.types import Move, ProofStatus
from avengement_solver.games import avengement
from avengement_solver.games.game_state import GameState


@dataclass(slots=True)
class Node:
    """
    One position in the tree.

    `wins` counts outcomes won by player 1, whichever player moves here.
    `untried_moves` is None until generated; afterwards it is the list of
    moves not yet expanded (possibly empty).
    """
    state: GameState
    parent: Optional[int] = None
    move_description: Optional[str] = None
    children: List[int] = field(default_factory=list)
    visits: int = 0
    wins: int = 0
    untried_moves: Optional[List[Move]] = None
    proof_status: Optional[ProofStatus] = None
    proof_player: Optional[int] = None

    def is_proven_win_for(self, player: int) -> bool:
        return self.proof_status is ProofStatus.PROVEN_WIN and self.proof_player == player

    def is_proven_loss_for(self, player: int) -> bool:
        return self.proof_status is ProofStatus.PROVEN_LOSS and self.proof_player == player


class SearchTree:
    """Owns every node of one search run."""

    ROOT = 0

    def __init__(self, root_state: GameState):
        self._nodes: List[Node] = [Node(root_state.copy())]

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    def node(self, handle: int) -> Node:
        return self._nodes[handle]

    @property
    def root(self) -> Node:
        return self._nodes[self.ROOT]

    def add_child(self, parent: int, state: GameState, move_description: Optional[str] = None) -> int:
        """Attach a new node under `parent` and return its handle."""
        handle = len(self._nodes)
        self._nodes.append(Node(state.copy(), parent=parent, move_description=move_description))
        self._nodes[parent].children.append(handle)
        return handle

    def parent_of(self, handle: int) -> Optional[int]:
        return self._nodes[handle].parent

    def children_of(self, handle: int) -> List[Node]:
        return [self._nodes[h] for h in self._nodes[handle].children]

    def path_to_root(self, handle: int) -> Iterator[int]:
        """Yield `handle` and each of its ancestors, ending at the root."""
        current: Optional[int] = handle
        while current is not None:
            yield current
            current = self._nodes[current].parent

    def __len__(self) -> int:
        return len(self._nodes)

    # -------------------------------------------------------------------------
    # Node queries
    # -------------------------------------------------------------------------

    def is_fully_expanded(self, handle: int) -> bool:
        untried = self._nodes[handle].untried_moves
        return untried is not None and len(untried) == 0

    def is_terminal(self, handle: int) -> bool:
        return avengement.is_terminal(self._nodes[handle].state)

    def is_proven(self, handle: int) -> bool:
        return self._nodes[handle].proof_status is not None

    def winner(self, handle: int) -> Optional[int]:
        return avengement.winner(self._nodes[handle].state)

    @staticmethod
    def win_rate(node: Node) -> float:
        """Player-1 win rate; 0.0 for an unvisited node."""
        return node.wins / node.visits if node.visits else 0.0

    # -------------------------------------------------------------------------
    # Updates
    # -------------------------------------------------------------------------

    def set_proof(self, handle: int, status: ProofStatus, player: int) -> None:
        node = self._nodes[handle]
        node.proof_status = status
        node.proof_player = player

    def backpropagate(self, handle: int, winner: int) -> None:
        """Add one visit along the path to the root; count player-1 wins."""
        for h in self.path_to_root(handle):
            node = self._nodes[h]
            node.visits += 1
            if winner == 1:
                node.wins += 1
