"""
MCTS-Solver search driver.

One run builds a fresh tree from the given position and iterates

    selection → transposition check → instant-win check → expansion
    → terminal check → rollout → backpropagation → proof propagation

until the iteration budget is spent or the root is proven. Proofs found
along the way go into the injected TranspositionTable, which is saved
periodically and once more when the run ends.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional

from avengement_solver.core.hashing import hash_state
from avengement_solver.core.types import (
    MoveSummary,
    ProofStatus,
    SearchResult,
    TranspositionRecord,
)
from avengement_solver.games.avengement import apply_move, has_instant_win, legal_moves
from avengement_solver.games.game_state import GameState
from avengement_solver.memory.transposition_table import TranspositionTable
from avengement_solver.search.proof import propagate_proofs
from avengement_solver.search.tree import Node, SearchTree
from avengement_solver.selection.rollout import rollout
from avengement_solver.selection.uct import select_child
from avengement_solver.utils.config import Config, DEFAULT_CONFIG

logger = logging.getLogger(__name__)

TOP_MOVES = 5


class MCTSSolver:
    """
    Monte Carlo Tree Search with proof propagation and a shared
    transposition table.

    Args:
        config: Iteration budget, exploration constant, report/save cadence.
        table: Proof cache shared across runs. A new empty table if omitted.
        cache_path: Where to persist `table`. None disables persistence.
        rng: Random source for rollouts and lunging (default: module random).
    """

    def __init__(
        self,
        config: Config = DEFAULT_CONFIG,
        table: Optional[TranspositionTable] = None,
        cache_path: Optional[str | Path] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.table = table if table is not None else TranspositionTable()
        self.cache_path = Path(cache_path) if cache_path is not None else None
        self.rng = rng or random

        self.proven_wins = 0
        self.proven_losses = 0
        self.iterations_run = 0
        self.tree: Optional[SearchTree] = None

    @classmethod
    def from_cache(
        cls,
        config: Config = DEFAULT_CONFIG,
        cache_path: Optional[str | Path] = None,
        rng: Optional[random.Random] = None,
    ) -> "MCTSSolver":
        """Create a solver around the table persisted at `cache_path`."""
        table = TranspositionTable.load(cache_path) if cache_path is not None else TranspositionTable()
        return cls(config, table, cache_path=cache_path, rng=rng)

    # -------------------------------------------------------------------------
    # Main loop
    # -------------------------------------------------------------------------

    def search(self, initial_state: GameState) -> SearchResult:
        """Run one search from `initial_state` and summarise the root."""
        tree = SearchTree(initial_state)
        self.tree = tree
        root = SearchTree.ROOT

        cached_root = self.table.get(hash_state(initial_state))
        if cached_root is not None:
            logger.info(
                "Root already proven in cache: %s for player %d",
                cached_root.proof_status.value, cached_root.proof_player,
            )
            tree.set_proof(root, cached_root.proof_status, cached_root.proof_player)
            return self.analyze_results()

        logger.info(
            "Starting MCTS-Solver search: %d iterations, P1 HP=%d, P2 HP=%d",
            self.config.iterations, initial_state.players[1].hp, initial_state.players[2].hp,
        )

        for i in range(self.config.iterations):
            if tree.is_proven(root):
                logger.info(
                    "Root proven at iteration %d: %s for player %d",
                    i + 1, tree.root.proof_status.value, tree.root.proof_player,
                )
                break

            self._iterate()
            self.iterations_run = i + 1
            self._after_iteration(i + 1)

        self.save()
        return self.analyze_results()

    def _iterate(self) -> None:
        """One selection → backpropagation cycle."""
        tree = self.tree
        handle = self._select()

        # Transposition check
        record = self.table.lookup(hash_state(tree.node(handle).state))
        if record is not None:
            tree.set_proof(handle, record.proof_status, record.proof_player)
            self._backpropagate(handle, record.winner)
            return

        # Instant win for the mover
        node = tree.node(handle)
        if not tree.is_terminal(handle) and not tree.is_proven(handle) and has_instant_win(node.state):
            mover = node.state.current_player
            self._prove(handle, ProofStatus.PROVEN_WIN, mover)
            self._backpropagate(handle, mover)
            return

        handle = self._expand(handle)

        if tree.is_terminal(handle) and not tree.is_proven(handle):
            winner = tree.winner(handle)
            if winner is not None:
                self._prove(handle, ProofStatus.PROVEN_WIN, winner)

        node = tree.node(handle)
        if node.proof_status is not None:
            outcome = TranspositionRecord(node.proof_status, node.proof_player).winner
        else:
            outcome = rollout(node.state, self.rng, self.config.max_rollout_actions)

        self._backpropagate(handle, outcome)

    def _select(self) -> int:
        """Descend by UCT while nodes are fully expanded, open and unproven."""
        tree = self.tree
        handle = SearchTree.ROOT
        while (
            tree.is_fully_expanded(handle)
            and not tree.is_terminal(handle)
            and not tree.is_proven(handle)
        ):
            handle = select_child(tree, handle, self.config.exploration)
            if tree.is_proven(handle):
                break
        return handle

    def _expand(self, handle: int) -> int:
        """Add one untried child under `handle` and return it (or `handle`)."""
        tree = self.tree
        node = tree.node(handle)
        if tree.is_terminal(handle) or tree.is_proven(handle):
            return handle

        if node.untried_moves is None:
            node.untried_moves = legal_moves(node.state)

        if not node.untried_moves:
            return handle

        move = node.untried_moves.pop()
        new_state = apply_move(node.state, move, validated=True, rng=self.rng)
        return tree.add_child(handle, new_state, move.description)

    def _backpropagate(self, handle: int, winner: int) -> None:
        self.tree.backpropagate(handle, winner)
        propagate_proofs(self.tree, handle, self._on_propagated)

    # -------------------------------------------------------------------------
    # Proof bookkeeping
    # -------------------------------------------------------------------------

    def _prove(self, handle: int, status: ProofStatus, player: int) -> None:
        self.tree.set_proof(handle, status, player)
        self._record(handle, status, player)

    def _on_propagated(self, handle: int, status: ProofStatus, player: int) -> None:
        if status is ProofStatus.PROVEN_WIN:
            self.proven_wins += 1
        else:
            self.proven_losses += 1
        self._record(handle, status, player)
        logger.debug("Proved node %d: %s for player %d", handle, status.value, player)

    def _record(self, handle: int, status: ProofStatus, player: int) -> None:
        self.table.proven_nodes += 1
        key = hash_state(self.tree.node(handle).state)
        self.table.store(key, TranspositionRecord(status, player))

    # -------------------------------------------------------------------------
    # Reporting & persistence
    # -------------------------------------------------------------------------

    def _after_iteration(self, iteration: int) -> None:
        if iteration % self.config.report_every == 0:
            root = self.tree.root
            proof_info = f" [PROVEN: {root.proof_status.value}]" if root.proof_status else ""
            logger.info(
                "Iteration %d/%d: Root win rate = %.2f%%%s | Proven: %d | Cache: %d (%.1f%% hit)",
                iteration, self.config.iterations,
                SearchTree.win_rate(root) * 100, proof_info,
                self.table.proven_nodes, len(self.table), self.table.hit_rate * 100,
            )
        if iteration % self.config.save_every == 0:
            self.save()

    def save(self) -> bool:
        """Persist the transposition table if a cache path is configured."""
        if self.cache_path is None:
            return False
        return self.table.save(self.cache_path)

    def ranked_children(self) -> List[Node]:
        """Root children: proven wins for player 1 first, then by win rate."""
        children = self.tree.children_of(SearchTree.ROOT)
        return sorted(
            children,
            key=lambda c: (not c.is_proven_win_for(1), -SearchTree.win_rate(c)),
        )

    def analyze_results(self) -> SearchResult:
        """Summarise the root of the current tree."""
        root = self.tree.root
        ranked = self.ranked_children()

        result = SearchResult(
            win_rate=SearchTree.win_rate(root),
            total_simulations=root.visits,
            player1_wins=root.wins,
            player2_wins=root.visits - root.wins,
            best_move=ranked[0].move_description if ranked else None,
            is_proven=root.proof_status is not None,
            proof_status=root.proof_status,
            proof_player=root.proof_player,
            proven_nodes=self.table.proven_nodes,
            cache_hits=self.table.hits,
            cache_misses=self.table.misses,
            cache_size=len(self.table),
            ranked_moves=[
                MoveSummary(
                    description=c.move_description,
                    win_rate=SearchTree.win_rate(c),
                    visits=c.visits,
                    proof_status=c.proof_status,
                    proof_player=c.proof_player,
                )
                for c in ranked[:TOP_MOVES]
            ],
        )

        logger.info(
            "Search complete: %d simulations, %d proven nodes, cache %d (%.1f%% hit, %d hits, %d misses)",
            result.total_simulations, result.proven_nodes, result.cache_size,
            result.hit_rate * 100, result.cache_hits, result.cache_misses,
        )
        return result
