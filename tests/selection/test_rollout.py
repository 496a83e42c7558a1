"""
Tests for avengement_solver.selection.rollout

Tests the biased playout policy and playout termination.
"""

import random

from avengement_solver.core.types import DRAW, Move, MoveKind
from avengement_solver.games.avengement import legal_moves
from avengement_solver.selection.rollout import choose_rollout_move, rollout


class FixedRandom:
    """Deterministic stand-in: fixed random() value, choice() takes the first item."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value

    def choice(self, seq):
        return seq[0]


class TestChooseRolloutMove:
    """Policy bias tests."""

    def test_prefers_strike(self, adjacent_state):
        moves = legal_moves(adjacent_state)
        assert choose_rollout_move(moves, adjacent_state, FixedRandom(0.0)) == Move.strike_at(2, 1)

    def test_lunging_with_spare_ap(self, make_state):
        """With 4+ AP and no strike available, lunging is favoured."""
        state = make_state((0, 0), (2, 2), p1_ap=4)
        moves = legal_moves(state)
        assert choose_rollout_move(moves, state, FixedRandom(0.0)).kind is MoveKind.LUNGING

    def test_out_of_ap_ends_turn(self, make_state):
        state = make_state((0, 0), (2, 2), p1_ap=0, turn_start_ap=1)
        moves = legal_moves(state)
        assert choose_rollout_move(moves, state, FixedRandom(0.99)) == Move.end_turn()

    def test_falls_back_to_any_move(self, adjacent_state):
        """When every bias roll fails the choice is uniform over all moves."""
        moves = legal_moves(adjacent_state)
        assert choose_rollout_move(moves, adjacent_state, FixedRandom(0.99)) == moves[0]

    def test_action_preferred_over_end_turn(self, make_state):
        state = make_state((0, 0), (2, 2), p1_ap=2, turn_start_ap=3)
        moves = legal_moves(state)
        choice = choose_rollout_move(moves, state, FixedRandom(0.65))
        assert choice.kind is not MoveKind.END_TURN

    def test_stunned_returns_end_turn(self, make_state):
        state = make_state((0, 0), (2, 2), p1_ap=2, p1_stunned=True)
        moves = legal_moves(state)
        assert choose_rollout_move(moves, state, FixedRandom(0.5)).kind is MoveKind.END_TURN


class TestRollout:
    """Playout tests."""

    def test_lethal_strike_wins(self, make_state):
        state = make_state((1, 1), (2, 1), p1_ap=1, p2_hp=2)
        assert rollout(state, FixedRandom(0.0)) == 1

    def test_does_not_mutate_input(self, opening, rng):
        rollout(opening, rng)
        assert opening.players[1].hp == 7
        assert opening.current_player == 1
        assert opening.players[1].position == (0, 1)

    def test_outcome_range(self, opening):
        rng = random.Random(5)
        for _ in range(20):
            assert rollout(opening, rng) in (DRAW, 1, 2)

    def test_action_limit_draws(self, opening, rng):
        assert rollout(opening, rng, max_actions=0) == DRAW

    def test_finished_position(self, make_state, rng):
        """A position already marked over is scored by remaining HP."""
        state = make_state((1, 1), (2, 1), p1_hp=3, p2_hp=5)
        state.game_over = True
        assert rollout(state, rng) == 2

    def test_seeded_reproducible(self, opening):
        a = [rollout(opening, random.Random(11)) for _ in range(3)]
        b = [rollout(opening, random.Random(11)) for _ in range(3)]
        assert a == b
