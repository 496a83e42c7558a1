"""
Tests for avengement_solver.selection.uct

Tests UCB1 scoring and child selection.
"""

import math

import pytest

from avengement_solver.search.tree import SearchTree
from avengement_solver.selection.uct import select_child, uct_score

ROOT = SearchTree.ROOT


def tree_with_children(state, stats):
    """Root with one child per (wins, visits) pair; root visits is their sum."""
    tree = SearchTree(state)
    for wins, visits in stats:
        h = tree.add_child(ROOT, state)
        tree.node(h).wins = wins
        tree.node(h).visits = visits
    tree.root.visits = sum(v for _, v in stats)
    return tree


class TestUctScore:
    """UCB1 formula tests."""

    def test_formula(self):
        expected = 3 / 4 + math.sqrt(2) * math.sqrt(math.log(10) / 4)
        assert uct_score(3, 4, 10, math.sqrt(2)) == pytest.approx(expected)

    def test_no_exploration(self):
        assert uct_score(1, 4, 100, 0.0) == 0.25

    def test_fewer_visits_explores_more(self):
        assert uct_score(1, 2, 10, 1.0) > uct_score(5, 10, 10, 1.0)


class TestSelectChild:
    """Child selection tests."""

    def test_picks_highest_score(self, opening):
        tree = tree_with_children(opening, [(1, 5), (4, 5), (2, 5)])
        assert select_child(tree, ROOT) == 2

    def test_tie_goes_to_first(self, opening):
        tree = tree_with_children(opening, [(2, 4), (2, 4), (2, 4)])
        assert select_child(tree, ROOT) == 1

    def test_exploration_favours_rarely_visited(self, opening):
        tree = tree_with_children(opening, [(9, 18), (0, 1)])
        assert select_child(tree, ROOT, exploration=2.0) == 2
        assert select_child(tree, ROOT, exploration=0.0) == 1

    def test_no_children_raises(self, opening):
        tree = SearchTree(opening)
        with pytest.raises(ValueError, match="no children"):
            select_child(tree, ROOT)
