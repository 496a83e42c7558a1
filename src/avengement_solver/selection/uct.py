"""
UCT child selection for tree descent.
"""

from __future__ import annotations

import math

from avengement_solver.search.tree import SearchTree


def uct_score(wins: int, visits: int, parent_visits: int, exploration: float) -> float:
    """UCB1: wins/visits + c * sqrt(ln(parent_visits) / visits)."""
    exploitation = wins / visits
    exploration_term = exploration * math.sqrt(math.log(parent_visits) / visits)
    return exploitation + exploration_term


def select_child(tree: SearchTree, handle: int, exploration: float = math.sqrt(2)) -> int:
    """
    Pick the child of `handle` with the highest UCB1 score.

    Ties go to the first child in expansion order. Every child must have
    been visited at least once, which holds for fully expanded nodes.

    Raises:
        ValueError: If the node has no children.
    """
    node = tree.node(handle)
    if not node.children:
        raise ValueError(f"Node {handle} has no children to select from")

    best_score = -math.inf
    best_child = node.children[0]

    for child_handle in node.children:
        child = tree.node(child_handle)
        score = uct_score(child.wins, child.visits, node.visits, exploration)
        if score > best_score:
            best_score = score
            best_child = child_handle

    return best_child
