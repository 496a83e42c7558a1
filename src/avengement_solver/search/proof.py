"""
Backward-induction proof propagation.

A node whose mover can reach a child proven as a win for them is itself a
proven win. A node where every child is a proven loss for the mover is a
proven loss. Anything else stays open for statistical search.
"""

from __future__ import annotations

from typing import Callable, Optional

from avengement_solver.core.types import ProofStatus
from avengement_solver.search.tree import SearchTree

ProofCallback = Callable[[int, ProofStatus, int], None]


def check_and_set_proof(tree: SearchTree, handle: int) -> Optional[ProofStatus]:
    """
    Try to prove `handle` from its children.

    Only unproven, fully expanded nodes with at least one child qualify.

    Returns:
        The new proof status, or None if the node was left unchanged.
    """
    node = tree.node(handle)
    if node.proof_status is not None or not node.children or not tree.is_fully_expanded(handle):
        return None

    mover = node.state.current_player
    children = tree.children_of(handle)

    if any(child.is_proven_win_for(mover) for child in children):
        tree.set_proof(handle, ProofStatus.PROVEN_WIN, mover)
        return ProofStatus.PROVEN_WIN

    if all(child.is_proven_loss_for(mover) for child in children):
        tree.set_proof(handle, ProofStatus.PROVEN_LOSS, mover)
        return ProofStatus.PROVEN_LOSS

    return None


def propagate_proofs(tree: SearchTree, start: int, on_proven: Optional[ProofCallback] = None) -> int:
    """
    Walk from `start` to the root, proving whatever the children now settle.

    Args:
        tree: The search tree.
        start: Handle of the node just backpropagated.
        on_proven: Called as on_proven(handle, status, player) for each
                   newly proven node.

    Returns:
        Number of nodes proven by this pass.
    """
    proven = 0
    for handle in tree.path_to_root(start):
        status = check_and_set_proof(tree, handle)
        if status is None:
            continue
        proven += 1
        if on_proven is not None:
            on_proven(handle, status, tree.node(handle).proof_player)
    return proven
