"""
Search module - arena tree and proof propagation.
"""

from avengement_solver.search.tree import Node, SearchTree
from avengement_solver.search.proof import check_and_set_proof, propagate_proofs

__all__ = [
    "Node",
    "SearchTree",
    "check_and_set_proof",
    "propagate_proofs",
]
