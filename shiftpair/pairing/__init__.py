"""
Pairing algorithms: pair registry, per-round backtracking matcher,
fair bye rotation (odd counts) and circle rotation.
No validation or presentation here.
"""
from .registry import PairRegistry, pair_key
from .backtracker import (
    Matching,
    SearchBudget,
    SearchBudgetExhausted,
    find_matching,
    iter_matchings,
)
from .bye_rotation import ByeRotationPlanner
from .circle import circle_rounds, rotate

__all__ = [
    "PairRegistry",
    "pair_key",
    "Matching",
    "SearchBudget",
    "SearchBudgetExhausted",
    "find_matching",
    "iter_matchings",
    "ByeRotationPlanner",
    "circle_rounds",
    "rotate",
]
