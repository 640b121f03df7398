"""
Backtracking search for a perfect matching of one round.

Given the participants still needing a partner and the pairs used in earlier
rounds, partition the participants into pairs that have never met. The lowest
remaining id is always paired first and candidates are tried in ascending
order, so the same input always yields the same matchings in the same order.

Worst case is exponential in the number of participants. Callers that need a
bound pass a SearchBudget.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from .registry import PairRegistry

Matching = tuple[tuple[int, int], ...]


class SearchBudgetExhausted(Exception):
    """The search visited more states than its budget allows."""

    def __init__(self, steps: int, max_steps: int) -> None:
        super().__init__(f"Search stopped after {steps} steps (limit {max_steps})")
        self.steps = steps
        self.max_steps = max_steps


class SearchBudget:
    """Counts recursion steps across one schedule construction."""

    def __init__(self, max_steps: int | None = None) -> None:
        self.max_steps = max_steps
        self.steps = 0

    def tick(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise SearchBudgetExhausted(self.steps, self.max_steps)


def _normalize(participants: Iterable[int]) -> tuple[int, ...]:
    ordered = tuple(sorted(participants))
    if len(set(ordered)) != len(ordered):
        raise ValueError(f"Participants must be distinct: {list(ordered)}")
    return ordered


def _matchings(
    remaining: tuple[int, ...],
    registry: PairRegistry,
    budget: SearchBudget | None,
) -> Iterator[Matching]:
    if budget is not None:
        budget.tick()
    if not remaining:
        yield ()
        return
    if len(remaining) == 1:
        # A lone participant cannot be paired
        return
    p = remaining[0]
    for j in range(1, len(remaining)):
        q = remaining[j]
        if registry.has_been_used(p, q):
            continue
        rest = remaining[1:j] + remaining[j + 1:]
        for tail in _matchings(rest, registry, budget):
            yield ((p, q),) + tail


def iter_matchings(
    participants: Iterable[int],
    registry: PairRegistry,
    budget: SearchBudget | None = None,
) -> Iterator[Matching]:
    """
    Lazily yield every complete matching of participants that avoids the
    registry's pairs, in deterministic order. Yields nothing when none exists.

    The registry is read when the generator resumes; callers that mark pairs
    between items must restore it before asking for the next one.
    """
    return _matchings(_normalize(participants), registry, budget)


def find_matching(
    participants: Iterable[int],
    registry: PairRegistry,
    budget: SearchBudget | None = None,
) -> Matching | None:
    """
    First complete matching avoiding used pairs, or None if infeasible.
    An empty participant set gives the empty matching.
    """
    return next(iter_matchings(participants, registry, budget), None)
