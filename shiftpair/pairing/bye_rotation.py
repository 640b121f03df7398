"""
Fair bye rotation for an odd number of participants.

N rounds; each round one participant sits out and the other N-1 are paired by
the backtracking matcher, never repeating a pair from an earlier round. Every
participant sits out exactly once.

The bye for round r is the first participant, scanning 1..N cyclically from
position r, who has not sat out yet. If a round cannot be completed, the next
bye candidate is tried; if no candidate works, the previous round moves on to
its next matching. The first complete schedule found is returned.
"""
from __future__ import annotations

import logging

from shiftpair.models import Pair, Round

from .backtracker import SearchBudget, iter_matchings
from .registry import PairRegistry

logger = logging.getLogger(__name__)


class ByeRotationPlanner:
    """
    Builds the rounds of a fair-bye schedule for an odd participant count.
    One planner per schedule; it owns its registry and bye bookkeeping.
    """

    def __init__(self, participant_count: int, budget: SearchBudget | None = None) -> None:
        if participant_count < 3 or participant_count % 2 == 0:
            raise ValueError(f"Bye rotation needs an odd participant count >= 3, got {participant_count}")
        self.participant_count = participant_count
        self.participants = list(range(1, participant_count + 1))
        self.budget = budget if budget is not None else SearchBudget()
        self.retries = 0
        self.deepest_round = 0
        self._registry = PairRegistry()
        self._had_bye: set[int] = set()

    def bye_candidates(self, round_index: int) -> list[int]:
        """Participants eligible to sit out round_index, in preference order."""
        n = self.participant_count
        cyclic = [self.participants[(round_index + i) % n] for i in range(n)]
        fresh = [p for p in cyclic if p not in self._had_bye]
        if not fresh:
            logger.warning("Every participant already had a bye at round %d; resetting", round_index + 1)
            self._had_bye.clear()
            return [self.participants[round_index % n]]
        return fresh

    def plan(self) -> list[Round] | None:
        """All N rounds, or None if no fair schedule exists within the search."""
        rounds: list[Round] = []
        if self._fill(0, rounds):
            return rounds
        return None

    def _fill(self, round_index: int, rounds: list[Round]) -> bool:
        if round_index == self.participant_count:
            return True
        self.deepest_round = max(self.deepest_round, round_index)
        # bye_candidates may reset the bye set; restore it when backing out
        had_bye = set(self._had_bye)
        for bye in self.bye_candidates(round_index):
            self._had_bye.add(bye)
            remaining = [p for p in self.participants if p != bye]
            for matching in iter_matchings(remaining, self._registry, self.budget):
                for a, b in matching:
                    self._registry.mark_used(a, b)
                rounds.append(Round(index=round_index, pairs=tuple(Pair(a, b) for a, b in matching), bye=bye))
                logger.debug("Round %d: bye %d, pairs %s", round_index + 1, bye, list(matching))
                if self._fill(round_index + 1, rounds):
                    return True
                rounds.pop()
                for a, b in matching:
                    self._registry.unmark(a, b)
                self.retries += 1
                logger.debug("Round %d: backing out of matching with bye %d", round_index + 1, bye)
            self._had_bye.discard(bye)
        self._had_bye = had_bye
        return False
