"""
Round-robin pairing schedules.

Every pair of participants meets exactly once. Even N: N-1 rounds of N/2 pairs
(circle method), everyone works every round. Odd N: N rounds of (N-1)/2 pairs,
one participant sits out each round and everyone sits out exactly once
(bye rotation with backtracking).

Deterministic: same participant count => same schedule. A schedule is either
fully valid or not returned at all.
"""
from __future__ import annotations

import logging

from shiftpair.config import get_settings
from shiftpair.models import Schedule, ScheduleMethod
from shiftpair.pairing import ByeRotationPlanner, SearchBudget, SearchBudgetExhausted, circle_rounds

logger = logging.getLogger(__name__)

MIN_PARTICIPANTS = 2
MIN_FAIR_BYE_PARTICIPANTS = 3

# ---------- Exceptions ----------


class InvalidParticipantCount(ValueError):
    """Participant count is below the minimum (or otherwise unusable) for the requested method."""

    def __init__(self, participant_count: object, minimum: int, reason: str | None = None) -> None:
        msg = reason or f"Number of participants must be at least {minimum}, got {participant_count}"
        super().__init__(msg)
        self.participant_count = participant_count
        self.minimum = minimum


class PairingInfeasible(ValueError):
    """No schedule could be built without repeating a pair."""

    def __init__(self, message: str, round_index: int | None = None) -> None:
        super().__init__(message)
        self.round_index = round_index


class SearchLimitExceeded(PairingInfeasible):
    """The backtracking search hit its step cap before finding a schedule."""

    def __init__(self, message: str, steps: int, round_index: int | None = None) -> None:
        super().__init__(message, round_index=round_index)
        self.steps = steps


# ---------- Guards ----------


def _check_count(participant_count: object, minimum: int) -> int:
    if isinstance(participant_count, bool) or not isinstance(participant_count, int):
        raise InvalidParticipantCount(
            participant_count, minimum, reason=f"Number of participants must be an integer, got {participant_count!r}"
        )
    if participant_count < minimum:
        raise InvalidParticipantCount(participant_count, minimum)
    return participant_count


def _resolve_max_steps(max_search_steps: int | None) -> int | None:
    """None -> settings default; 0 -> no cap."""
    if max_search_steps is None:
        return get_settings().max_search_steps
    return max_search_steps or None


# ---------- Entry points ----------


def generate_schedule(participant_count: int, max_search_steps: int | None = None) -> Schedule:
    """
    Schedule for participants 1..participant_count.
    Odd counts use fair bye rotation; even counts use the circle method.
    """
    _check_count(participant_count, MIN_PARTICIPANTS)
    if participant_count % 2 == 1:
        return generate_fair_bye_schedule(participant_count, max_search_steps=max_search_steps)
    return generate_schedule_circle_method(participant_count)


def generate_schedule_circle_method(participant_count: int) -> Schedule:
    """
    Circle-method schedule. For odd counts a BYE seat is added; the result has
    N rounds but bye placement comes from the rotation, not from bye rotation.
    """
    _check_count(participant_count, MIN_PARTICIPANTS)
    rounds = circle_rounds(participant_count)
    logger.info("Circle schedule: %d participants, %d rounds", participant_count, len(rounds))
    return Schedule(participant_count=participant_count, rounds=tuple(rounds), method=ScheduleMethod.CIRCLE)


def generate_fair_bye_schedule(participant_count: int, max_search_steps: int | None = None) -> Schedule:
    """
    Odd-count schedule where everyone sits out exactly once.
    Raises PairingInfeasible if the search is exhausted and SearchLimitExceeded
    if it runs past max_search_steps (None = settings default, 0 = no cap).
    """
    _check_count(participant_count, MIN_FAIR_BYE_PARTICIPANTS)
    if participant_count % 2 == 0:
        raise InvalidParticipantCount(
            participant_count,
            MIN_FAIR_BYE_PARTICIPANTS,
            reason=f"Bye rotation needs an odd number of participants, got {participant_count}",
        )
    budget = SearchBudget(_resolve_max_steps(max_search_steps))
    planner = ByeRotationPlanner(participant_count, budget=budget)
    try:
        rounds = planner.plan()
    except SearchBudgetExhausted as e:
        logger.warning(
            "Bye rotation for %d participants stopped at round %d after %d steps",
            participant_count, planner.deepest_round + 1, e.steps,
        )
        raise SearchLimitExceeded(
            f"No schedule for {participant_count} participants within {e.max_steps} search steps",
            steps=e.steps,
            round_index=planner.deepest_round,
        ) from e
    if rounds is None:
        raise PairingInfeasible(
            f"Cannot pair {participant_count} participants without repeating a pair "
            f"(round {planner.deepest_round + 1})",
            round_index=planner.deepest_round,
        )
    logger.info(
        "Fair bye schedule: %d participants, %d rounds, %d search steps, %d retries",
        participant_count, len(rounds), budget.steps, planner.retries,
    )
    return Schedule(
        participant_count=participant_count,
        rounds=tuple(rounds),
        method=ScheduleMethod.FAIR_BYE,
        search_steps=budget.steps,
    )


def generate_schedule_with_method(
    participant_count: int,
    method: ScheduleMethod | str = ScheduleMethod.FAIR_BYE,
    max_search_steps: int | None = None,
) -> Schedule:
    """
    Dispatch by method name. "fair" means the default strategy for the count
    (bye rotation when odd, circle when even); "circle" forces the circle method.
    """
    method = ScheduleMethod(method)
    if method == ScheduleMethod.CIRCLE:
        return generate_schedule_circle_method(participant_count)
    return generate_schedule(participant_count, max_search_steps=max_search_steps)
