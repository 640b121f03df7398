"""
Plain-text rendering of schedules and statistics for terminals and the text endpoint.
"""
from __future__ import annotations

import logging
import string
from typing import Sequence

from shiftpair.models import BYE, Schedule, Seat
from shiftpair.services.statistics import ScheduleStats

logger = logging.getLogger(__name__)


def letter_names(count: int) -> list[str]:
    """A, B, C, ... then AA, AB, ... for larger counts."""
    letters = string.ascii_uppercase
    names: list[str] = []
    for i in range(count):
        name = ""
        n = i
        while True:
            name = letters[n % 26] + name
            n = n // 26 - 1
            if n < 0:
                break
        names.append(name)
    return names


def _display_name(seat: Seat, names: Sequence[str] | None) -> str:
    if seat == BYE:
        return BYE
    if names:
        return names[seat - 1]
    return f"Participant {seat}"


def format_schedule(schedule: Schedule, names: Sequence[str] | None = None) -> str:
    """
    Readable schedule, one block per round.
    names[i] is the display name of participant i+1; ignored (with a warning)
    when its length doesn't match the participant count.
    """
    if names is not None and len(names) != schedule.participant_count:
        logger.warning(
            "Participant names count (%d) doesn't match schedule (%d); using numbers",
            len(names), schedule.participant_count,
        )
        names = None

    lines = ["=== PARTICIPANT SCHEDULE ===", ""]
    for r in schedule.rounds:
        lines.append(f"Round {r.index + 1}:")
        for i, pair in enumerate(r.pairs):
            lines.append(f"  Shift {i + 1}: {_display_name(pair.first, names)} & {_display_name(pair.second, names)}")
        if r.bye is not None:
            lines.append(f"  Bye: {_display_name(r.bye, names)}")
        lines.append("")
    return "\n".join(lines)


def format_statistics(stats: ScheduleStats) -> str:
    return "\n".join([
        "--- STATISTICS ---",
        f"Participants: {stats.total_participants}",
        f"Rounds: {stats.total_rounds}",
        f"Shifts per round: {stats.shifts_per_round}",
        f"Unique pairs: {stats.total_unique_pairs}/{stats.expected_pairs}",
        f"Schedule complete: {'yes' if stats.is_complete else 'no'}",
    ])
