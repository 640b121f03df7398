"""
Aggregate statistics for a finished schedule. Read-only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shiftpair.models import Schedule


def expected_pair_count(participant_count: int) -> int:
    return participant_count * (participant_count - 1) // 2


@dataclass
class ScheduleStats:
    total_participants: int
    total_rounds: int
    shifts_per_round: int  # pairs in the first round
    total_unique_pairs: int
    expected_pairs: int
    per_participant_shift_counts: dict[int, int] = field(default_factory=dict)
    is_complete: bool = False

    @property
    def min_shifts(self) -> int:
        return min(self.per_participant_shift_counts.values(), default=0)

    @property
    def max_shifts(self) -> int:
        return max(self.per_participant_shift_counts.values(), default=0)

    @property
    def shift_spread(self) -> int:
        return self.max_shifts - self.min_shifts

    @property
    def is_fair(self) -> bool:
        """Shift counts differ by at most one."""
        return self.shift_spread <= 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_participants": self.total_participants,
            "total_rounds": self.total_rounds,
            "shifts_per_round": self.shifts_per_round,
            "total_unique_pairs": self.total_unique_pairs,
            "expected_pairs": self.expected_pairs,
            "per_participant_shift_counts": {str(k): v for k, v in self.per_participant_shift_counts.items()},
            "is_complete": self.is_complete,
            "is_fair": self.is_fair,
        }


def compute_statistics(schedule: Schedule, participant_count: int | None = None) -> ScheduleStats:
    """
    Unique pairs, per-participant shift counts and completeness.
    participant_count defaults to the schedule's own count.
    """
    n = schedule.participant_count if participant_count is None else participant_count
    shifts = {p: 0 for p in range(1, n + 1)}
    unique: set[frozenset] = set()
    for _, pair in schedule.iter_pairs():
        if pair.includes_bye:
            continue
        unique.add(pair.key)
        for p in pair.participants:
            shifts[p] = shifts.get(p, 0) + 1
    expected = expected_pair_count(n)
    return ScheduleStats(
        total_participants=n,
        total_rounds=len(schedule.rounds),
        shifts_per_round=len(schedule.rounds[0]) if schedule.rounds else 0,
        total_unique_pairs=len(unique),
        expected_pairs=expected,
        per_participant_shift_counts=shifts,
        is_complete=len(unique) == expected,
    )
