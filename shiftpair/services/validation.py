"""
Correctness checks for a schedule against a participant count.

Re-derives everything from the rounds; never mutates the schedule.
is_valid covers: participant range, no repeated pair, every pair present,
round count and size for the parity, one bye each for odd counts, shift
spread <= 1.

Back-to-back work is reported but does not affect is_valid: with an even
count everyone works every round, and the odd-count construction does not
try to avoid it.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any

from shiftpair.models import Schedule
from shiftpair.pairing import pair_key

from .statistics import ScheduleStats, compute_statistics


@dataclass(frozen=True)
class ConsecutiveWork:
    """participant worked both previous_round and round (0-based, adjacent)."""
    participant: int
    previous_round: int
    round: int

    def to_dict(self) -> dict[str, int]:
        return {"participant": self.participant, "rounds": [self.previous_round, self.round]}


@dataclass
class ValidationReport:
    participant_count: int
    stats: ScheduleStats
    issues: list[str] = field(default_factory=list)
    duplicate_pairs: list[tuple[int, int]] = field(default_factory=list)
    missing_pairs: list[tuple[int, int]] = field(default_factory=list)
    bye_counts: dict[int, int] = field(default_factory=dict)
    consecutive_work: list[ConsecutiveWork] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def shift_spread(self) -> int:
        return self.stats.shift_spread

    def to_dict(self) -> dict[str, Any]:
        return {
            "participant_count": self.participant_count,
            "is_valid": self.is_valid,
            "issues": list(self.issues),
            "duplicate_pairs": [list(p) for p in self.duplicate_pairs],
            "missing_pairs": [list(p) for p in self.missing_pairs],
            "shift_spread": self.shift_spread,
            "bye_counts": {str(k): v for k, v in self.bye_counts.items()},
            "consecutive_work": [c.to_dict() for c in self.consecutive_work],
            "stats": self.stats.to_dict(),
        }


def find_consecutive_work(schedule: Schedule, participant_count: int | None = None) -> list[ConsecutiveWork]:
    """Every time a participant works two adjacent rounds."""
    n = schedule.participant_count if participant_count is None else participant_count
    last_worked = {p: -2 for p in range(1, n + 1)}
    found: list[ConsecutiveWork] = []
    for r in schedule.rounds:
        for p in sorted(r.participants):
            if last_worked.get(p, -2) == r.index - 1:
                found.append(ConsecutiveWork(participant=p, previous_round=r.index - 1, round=r.index))
            last_worked[p] = r.index
    return found


def validate_schedule(schedule: Schedule, participant_count: int | None = None) -> ValidationReport:
    n = schedule.participant_count if participant_count is None else participant_count
    report = ValidationReport(participant_count=n, stats=compute_statistics(schedule, n))
    issues = report.issues

    # Participant range; Round itself rejects repeats within a round
    for r in schedule.rounds:
        for pair in r.pairs:
            for p in pair.participants:
                if not isinstance(p, int) or not 1 <= p <= n:
                    issues.append(f"Round {r.index + 1}: unknown participant {p!r}")

    # Duplicate and missing pairs
    counts: Counter[tuple[int, int]] = Counter()
    for round_index, pair in schedule.iter_pairs():
        if pair.includes_bye:
            continue
        key = pair_key(pair.first, pair.second)
        counts[key] += 1
        if counts[key] == 2:
            report.duplicate_pairs.append(key)
            issues.append(f"Duplicate pair {key[0]}-{key[1]} in round {round_index + 1}")
    report.missing_pairs = [pair for pair in combinations(range(1, n + 1), 2) if pair not in counts]
    if report.missing_pairs:
        issues.append(f"Missing pairs: expected {report.stats.expected_pairs}, got {report.stats.total_unique_pairs}")

    # Round shape by parity
    if n % 2 == 0:
        if len(schedule.rounds) != n - 1:
            issues.append(f"Expected {n - 1} rounds for {n} participants, got {len(schedule.rounds)}")
        for r in schedule.rounds:
            if len(r.participants) != n:
                issues.append(f"Round {r.index + 1} doesn't include all participants")
            if len(r.pairs) != n // 2:
                issues.append(f"Round {r.index + 1} has {len(r.pairs)} pairs, expected {n // 2}")
    else:
        if len(schedule.rounds) != n:
            issues.append(f"Expected {n} rounds for {n} participants, got {len(schedule.rounds)}")
        byes: Counter[int] = Counter()
        for r in schedule.rounds:
            if len(r.pairs) != (n - 1) // 2:
                issues.append(f"Round {r.index + 1} has {len(r.pairs)} pairs, expected {(n - 1) // 2}")
            sitting_out = set(range(1, n + 1)) - r.participants
            for p in sitting_out:
                byes[p] += 1
        report.bye_counts = {p: byes.get(p, 0) for p in range(1, n + 1)}
        unfair = sorted(p for p, c in report.bye_counts.items() if c != 1)
        if unfair:
            issues.append(f"Participants without exactly one bye: {unfair}")

    if not report.stats.is_fair:
        issues.append(
            f"Unfair shift distribution: min={report.stats.min_shifts}, max={report.stats.max_shifts}"
        )

    report.consecutive_work = find_consecutive_work(schedule, n)
    return report
