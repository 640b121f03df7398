"""
Tests for statistics and schedule validation.
Generated schedules must pass; hand-built broken schedules must be flagged.
"""
from __future__ import annotations

from pathlib import Path

import pytest

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from shiftpair.models import Pair, Round, Schedule, schedule_from_lists
from shiftpair.services import (
    compute_statistics,
    find_consecutive_work,
    generate_schedule,
    generate_schedule_circle_method,
    validate_schedule,
)


@pytest.fixture
def four_rounds():
    return [
        [[1, 4], [2, 3]],
        [[1, 3], [4, 2]],
        [[1, 2], [3, 4]],
    ]


# ---------- Statistics ----------


@pytest.mark.parametrize("n", range(2, 14))
def test_generated_schedule_is_complete(n):
    stats = compute_statistics(generate_schedule(n))
    assert stats.is_complete
    assert stats.total_unique_pairs == stats.expected_pairs == n * (n - 1) // 2
    assert stats.total_participants == n


@pytest.mark.parametrize("n", range(2, 14))
def test_shift_counts_equal(n):
    """Everyone meets everyone once, so everyone works n-1 shifts."""
    stats = compute_statistics(generate_schedule(n))
    assert set(stats.per_participant_shift_counts.values()) == {n - 1}
    assert stats.shift_spread == 0
    assert stats.is_fair


def test_stats_four():
    stats = compute_statistics(generate_schedule(4))
    assert stats.total_rounds == 3
    assert stats.shifts_per_round == 2
    assert stats.per_participant_shift_counts == {1: 3, 2: 3, 3: 3, 4: 3}


def test_stats_five():
    stats = compute_statistics(generate_schedule(5))
    assert stats.total_rounds == 5
    assert stats.shifts_per_round == 2
    assert stats.expected_pairs == 10


def test_stats_incomplete_schedule(four_rounds):
    schedule = schedule_from_lists(four_rounds[:2], 4)
    stats = compute_statistics(schedule)
    assert not stats.is_complete
    assert stats.total_unique_pairs == 4
    assert stats.per_participant_shift_counts == {1: 2, 2: 2, 3: 2, 4: 2}


def test_stats_empty_schedule():
    stats = compute_statistics(Schedule(participant_count=3, rounds=()))
    assert stats.total_rounds == 0
    assert stats.shifts_per_round == 0
    assert not stats.is_complete


def test_stats_to_dict_keys():
    d = compute_statistics(generate_schedule(6)).to_dict()
    assert d["total_participants"] == 6
    assert d["per_participant_shift_counts"]["1"] == 5
    assert d["is_complete"] is True


# ---------- Validation ----------


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 7, 8, 9, 11])
def test_generated_schedules_validate(n):
    report = validate_schedule(generate_schedule(n))
    assert report.is_valid, report.issues
    assert report.duplicate_pairs == []
    assert report.missing_pairs == []


@pytest.mark.parametrize("n", [3, 5, 7])
def test_circle_method_validates(n):
    assert validate_schedule(generate_schedule_circle_method(n)).is_valid


def test_odd_bye_counts():
    report = validate_schedule(generate_schedule(7))
    assert report.bye_counts == {p: 1 for p in range(1, 8)}


def test_four_rounds_from_lists_valid(four_rounds):
    assert validate_schedule(schedule_from_lists(four_rounds, 4)).is_valid


def test_duplicate_pair_flagged():
    schedule = schedule_from_lists(
        [
            [[1, 2], [3, 4]],
            [[2, 1], [3, 4]],
            [[1, 4], [2, 3]],
        ],
        4,
    )
    report = validate_schedule(schedule)
    assert not report.is_valid
    assert report.duplicate_pairs == [(1, 2), (3, 4)]
    assert report.missing_pairs == [(1, 3), (2, 4)]


def test_missing_round_flagged(four_rounds):
    report = validate_schedule(schedule_from_lists(four_rounds[:2], 4))
    assert not report.is_valid
    assert any("Expected 3 rounds" in issue for issue in report.issues)
    assert report.missing_pairs == [(1, 2), (3, 4)]


def test_even_round_missing_participant():
    schedule = schedule_from_lists(
        [
            [[1, 2], [3, 4]],
            [[1, 3], [2, 4]],
            [[1, 4]],
            [[2, 3]],
        ],
        4,
    )
    report = validate_schedule(schedule)
    assert any("doesn't include all participants" in issue for issue in report.issues)


def test_unknown_participant_flagged():
    schedule = schedule_from_lists([[[1, 5]]], 2)
    report = validate_schedule(schedule)
    assert any("unknown participant 5" in issue for issue in report.issues)


def test_double_bye_flagged():
    """Participant 1 sits out twice, 3 never does."""
    schedule = schedule_from_lists(
        [
            [[2, 3]],
            [[1, 3]],
            [[2, 3]],
        ],
        3,
    )
    report = validate_schedule(schedule)
    assert not report.is_valid
    assert report.bye_counts == {1: 2, 2: 1, 3: 0}
    assert any("exactly one bye" in issue for issue in report.issues)
    assert any("Unfair shift distribution" in issue for issue in report.issues)


def test_bye_pairs_from_lists_recorded():
    schedule = schedule_from_lists([[[2, 3], [1, "BYE"]], [["BYE", 2], [1, 3]], [[1, 2], [3, "BYE"]]], 3)
    assert schedule.bye_order == [1, 2, 3]
    assert validate_schedule(schedule).is_valid


def test_validation_does_not_mutate():
    schedule = generate_schedule(5)
    before = schedule.as_lists()
    validate_schedule(schedule)
    compute_statistics(schedule)
    assert schedule.as_lists() == before


def test_report_to_dict():
    d = validate_schedule(generate_schedule(4)).to_dict()
    assert d["is_valid"] is True
    assert d["issues"] == []
    assert d["stats"]["total_rounds"] == 3


# ---------- Consecutive work ----------


def test_consecutive_work_even_everyone_every_round():
    """Even counts: everyone works every round, so every round after the first repeats everyone."""
    schedule = generate_schedule(4)
    found = find_consecutive_work(schedule)
    assert len(found) == 4 * 2
    assert found[0].participant == 1
    assert (found[0].previous_round, found[0].round) == (0, 1)


def test_consecutive_work_does_not_fail_validation():
    report = validate_schedule(generate_schedule(6))
    assert report.consecutive_work
    assert report.is_valid


def test_consecutive_work_two_participants():
    assert find_consecutive_work(generate_schedule(2)) == []


def test_consecutive_work_odd_three():
    """3 participants: 2-3, 1-3, 1-2. 3 works rounds 1 and 2, 1 works rounds 2 and 3."""
    found = find_consecutive_work(generate_schedule(3))
    assert [(c.participant, c.previous_round, c.round) for c in found] == [(3, 0, 1), (1, 1, 2)]


def test_round_model_rejects_repeat():
    with pytest.raises(ValueError):
        Round(index=0, pairs=(Pair(1, 2), Pair(2, 3)))
