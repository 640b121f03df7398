"""
Service layer: schedule generation, statistics and validation.
"""
from .scheduling import (
    InvalidParticipantCount,
    PairingInfeasible,
    SearchLimitExceeded,
    generate_fair_bye_schedule,
    generate_schedule,
    generate_schedule_circle_method,
    generate_schedule_with_method,
)
from .statistics import ScheduleStats, compute_statistics, expected_pair_count
from .validation import ConsecutiveWork, ValidationReport, find_consecutive_work, validate_schedule

__all__ = [
    "InvalidParticipantCount",
    "PairingInfeasible",
    "SearchLimitExceeded",
    "generate_fair_bye_schedule",
    "generate_schedule",
    "generate_schedule_circle_method",
    "generate_schedule_with_method",
    "ScheduleStats",
    "compute_statistics",
    "expected_pair_count",
    "ConsecutiveWork",
    "ValidationReport",
    "find_consecutive_work",
    "validate_schedule",
]
