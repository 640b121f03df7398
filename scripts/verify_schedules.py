#!/usr/bin/env python3
"""
Batch check: generate and validate schedules for small even and odd counts,
confirm too-small counts are rejected, and compare the two methods.
Run from project root: python3 scripts/verify_schedules.py
"""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from shiftpair.formatting import format_schedule, letter_names
from shiftpair.services import (
    InvalidParticipantCount,
    compute_statistics,
    generate_schedule,
    generate_schedule_circle_method,
    validate_schedule,
)

EVEN_COUNTS = (2, 4, 6, 8)
ODD_COUNTS = (3, 5, 7)


def check(count: int, verbose: bool = True) -> bool:
    print("=" * 50)
    print(f"TESTING WITH {count} PARTICIPANTS")
    print("=" * 50)
    schedule = generate_schedule(count)
    if verbose:
        print(format_schedule(schedule, letter_names(count)))
    report = validate_schedule(schedule)
    stats = report.stats
    print(f"Shifts: min={stats.min_shifts}, max={stats.max_shifts}")
    print(f"Unique pairs: {stats.total_unique_pairs}/{stats.expected_pairs}")
    for issue in report.issues:
        print(f"  FAIL: {issue}")
    print("PASSED" if report.is_valid else "FAILED")
    print()
    return report.is_valid


def main() -> int:
    ok = True
    for count in EVEN_COUNTS + ODD_COUNTS:
        ok = check(count) and ok

    print("EDGE CASES")
    try:
        generate_schedule(1)
        print("  FAIL: expected an error for 1 participant")
        ok = False
    except InvalidParticipantCount as e:
        print(f"  Rejected 1 participant: {e}")
    circle_three = validate_schedule(generate_schedule_circle_method(3))
    print(f"  Circle method, 3 participants valid: {circle_three.is_valid}")
    ok = ok and circle_three.is_valid

    print()
    print("ALGORITHM COMPARISON (6 participants)")
    fair = generate_schedule(6)
    circle = generate_schedule_circle_method(6)
    print(f"  Default method rounds: {len(fair)}, complete: {compute_statistics(fair).is_complete}")
    print(f"  Circle method rounds: {len(circle)}, complete: {compute_statistics(circle).is_complete}")

    print()
    print("ALL CHECKS PASSED" if ok else "SOME CHECKS FAILED")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
