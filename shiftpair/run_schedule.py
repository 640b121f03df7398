"""
Print a pairing schedule for N participants, with statistics.
Optionally validate it and exit non-zero when it fails.
"""
from __future__ import annotations

import argparse
import logging
import sys

from shiftpair.config import get_settings
from shiftpair.formatting import format_schedule, format_statistics, letter_names
from shiftpair.models import ScheduleMethod
from shiftpair.services import (
    InvalidParticipantCount,
    PairingInfeasible,
    generate_schedule_with_method,
    validate_schedule,
)


def _print_report(report) -> None:
    print("--- VERIFICATION ---")
    stats = report.stats
    print(f"Shift distribution: min={stats.min_shifts}, max={stats.max_shifts}")
    if report.participant_count % 2 == 1:
        print(f"Byes per participant: {report.bye_counts}")
    print(f"Back-to-back rounds worked: {len(report.consecutive_work)}")
    for issue in report.issues:
        print(f"  ! {issue}")
    print("SCHEDULE VALIDATION PASSED" if report.is_valid else "SCHEDULE VALIDATION FAILED")


def run(
    participant_count: int,
    method: str = ScheduleMethod.FAIR_BYE.value,
    names: list[str] | None = None,
    verify: bool = False,
) -> int:
    """Print the schedule; return a process exit code."""
    try:
        schedule = generate_schedule_with_method(participant_count, method)
    except InvalidParticipantCount as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except PairingInfeasible as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_schedule(schedule, names))
    report = validate_schedule(schedule)
    print(format_statistics(report.stats))
    if verify:
        print()
        _print_report(report)
        return 0 if report.is_valid else 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a round-robin pairing schedule.")
    parser.add_argument("participants", type=int, help="Number of participants (>= 2)")
    parser.add_argument(
        "--method",
        choices=[m.value for m in ScheduleMethod],
        default=ScheduleMethod.FAIR_BYE.value,
        help="fair: bye rotation for odd counts (default); circle: circle method",
    )
    names_group = parser.add_mutually_exclusive_group()
    names_group.add_argument("--names", default=None, help="Comma-separated display names")
    names_group.add_argument("--letters", action="store_true", help="Name participants A, B, C, ...")
    parser.add_argument("--verify", action="store_true", help="Validate the schedule and print a report")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_settings().log_level, format="%(levelname)s %(name)s: %(message)s")

    names = None
    if args.names:
        names = [n.strip() for n in args.names.split(",")]
    elif args.letters and args.participants > 0:
        names = letter_names(args.participants)
    return run(args.participants, method=args.method, names=names, verify=args.verify)


if __name__ == "__main__":
    sys.exit(main())
