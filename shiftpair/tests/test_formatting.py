"""
Tests for text rendering of schedules and statistics.
"""
from __future__ import annotations

import logging
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from shiftpair.formatting import format_schedule, format_statistics, letter_names
from shiftpair.services import compute_statistics, generate_schedule


def test_format_numbers():
    text = format_schedule(generate_schedule(2))
    assert text.splitlines() == [
        "=== PARTICIPANT SCHEDULE ===",
        "",
        "Round 1:",
        "  Shift 1: Participant 1 & Participant 2",
    ]


def test_format_with_names():
    text = format_schedule(generate_schedule(4), ["Ann", "Bo", "Cy", "Di"])
    lines = text.splitlines()
    assert "Round 1:" in lines
    assert "  Shift 1: Ann & Di" in lines
    assert "  Shift 2: Bo & Cy" in lines
    assert "  Shift 2: Di & Bo" in lines
    assert lines.count("") == 3


def test_format_shows_bye():
    text = format_schedule(generate_schedule(3), letter_names(3))
    assert text.splitlines()[2:5] == ["Round 1:", "  Shift 1: B & C", "  Bye: A"]


def test_name_count_mismatch_warns_and_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="shiftpair.formatting"):
        text = format_schedule(generate_schedule(4), ["Ann", "Bo"])
    assert "Participant 1 & Participant 4" in text
    assert "doesn't match" in caplog.text


def test_letter_names():
    assert letter_names(3) == ["A", "B", "C"]
    names = letter_names(28)
    assert names[25] == "Z"
    assert names[26] == "AA"
    assert names[27] == "AB"
    assert letter_names(0) == []


def test_format_statistics():
    text = format_statistics(compute_statistics(generate_schedule(5)))
    assert text.splitlines() == [
        "--- STATISTICS ---",
        "Participants: 5",
        "Rounds: 5",
        "Shifts per round: 2",
        "Unique pairs: 10/10",
        "Schedule complete: yes",
    ]
