"""
Data models for pairing schedules.
Domain objects only; no generation or API logic.

Participants are plain integers 1..N. A schedule is an ordered sequence of
rounds; each round is a set of disjoint pairs. When N is odd one participant
sits out each round (recorded as the round's bye).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Union

# Sentinel for "no opponent this round" (odd participant counts)
BYE = "BYE"

Seat = Union[int, str]  # participant id or BYE


# ---------- Generation method ----------
class ScheduleMethod(str, Enum):
    """Which planner produced a schedule."""
    FAIR_BYE = "fair"      # bye rotation + backtracking (odd N)
    CIRCLE = "circle"      # circle rotation


# ---------- Pair ----------
@dataclass(frozen=True, eq=False)
class Pair:
    """
    Unordered pairing of two seats. Seat order is kept for display only;
    (1, 4) and (4, 1) are equal and hash the same.
    """
    first: Seat
    second: Seat

    def __post_init__(self) -> None:
        if self.first == self.second:
            raise ValueError(f"Pair elements must be distinct: {self.first!r}")

    @property
    def includes_bye(self) -> bool:
        return self.first == BYE or self.second == BYE

    @property
    def participants(self) -> tuple[int, ...]:
        """Non-BYE members of the pair."""
        return tuple(s for s in (self.first, self.second) if s != BYE)

    @property
    def key(self) -> frozenset[Seat]:
        return frozenset((self.first, self.second))

    def other(self, seat: Seat) -> Seat:
        if seat == self.first:
            return self.second
        if seat == self.second:
            return self.first
        raise ValueError(f"{seat!r} is not in pair {self.as_tuple()}")

    def as_tuple(self) -> tuple[Seat, Seat]:
        return (self.first, self.second)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __iter__(self) -> Iterator[Seat]:
        yield self.first
        yield self.second

    def to_dict(self) -> dict[str, Any]:
        return {"first": self.first, "second": self.second}


# ---------- Round ----------
@dataclass(frozen=True)
class Round:
    """
    One time slot: disjoint pairs of real participants.
    index is 0-based. bye is the participant sitting out, if any.
    """
    index: int
    pairs: tuple[Pair, ...]
    bye: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairs", tuple(self.pairs))
        seen: set[int] = set()
        for pair in self.pairs:
            if pair.includes_bye:
                raise ValueError(f"Round {self.index + 1}: BYE pairs are not stored in rounds")
            for p in pair.participants:
                if p in seen:
                    raise ValueError(f"Round {self.index + 1}: participant {p} appears twice")
                seen.add(p)
        if self.bye is not None and self.bye in seen:
            raise ValueError(f"Round {self.index + 1}: bye participant {self.bye} is also paired")

    @property
    def participants(self) -> frozenset[int]:
        """Everyone who works this round."""
        return frozenset(p for pair in self.pairs for p in pair.participants)

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self.pairs)

    def as_tuples(self) -> list[tuple[Seat, Seat]]:
        return [pair.as_tuple() for pair in self.pairs]

    def to_dict(self) -> dict[str, Any]:
        return {
            "round_number": self.index + 1,
            "pairs": [list(pair.as_tuple()) for pair in self.pairs],
            "bye": self.bye,
        }


# ---------- Schedule ----------
@dataclass(frozen=True)
class Schedule:
    """
    Ordered rounds for participants 1..participant_count.
    Immutable once built; validators only read it.
    """
    participant_count: int
    rounds: tuple[Round, ...]
    method: ScheduleMethod = ScheduleMethod.CIRCLE
    search_steps: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rounds", tuple(self.rounds))

    def __len__(self) -> int:
        return len(self.rounds)

    def __iter__(self) -> Iterator[Round]:
        return iter(self.rounds)

    def __getitem__(self, i: int) -> Round:
        return self.rounds[i]

    @property
    def participants(self) -> list[int]:
        return list(range(1, self.participant_count + 1))

    @property
    def bye_order(self) -> list[int | None]:
        """Participant sitting out in each round (None when nobody does)."""
        return [r.bye for r in self.rounds]

    def iter_pairs(self) -> Iterator[tuple[int, Pair]]:
        """(round_index, pair) for every stored pair, in schedule order."""
        for r in self.rounds:
            for pair in r.pairs:
                yield r.index, pair

    def as_lists(self) -> list[list[list[Seat]]]:
        """Plain nested lists: [[[a, b], ...], ...]."""
        return [[list(pair.as_tuple()) for pair in r.pairs] for r in self.rounds]

    def to_dict(self) -> dict[str, Any]:
        return {
            "participant_count": self.participant_count,
            "method": self.method.value,
            "total_rounds": len(self.rounds),
            "rounds": [r.to_dict() for r in self.rounds],
        }


def schedule_from_lists(
    rounds: list[list[list[int]]] | list[list[tuple[int, int]]],
    participant_count: int,
    method: ScheduleMethod = ScheduleMethod.CIRCLE,
) -> Schedule:
    """
    Build a Schedule from plain nested lists (e.g. a JSON body).
    Pairs containing BYE are dropped and the other member recorded as the round's bye.
    Raises ValueError on malformed input.
    """
    built: list[Round] = []
    for i, raw_round in enumerate(rounds):
        pairs: list[Pair] = []
        bye: int | None = None
        for raw_pair in raw_round:
            if len(raw_pair) != 2:
                raise ValueError(f"Round {i + 1}: pair must have exactly 2 elements, got {list(raw_pair)}")
            for seat in raw_pair:
                if seat != BYE and (isinstance(seat, bool) or not isinstance(seat, int)):
                    raise ValueError(f"Round {i + 1}: seat must be a participant id or {BYE!r}, got {seat!r}")
            pair = Pair(raw_pair[0], raw_pair[1])
            if pair.includes_bye:
                if bye is not None:
                    raise ValueError(f"Round {i + 1}: more than one bye")
                bye = pair.other(BYE)
                continue
            pairs.append(pair)
        built.append(Round(index=i, pairs=tuple(pairs), bye=bye))
    return Schedule(participant_count=participant_count, rounds=tuple(built), method=method)
