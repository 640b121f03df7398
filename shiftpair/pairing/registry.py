"""
Registry of participant pairs already scheduled in earlier rounds.
"""
from __future__ import annotations

from typing import Iterable, Iterator


def pair_key(a: int, b: int) -> tuple[int, int]:
    """Canonical key for an unordered pair: (smaller, larger)."""
    return (a, b) if a < b else (b, a)


class PairRegistry:
    """Set of unordered pairs. Owned by one schedule-construction call."""

    def __init__(self, pairs: Iterable[tuple[int, int]] = ()) -> None:
        self._used: set[tuple[int, int]] = set()
        for a, b in pairs:
            self.mark_used(a, b)

    def has_been_used(self, a: int, b: int) -> bool:
        return pair_key(a, b) in self._used

    def mark_used(self, a: int, b: int) -> None:
        if a == b:
            raise ValueError(f"Cannot pair participant {a} with itself")
        self._used.add(pair_key(a, b))

    def unmark(self, a: int, b: int) -> None:
        """Forget a pair (used when the planner backs out of a round)."""
        self._used.discard(pair_key(a, b))

    def __contains__(self, pair: tuple[int, int]) -> bool:
        a, b = pair
        return self.has_been_used(a, b)

    def __len__(self) -> int:
        return len(self._used)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(sorted(self._used))
