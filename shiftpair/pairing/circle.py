"""
Circle-method rotation.

Seat participants 1..N in a row (append BYE when N is odd). Each round pairs
seat i with seat N-1-i. Then keep seat 0 fixed and rotate the rest one step:
the last seat moves to position 1, everyone else shifts right.

For even N this is a 1-factorization: N-1 rounds, every pair exactly once.
Pairs that include BYE are dropped from the round and the partner is recorded
as the round's bye.
"""
from __future__ import annotations

from shiftpair.models import BYE, Pair, Round, Seat


def rotate(order: list[Seat]) -> list[Seat]:
    """Keep seat 0, then order[-1], order[1], ..., order[-2]."""
    if len(order) < 3:
        return list(order)
    return [order[0], order[-1]] + order[1:-1]


def circle_rounds(participant_count: int) -> list[Round]:
    """
    All rounds of the circle method for participants 1..participant_count.
    Deterministic: same count, same rounds in the same order.
    """
    if participant_count < 2:
        return []
    order: list[Seat] = list(range(1, participant_count + 1))
    if participant_count % 2 == 1:
        order.append(BYE)
    n = len(order)  # even
    rounds: list[Round] = []
    for index in range(n - 1):
        pairs: list[Pair] = []
        bye: int | None = None
        for i in range(n // 2):
            pair = Pair(order[i], order[n - 1 - i])
            if pair.includes_bye:
                bye = pair.other(BYE)
                continue
            pairs.append(pair)
        rounds.append(Round(index=index, pairs=tuple(pairs), bye=bye))
        order = rotate(order)
    return rounds
