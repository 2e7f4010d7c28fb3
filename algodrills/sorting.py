"""Sorting drills."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


def sort_members(members: Iterable[tuple[int, str]]) -> list[tuple[int, str]]:
    """(age, name) members by age, keeping join order among equal ages."""
    return sorted(members, key=lambda member: member[0])


def total_wait_time(times: Iterable[int]) -> int:
    """Least total of everyone's waiting-plus-service time at a single ATM."""
    return sum(accumulate(sorted(times)))


def compress_coordinates(values: Iterable[int]) -> list[int]:
    """For each value, how many distinct values are smaller than it."""
    values = list(values)
    rank = {value: index for index, value in enumerate(sorted(set(values)))}
    return [rank[value] for value in values]


def sort_numbers(values: Iterable[int]) -> list[int]:
    """The values in ascending order."""
    return sorted(values)


def min_bid_increase(bids: Iterable[tuple[int, int]], winners: int) -> int:
    """Least raise so that at least winners (bid, asking) pairs bid at or above asking."""
    margins = sorted((bid - asking for bid, asking in bids), reverse=True)
    if not 1 <= winners <= len(margins):
        raise ValueError("winners must be between 1 and the number of bids")
    margin = margins[winners - 1]
    return 0 if margin >= 0 else -margin


def h_index(citations: Iterable[int]) -> int:
    """Largest h such that h papers have at least h citations each."""
    ordered = sorted(citations, reverse=True)
    for index, count in enumerate(ordered):
        if count < index + 1:
            return index
    return len(ordered)