"""Greedy-choice drills."""

from __future__ import annotations

import heapq
import re
from collections.abc import Iterable, Sequence

_PACK_SIZE = 6


def min_product_sum(first: Iterable[int], second: Iterable[int]) -> int:
    """Smallest sum of pairwise products when the first sequence may be reordered."""
    a = sorted(first)
    b = sorted(second, reverse=True)
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    return sum(x * y for x, y in zip(a, b))


def min_string_cost(needed: int, offers: Iterable[tuple[int, int]]) -> int:
    """Cheapest price for needed strings given (six-pack price, single price) offers."""
    offers = list(offers)
    if not offers:
        raise ValueError("offers must not be empty")
    if needed < 0:
        raise ValueError("needed must not be negative")
    pack = min(price for price, _ in offers)
    single = min(price for _, price in offers)
    packs, rest = divmod(needed, _PACK_SIZE)
    return min(packs * pack + rest * single, (packs + 1) * pack, needed * single)


def min_coin_count(coins: Iterable[int], amount: int) -> int:
    """Coins used when paying amount greedily, largest coin first."""
    count = 0
    for coin in sorted(coins, reverse=True):
        if coin < 1:
            raise ValueError("coin values must be positive")
        used, amount = divmod(amount, coin)
        count += used
    return count


def reconstruct_line(taller_on_left: Sequence[int]) -> list[int]:
    """Heights 1..n in line order, given for each height how many taller stand on its left."""
    size = len(taller_on_left)
    line: list[int | None] = [None] * size
    for height, taller in enumerate(taller_on_left, start=1):
        free = [slot for slot, person in enumerate(line) if person is None]
        if not 0 <= taller < len(free):
            raise ValueError(f"impossible count {taller} for height {height}")
        line[free[taller]] = height
    return [person for person in line if person is not None]


def max_triangle_perimeter(lengths: Iterable[int]) -> int:
    """Largest perimeter of a triangle made of three of the lengths, or -1."""
    ordered = sorted(lengths, reverse=True)
    for a, b, c in zip(ordered, ordered[1:], ordered[2:]):
        if a < b + c:
            return a + b + c
    return -1


def tape_count(positions: Iterable[int], length: int) -> int:
    """Fewest tapes of the given length covering every leak position."""
    if length < 1:
        raise ValueError("length must be positive")
    count = 0
    limit: int | None = None
    for position in sorted(positions):
        if limit is None or position > limit:
            count += 1
            limit = position + length - 1
    return count


def min_last_number(digits: str) -> int:
    """Smallest n such that digits is a subsequence of 1, 2, ..., n written out."""
    index = 0
    number = 0
    while index < len(digits):
        number += 1
        for char in str(number):
            if index < len(digits) and char == digits[index]:
                index += 1
    return number


def min_expression_value(expression: str) -> int:
    """Smallest value of a +/- expression once brackets are placed freely."""
    parts = re.split(r"([+-])", expression)
    result = int(parts[0])
    minus = False
    for op, token in zip(parts[1::2], parts[2::2]):
        if op == "-":
            minus = True
        result += -int(token) if minus else int(token)
    return result


def a_to_b_steps(a: int, b: int) -> int:
    """Numbers on the shortest path from a to b using x2 and append-1, or -1."""
    count = 0
    while a < b:
        if b % 2 == 0:
            b //= 2
        elif b % 10 == 1:
            b //= 10
        else:
            break
        count += 1
    return count + 1 if a == b else -1


def min_merge_cost(sizes: Iterable[int]) -> int:
    """Least total comparisons to merge all card bundles two at a time."""
    heap = list(sizes)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Most (start, end) meetings that fit in one room without overlap."""
    count = 0
    end = None
    for start, finish in sorted(meetings, key=lambda m: (m[1], m[0])):
        if end is None or start >= end:
            count += 1
            end = finish
    return count


def min_dissatisfaction(expected: Iterable[int]) -> int:
    """Least total difference between expected and assigned ranks 1..n."""
    return sum(abs(rank - value) for rank, value in enumerate(sorted(expected), start=1))