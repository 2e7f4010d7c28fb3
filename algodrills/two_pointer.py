"""Two-pointer techniques over sorted sequences and sliding ranges."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from heapq import merge


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    return list(merge(first, second))


def count_good_numbers(numbers: Iterable[int]) -> int:
    """Count the numbers that equal the sum of two other numbers at different positions."""
    values = sorted(numbers)
    count = 0
    for k, goal in enumerate(values):
        i, j = 0, len(values) - 1
        while i < j:
            total = values[i] + values[j]
            if total == goal:
                if i == k:
                    i += 1
                elif j == k:
                    j -= 1
                else:
                    count += 1
                    break
            elif total < goal:
                i += 1
            else:
                j -= 1
    return count


def shortest_subarray_at_least(values: Sequence[int], target: int) -> int:
    """Length of the shortest contiguous run whose sum reaches target, or 0 if none does."""
    values = list(values)
    if not values:
        return 0
    size = len(values)
    left = right = 0
    total = values[0]
    best: int | None = None
    while right < size:
        if total < target:
            right += 1
            if right < size:
                total += values[right]
        else:
            length = right - left + 1
            best = length if best is None else min(best, length)
            total -= values[left]
            left += 1
    return 0 if best is None else best


def count_pairs_with_sum(values: Iterable[int], target: int) -> int:
    """Count disjoint pairs, matched from the sorted ends inwards, that add up to target."""
    ordered = sorted(values)
    start, end = 0, len(ordered) - 1
    count = 0
    while start < end:
        total = ordered[start] + ordered[end]
        if total == target:
            count += 1
            start += 1
            end -= 1
        elif total < target:
            start += 1
        else:
            end -= 1
    return count


def count_consecutive_sums(n: int) -> int:
    """Count the ways of writing n as a sum of consecutive positive integers."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    count = 1
    start = end = total = 1
    while end != n:
        if total == n:
            count += 1
            end += 1
            total += end
        elif total > n:
            total -= start
            start += 1
        else:
            end += 1
            total += end
    return count


def closest_to_zero_pair(values: Iterable[int]) -> tuple[int, int]:
    """Return the pair, in ascending order, whose sum is closest to zero."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("values must not be empty")
    left, right = 0, len(ordered) - 1
    best_abs = abs(ordered[left] + ordered[right])
    best = (ordered[left], ordered[right])
    while left < right:
        now = ordered[left] + ordered[right]
        if abs(now) < best_abs:
            best_abs = abs(now)
            best = (ordered[left], ordered[right])
        if now < 0:
            left += 1
        elif now > 0:
            right -= 1
        else:
            break
    return best


def longest_two_kind_run(items: Sequence[Hashable]) -> int:
    """Length of the longest contiguous run holding at most two distinct kinds."""
    items = list(items)
    window: Counter = Counter()
    start = 0
    best = 0
    for end, item in enumerate(items):
        window[item] += 1
        while len(window) > 2:
            old = items[start]
            window[old] -= 1
            if not window[old]:
                del window[old]
            start += 1
        best = max(best, end - start + 1)
    return best


def count_common(first: Sequence[int], second: Sequence[int]) -> int:
    """Count matching elements of two ascending sequences."""
    i = j = count = 0
    while i < len(first) and j < len(second):
        if first[i] == second[j]:
            count += 1
            i += 1
            j += 1
        elif first[i] < second[j]:
            i += 1
        else:
            j += 1
    return count