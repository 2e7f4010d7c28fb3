"""Dynamic-programming and prefix-sum drills."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate


class PrefixSums:
    """Answers inclusive range sums over a sequence, with 1-based positions."""

    def __init__(self, values: Iterable[int]) -> None:
        self._sums = list(accumulate(values, initial=0))

    def __len__(self) -> int:
        return len(self._sums) - 1

    def range_sum(self, start: int, end: int) -> int:
        """Sum of the values at positions start..end, both included."""
        if not 1 <= start <= end <= len(self):
            raise IndexError(f"range {start}..{end} outside 1..{len(self)}")
        return self._sums[end] - self._sums[start - 1]


class PrefixSums2D:
    """Answers rectangular region sums over a grid, with 1-based coordinates."""

    def __init__(self, grid: Iterable[Iterable[int]]) -> None:
        rows = [list(row) for row in grid]
        self.height = len(rows)
        self.width = len(rows[0]) if rows else 0
        if any(len(row) != self.width for row in rows):
            raise ValueError("grid rows must all have the same length")
        sums = [[0] * (self.width + 1)]
        for row in rows:
            line = [0]
            running = 0
            for above, value in zip(sums[-1][1:], row):
                running += value
                line.append(above + running)
            sums.append(line)
        self._sums = sums

    def region_sum(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum of rows x1..x2 and columns y1..y2, all bounds included."""
        if not (1 <= x1 <= x2 <= self.height and 1 <= y1 <= y2 <= self.width):
            raise IndexError("region outside the grid")
        s = self._sums
        return s[x2][y2] - s[x2][y1 - 1] - s[x1 - 1][y2] + s[x1 - 1][y1 - 1]


def fibonacci_call_counts(n: int) -> tuple[int, int]:
    """How often a naive recursive Fibonacci reaches fib(0) and fib(1) for fib(n)."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return (1, 0)
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return (previous, current)


def count_divisible_subarrays(values: Iterable[int], modulus: int) -> int:
    """Count contiguous runs whose sum is divisible by modulus."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    remainders = Counter(total % modulus for total in accumulate(values))
    return remainders[0] + sum(c * (c - 1) // 2 for c in remainders.values())


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    values = list(values)
    lengths: list[int] = []
    for value in values:
        lengths.append(
            1 + max((length for length, prev in zip(lengths, values) if prev < value), default=0)
        )
    return max(lengths, default=0)


def _linear_recurrence(n: int, first: int, second: int, modulus: int) -> int:
    if n < 1:
        raise ValueError("n must be a positive integer")
    if n == 1:
        return first
    a, b = first, second
    for _ in range(n - 2):
        a, b = b, (a + b) % modulus
    return b


def tiling_2xn(n: int) -> int:
    """Ways to tile a 2 x n board with 1x2 and 2x1 tiles, modulo 10007."""
    return _linear_recurrence(n, 1, 2, 10007)


def binary_tile_count(n: int) -> int:
    """Count length-n strings made of '1' and '00' tiles, modulo 15746."""
    return _linear_recurrence(n, 1, 2, 15746)


def knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Best total value of (weight, value) items fitting within capacity."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def min_square_terms(n: int) -> int:
    """Fewest perfect squares that add up to n."""
    if n < 0:
        raise ValueError("n must not be negative")
    best = [0]
    for i in range(1, n + 1):
        best.append(
            min(best[i - j * j] + 1 for j in range(1, int(i**0.5) + 2) if j * j <= i)
        )
    return best[n]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    iterator = iter(values)
    try:
        current = best = next(iterator)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def triangle_max_path(rows: Iterable[Iterable[int]]) -> int:
    """Largest top-to-bottom path sum through a number triangle."""
    rows = [list(row) for row in rows]
    if not rows:
        raise ValueError("triangle must not be empty")
    best = rows[-1]
    for row in reversed(rows[:-1]):
        best = [value + max(left, right) for value, left, right in zip(row, best, best[1:])]
    return best[0]


def max_stair_score(scores: Sequence[int]) -> int:
    """Best score climbing stairs one or two at a time, never three in a row, ending on the top."""
    s = list(scores)
    if not s:
        raise ValueError("scores must not be empty")
    if len(s) == 1:
        return s[0]
    if len(s) == 2:
        return s[0] + s[1]
    best = [s[0], s[0] + s[1], max(s[0], s[1]) + s[2]]
    for i in range(3, len(s)):
        best.append(max(best[i - 2], best[i - 3] + s[i - 1]) + s[i])
    return best[-1]


def count_123_sums(n: int) -> int:
    """Count ordered ways to write n as a sum of 1, 2 and 3."""
    if n < 0:
        raise ValueError("n must not be negative")
    table = [0, 1, 2, 4]
    while len(table) <= n:
        table.append(table[-1] + table[-2] + table[-3])
    return table[n]


def padovan(n: int) -> int:
    """The n-th term of the Padovan sequence starting 1, 1, 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    table = [0, 1, 1, 1]
    while len(table) <= n:
        table.append(table[-2] + table[-3])
    return table[n]