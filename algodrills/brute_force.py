"""Exhaustive search over operator placements."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from operator import add, mul, sub


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS = (add, sub, mul, _truncating_div)


def _outcomes(value: int, rest: Sequence[int], counts: tuple[int, ...]) -> Iterator[int]:
    if not rest:
        yield value
        return
    for kind, count in enumerate(counts):
        if count:
            remaining = counts[:kind] + (count - 1,) + counts[kind + 1 :]
            yield from _outcomes(_OPERATIONS[kind](value, rest[0]), rest[1:], remaining)


def operator_extremes(numbers: Iterable[int], counts: Iterable[int]) -> tuple[int, int]:
    """(max, min) results of placing +, -, *, / (given counts) between numbers, left to right."""
    numbers = list(numbers)
    counts = tuple(counts)
    if len(counts) != 4 or any(count < 0 for count in counts):
        raise ValueError("counts must give four non-negative operator counts")
    if not numbers or sum(counts) != len(numbers) - 1:
        raise ValueError("there must be exactly one operator between each pair of numbers")
    results = list(_outcomes(numbers[0], numbers[1:], counts))
    return max(results), min(results)