"""Sliding-window drills."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence

_BASES = "ACGT"


def window_minimums(values: Iterable[int], width: int) -> list[int]:
    """Minimum of the last width values seen, at every position."""
    if width < 1:
        raise ValueError("width must be positive")
    window: deque[tuple[int, int]] = deque()
    result = []
    for index, value in enumerate(values):
        while window and window[-1][1] > value:
            window.pop()
        window.append((index, value))
        if window[0][0] <= index - width:
            window.popleft()
        result.append(window[0][1])
    return result


def count_dna_passwords(text: str, width: int, minimums: Sequence[int]) -> int:
    """Windows of the given width holding at least the minimum count of A, C, G and T."""
    if len(minimums) != len(_BASES):
        raise ValueError("minimums must give four counts, for A, C, G and T")
    if not 1 <= width <= len(text):
        raise ValueError("width must be between 1 and the text length")
    need = dict(zip(_BASES, minimums))
    window = Counter(text[:width])

    def satisfied() -> bool:
        return all(window[base] >= need[base] for base in _BASES)

    count = int(satisfied())
    for added, removed in zip(text[width:], text):
        window[added] += 1
        window[removed] -= 1
        count += satisfied()
    return count


def min_swaps_to_group(text: str) -> int:
    """Fewest swaps that gather every 'a' together in a circular string of a and b."""
    count = text.count("a")
    doubled = text + text
    return min(
        (doubled[start : start + count].count("b") for start in range(len(text))),
        default=count,
    ) if count else 0