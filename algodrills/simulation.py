"""Implementation and simulation drills."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import combinations


class AcError(ValueError):
    """Raised when an AC program discards from an empty array."""


def count_line_steps(heights: Sequence[int]) -> int:
    """Steps taken when each newcomer moves ahead of every taller earlier student."""
    return sum(earlier > later for earlier, later in combinations(heights, 2))


def z_order_index(n: int, row: int, col: int) -> int:
    """Visit order of cell (row, col) in a Z-shaped walk of a 2**n square."""
    if n < 0:
        raise ValueError("n must not be negative")
    side = 1 << n
    if not (0 <= row < side and 0 <= col < side):
        raise ValueError(f"cell ({row}, {col}) outside a {side} x {side} grid")
    index = 0
    for bit in reversed(range(n)):
        quarter = 1 << (2 * bit)
        if row >> bit & 1:
            index += 2 * quarter
        if col >> bit & 1:
            index += quarter
    return index


def flatten_land(grid: Iterable[Iterable[int]], inventory: int) -> tuple[int, int]:
    """Fastest (seconds, height) levelling: digging takes 2 s, placing 1 s; ties go higher."""
    cells = [height for row in grid for height in row]
    if not cells:
        raise ValueError("grid must not be empty")
    best: tuple[int, int] | None = None
    for level in range(min(cells), max(cells) + 1):
        dug = sum(h - level for h in cells if h >= level)
        filled = sum(level - h for h in cells if h < level)
        if inventory + dug - filled < 0:
            continue
        seconds = 2 * dug + filled
        if best is None or seconds < best[0] or (seconds == best[0] and level > best[1]):
            best = (seconds, level)
    assert best is not None
    return best


def count_paper_squares(grid: Iterable[Sequence[int]]) -> tuple[int, int]:
    """Counts of (white, blue) squares after splitting a 0/1 square until each is one colour."""
    rows = [list(row) for row in grid]
    size = len(rows)
    if size == 0 or any(len(row) != size for row in rows):
        raise ValueError("grid must be a non-empty square")
    if size & (size - 1):
        raise ValueError("grid side must be a power of two")

    def split(x: int, y: int, side: int) -> tuple[int, int]:
        colours = {rows[i][j] != 0 for i in range(x, x + side) for j in range(y, y + side)}
        if colours == {False}:
            return (1, 0)
        if colours == {True}:
            return (0, 1)
        half = side // 2
        parts = [split(x + dx, y + dy, half) for dx in (0, half) for dy in (0, half)]
        return (sum(white for white, _ in parts), sum(blue for _, blue in parts))

    return split(0, 0, size)


def parse_array(text: str) -> list[int]:
    """Read an array written as [a,b,c]."""
    if len(text) < 2 or text[0] != "[" or text[-1] != "]":
        raise ValueError(f"not a bracketed array: {text!r}")
    body = text[1:-1]
    return [int(part) for part in body.split(",")] if body else []


def format_array(values: Iterable[int]) -> str:
    """Write values as [a,b,c]."""
    return "[" + ",".join(map(str, values)) + "]"


def apply_ac(commands: str, values: Iterable[int]) -> list[int]:
    """Run an AC program of R (reverse) and D (drop first) over values."""
    items = deque(values)
    forward = True
    for command in commands:
        if command == "R":
            forward = not forward
        elif command == "D":
            if not items:
                raise AcError("error")
            if forward:
                items.popleft()
            else:
                items.pop()
        else:
            raise ValueError(f"unknown command {command!r}")
    return list(items) if forward else list(reversed(items))