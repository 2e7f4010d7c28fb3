"""Stack and queue drills."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

_NOTHING_LEFT = "FRULA"


def zero_sum(values: Iterable[int]) -> int:
    """Sum of the numbers kept when each 0 cancels the most recent kept number."""
    kept: list[int] = []
    for value in values:
        if value == 0:
            if not kept:
                raise ValueError("a zero arrived with nothing to cancel")
            kept.pop()
        else:
            kept.append(value)
    return sum(kept)


def run_stack_commands(commands: Iterable[str]) -> list[int]:
    """Run push/pop/size/empty/top commands and return what each query reports."""
    stack: list[int] = []
    output: list[int] = []
    for command in commands:
        parts = command.split()
        if not parts:
            raise ValueError("empty command")
        name = parts[0]
        if name == "push":
            if len(parts) != 2:
                raise ValueError(f"push needs one argument: {command!r}")
            stack.append(int(parts[1]))
        elif name == "top":
            output.append(stack[-1] if stack else -1)
        elif name == "pop":
            output.append(stack.pop() if stack else -1)
        elif name == "size":
            output.append(len(stack))
        elif name == "empty":
            output.append(0 if stack else 1)
        else:
            raise ValueError(f"unknown command {command!r}")
    return output


def edit_text(text: str, commands: Iterable[str]) -> str:
    """Apply cursor commands L, D, B and 'P x' to text, the cursor starting at the end."""
    left = list(text)
    right: list[str] = []
    for command in commands:
        parts = command.split()
        if not parts:
            raise ValueError("empty command")
        name = parts[0]
        if name == "L":
            if left:
                right.append(left.pop())
        elif name == "D":
            if right:
                left.append(right.pop())
        elif name == "B":
            if left:
                left.pop()
        elif name == "P":
            if len(parts) != 2 or len(parts[1]) != 1:
                raise ValueError(f"P needs one character: {command!r}")
            left.append(parts[1])
        else:
            raise ValueError(f"unknown command {command!r}")
    return "".join(left) + "".join(reversed(right))


def next_greater(values: Sequence[int]) -> list[int]:
    """For each element, the first later element that is larger, or -1."""
    values = list(values)
    answer = [-1] * len(values)
    waiting: list[int] = []
    for index, value in enumerate(values):
        while waiting and values[waiting[-1]] < value:
            answer[waiting.pop()] = value
        waiting.append(index)
    return answer


def stack_sequence(target: Iterable[int]) -> list[str]:
    """Push (+) and pop (-) steps that produce target from 1, 2, ... via one stack."""
    stack: list[int] = []
    steps: list[str] = []
    upcoming = 1
    for value in target:
        while upcoming <= value:
            stack.append(upcoming)
            steps.append("+")
            upcoming += 1
        if not stack or stack[-1] != value:
            raise ValueError("NO")
        stack.pop()
        steps.append("-")
    return steps


def print_order(priorities: Sequence[int], target: int) -> int:
    """Position at which the document at index target is printed by a priority queue."""
    if not 0 <= target < len(priorities):
        raise ValueError(f"target {target} outside 0..{len(priorities) - 1}")
    queue = deque(enumerate(priorities))
    printed = 0
    while True:
        index, priority = queue[0]
        if any(other > priority for _, other in queue):
            queue.rotate(-1)
            continue
        queue.popleft()
        printed += 1
        if index == target:
            return printed


def explode(text: str, bomb: str) -> str:
    """Repeatedly remove bomb from text; 'FRULA' when nothing remains."""
    if not bomb:
        raise ValueError("bomb must not be empty")
    pattern = list(bomb)
    size = len(pattern)
    stack: list[str] = []
    for char in text:
        stack.append(char)
        if len(stack) >= size and stack[-size:] == pattern:
            del stack[-size:]
    return "".join(stack) or _NOTHING_LEFT