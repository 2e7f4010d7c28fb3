"""Binary-search drills."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable


def membership(values: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """For each query, whether it occurs among values."""
    ordered = sorted(values)

    def present(query: int) -> bool:
        index = bisect_left(ordered, query)
        return index < len(ordered) and ordered[index] == query

    return [present(query) for query in queries]


def budget_cap(requests: Iterable[int], budget: int) -> int:
    """Largest cap on each request that keeps the total within budget."""
    requests = list(requests)
    if not requests:
        raise ValueError("requests must not be empty")
    top = max(requests)
    if len(requests) * top < budget:
        return top
    low, high = budget // len(requests), top
    while low <= high:
        mid = (low + high) // 2
        remain = budget - sum(min(request, mid) for request in requests)
        if remain == 0:
            return mid
        if remain > 0:
            low = mid + 1
        else:
            high = mid - 1
    return (low + high) // 2


def max_cut_height(heights: Iterable[int], needed: int) -> int:
    """Highest saw height that still yields at least needed wood."""
    heights = list(heights)
    low, high = 0, max(heights, default=0)
    answer = 0
    while low <= high:
        mid = (low + high) // 2
        cut = sum(height - mid for height in heights if height > mid)
        if cut >= needed:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer