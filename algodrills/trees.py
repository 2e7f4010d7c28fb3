"""Tree drills: traversals, parent finding and segment trees."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from math import inf
from typing import Any

_NO_CHILD = "."
_ROOT = "A"


class _SegmentTree:
    """Iterative segment tree over 1-based positions."""

    def __init__(self, values: Iterable[Any], combine: Callable[[Any, Any], Any], identity: Any) -> None:
        items = list(values)
        self._count = len(items)
        self._combine = combine
        self._identity = identity
        leaf = 1
        while leaf < max(self._count, 1):
            leaf *= 2
        self._leaf = leaf
        tree = [identity] * (2 * leaf)
        tree[leaf : leaf + self._count] = items
        for i in range(leaf - 1, 0, -1):
            tree[i] = combine(tree[2 * i], tree[2 * i + 1])
        self._tree = tree

    def __len__(self) -> int:
        return self._count

    def _check(self, start: int, end: int) -> None:
        if not 1 <= start <= end <= self._count:
            raise IndexError(f"range {start}..{end} outside 1..{self._count}")

    def _query(self, start: int, end: int) -> Any:
        self._check(start, end)
        tree = self._tree
        s = self._leaf + start - 1
        e = self._leaf + end - 1
        result = self._identity
        while s <= e:
            if s % 2 == 1:
                result = self._combine(result, tree[s])
                s += 1
            if e % 2 == 0:
                result = self._combine(result, tree[e])
                e -= 1
            s //= 2
            e //= 2
        return result


class MinSegmentTree(_SegmentTree):
    """Range-minimum queries over 1-based positions."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, min, inf)

    def query(self, start: int, end: int) -> int:
        """Smallest value among positions start..end, both included."""
        return self._query(start, end)


class SumSegmentTree(_SegmentTree):
    """Range-sum queries with point updates over 1-based positions."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, operator.add, 0)

    def update(self, index: int, value: int) -> None:
        """Set the value at position index."""
        if not 1 <= index <= self._count:
            raise IndexError(f"position {index} outside 1..{self._count}")
        i = self._leaf + index - 1
        self._tree[i] = value
        i //= 2
        while i:
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]
            i //= 2

    def query(self, start: int, end: int) -> int:
        """Sum of the values at positions start..end, both included."""
        return self._query(start, end)


def count_leaves_after_removal(parents: Sequence[int], removed: int) -> int:
    """Leaves left once node removed and its subtree are cut off; parents[i] is -1 for the root."""
    parents = list(parents)
    size = len(parents)
    if not 0 <= removed < size:
        raise ValueError(f"removed node {removed} outside 0..{size - 1}")
    roots = [node for node, parent in enumerate(parents) if parent == -1]
    if not roots:
        raise ValueError("the tree has no root")
    root = roots[-1]
    if removed == root:
        return 0
    adjacency: list[list[int]] = [[] for _ in range(size)]
    for child, parent in enumerate(parents):
        if parent == -1:
            continue
        if not 0 <= parent < size:
            raise ValueError(f"parent {parent} outside 0..{size - 1}")
        adjacency[parent].append(child)
        adjacency[child].append(parent)
    seen = {root}
    stack = [root]
    leaves = 0
    while stack:
        node = stack.pop()
        fresh = [n for n in adjacency[node] if n != removed and n not in seen]
        seen.update(fresh)
        stack.extend(fresh)
        if not fresh:
            leaves += 1
    return leaves


def find_parents(node_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Parents of nodes 2..node_count when the tree is rooted at node 1."""
    if node_count < 1:
        raise ValueError("node_count must be positive")
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, node_count + 1)}
    for a, b in edges:
        if a not in adjacency or b not in adjacency:
            raise ValueError(f"edge ({a}, {b}) names a node outside the tree")
        adjacency[a].append(b)
        adjacency[b].append(a)
    parent: dict[int, int] = {1: 0}
    stack = [1]
    while stack:
        node = stack.pop()
        for neighbour in adjacency[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                stack.append(neighbour)
    if len(parent) != node_count:
        raise ValueError("the tree is not connected")
    return [parent[node] for node in range(2, node_count + 1)]


def count_known(words: Iterable[str], queries: Iterable[str]) -> int:
    """How many queries are among words."""
    known = set(words)
    return sum(query in known for query in queries)


def traversals(children: Mapping[str, tuple[str, str]]) -> tuple[str, str, str]:
    """Preorder, inorder and postorder of a binary tree rooted at 'A'; '.' marks no child."""

    def walk(node: str, order: str) -> Iterator[str]:
        if node == _NO_CHILD:
            return
        left, right = children.get(node, (_NO_CHILD, _NO_CHILD))
        if order == "pre":
            yield node
        yield from walk(left, order)
        if order == "in":
            yield node
        yield from walk(right, order)
        if order == "post":
            yield node

    return tuple("".join(walk(_ROOT, order)) for order in ("pre", "in", "post"))  # type: ignore[return-value]