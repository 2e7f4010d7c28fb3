"""Depth-first and breadth-first search drills on graphs and grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from itertools import combinations, combinations_with_replacement, product
from math import isqrt

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_FIELD_LIMIT = 100_000


def _adjacency(
    node_count: int,
    edges: Iterable[tuple[int, int]],
    *,
    base: int = 1,
    directed: bool = False,
) -> dict[int, list[int]]:
    if node_count < 0:
        raise ValueError("node_count must not be negative")
    adjacency: dict[int, list[int]] = {node: [] for node in range(base, base + node_count)}
    for a, b in edges:
        if a not in adjacency or b not in adjacency:
            raise ValueError(f"edge ({a}, {b}) names a node outside the graph")
        adjacency[a].append(b)
        if not directed:
            adjacency[b].append(a)
    return adjacency


def _reachable(adjacency: Mapping[int, Iterable[int]], start: int) -> set[int]:
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return seen


def _rows(grid: Iterable[Sequence]) -> list[list]:
    rows = [list(row) for row in grid]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _neighbours(row: int, col: int, height: int, width: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _STEPS:
        nx, ny = row + dx, col + dy
        if 0 <= nx < height and 0 <= ny < width:
            yield nx, ny


def _count_regions(rows: list[list[Hashable]]) -> int:
    height = len(rows)
    width = len(rows[0]) if rows else 0
    seen: set[tuple[int, int]] = set()
    regions = 0
    for x in range(height):
        for y in range(width):
            if (x, y) in seen:
                continue
            regions += 1
            colour = rows[x][y]
            seen.add((x, y))
            queue = deque([(x, y)])
            while queue:
                cx, cy = queue.popleft()
                for nx, ny in _neighbours(cx, cy, height, width):
                    if (nx, ny) not in seen and rows[nx][ny] == colour:
                        seen.add((nx, ny))
                        queue.append((nx, ny))
    return regions


def count_color_regions(grid: Iterable[str]) -> tuple[int, int]:
    """Regions seen with normal vision and with red and green taken as one colour."""
    rows = _rows(grid)
    blind = [["G" if cell == "R" else cell for cell in row] for row in rows]
    return _count_regions(rows), _count_regions(blind)


def count_cabbage_worms(rows: int, cols: int, cabbages: Iterable[tuple[int, int]]) -> int:
    """Number of orthogonally connected patches of cabbages in a rows x cols field."""
    planted = set()
    for x, y in cabbages:
        if not (0 <= x < rows and 0 <= y < cols):
            raise ValueError(f"cabbage ({x}, {y}) lies outside the field")
        planted.add((x, y))
    patches = 0
    while planted:
        patches += 1
        queue = deque([planted.pop()])
        while queue:
            x, y = queue.popleft()
            for nx, ny in _neighbours(x, y, rows, cols):
                if (nx, ny) in planted:
                    planted.remove((nx, ny))
                    queue.append((nx, ny))
    return patches


def _distances(adjacency: Mapping[int, Iterable[tuple[int, int]]], start: int) -> dict[int, int]:
    distance = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour, weight in adjacency.get(node, ()):
            if neighbour not in distance:
                distance[neighbour] = distance[node] + weight
                queue.append(neighbour)
    return distance


def tree_diameter(adjacency: Mapping[int, Iterable[tuple[int, int]]]) -> int:
    """Longest weighted path in a tree given as node -> [(neighbour, weight), ...]."""
    adjacency = {node: list(edges) for node, edges in adjacency.items()}
    if not adjacency:
        raise ValueError("tree must have at least one node")
    first = _distances(adjacency, min(adjacency))
    farthest = max(sorted(first), key=first.__getitem__)
    return max(_distances(adjacency, farthest).values())


def count_components(node_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of connected components of an undirected graph on nodes 1..node_count."""
    adjacency = _adjacency(node_count, edges)
    seen: set[int] = set()
    components = 0
    for node in adjacency:
        if node not in seen:
            components += 1
            seen |= _reachable(adjacency, node)
    return components


def count_subsets_with_sum(values: Iterable[int], target: int) -> int:
    """Number of non-empty subsets (by position) whose elements add up to target."""
    sums = [0]
    for value in values:
        sums += [total + value for total in sums]
    count = sums.count(target)
    return count - 1 if target == 0 else count


def has_friend_chain(node_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether some simple path visits five distinct nodes (nodes 0..node_count-1)."""
    adjacency = _adjacency(node_count, edges, base=0)

    def reach(node: int, depth: int, on_path: set[int]) -> bool:
        if depth == 5:
            return True
        for neighbour in adjacency[node]:
            if neighbour not in on_path:
                on_path.add(neighbour)
                if reach(neighbour, depth + 1, on_path):
                    return True
                on_path.remove(neighbour)
        return False

    return any(reach(node, 1, {node}) for node in adjacency)


def dfs_bfs_orders(
    node_count: int, edges: Iterable[tuple[int, int]], start: int
) -> tuple[list[int], list[int]]:
    """Visit orders of depth-first and breadth-first search, smaller neighbours first."""
    adjacency = _adjacency(node_count, edges)
    if start not in adjacency:
        raise ValueError(f"start node {start} is not in the graph")
    for neighbours in adjacency.values():
        neighbours.sort()

    dfs = [start]
    seen = {start}
    stack = [iter(adjacency[start])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in seen:
                seen.add(neighbour)
                dfs.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()

    bfs = [start]
    seen = {start}
    queue = deque([start])
    while queue:
        for neighbour in adjacency[queue.popleft()]:
            if neighbour not in seen:
                seen.add(neighbour)
                bfs.append(neighbour)
                queue.append(neighbour)
    return dfs, bfs


def best_hacking_targets(node_count: int, trusts: Iterable[tuple[int, int]]) -> list[int]:
    """Nodes whose hacking reaches the most computers; (a, b) means a trusts b."""
    adjacency = _adjacency(node_count, ((b, a) for a, b in trusts), directed=True)
    reach = {node: len(_reachable(adjacency, node)) for node in adjacency}
    best = max(reach.values(), default=0)
    return [node for node in sorted(reach) if reach[node] == best]


def distance_map(grid: Iterable[Sequence[int]]) -> list[list[int]]:
    """Steps from the target cells (2) to every cell; walls (0) give 0, unreachable land -1."""
    rows = _rows(grid)
    height = len(rows)
    width = len(rows[0]) if rows else 0
    result = [[0] * width for _ in range(height)]
    seen = {(x, y) for x in range(height) for y in range(width) if rows[x][y] == 2}
    queue = deque(sorted(seen))
    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(x, y, height, width):
            if (nx, ny) not in seen and rows[nx][ny] != 0:
                seen.add((nx, ny))
                result[nx][ny] = result[x][y] + 1
                queue.append((nx, ny))
    for x in range(height):
        for y in range(width):
            if rows[x][y] == 1 and (x, y) not in seen:
                result[x][y] = -1
    return result


def combinations_ascending(n: int, m: int) -> list[tuple[int, ...]]:
    """All strictly increasing length-m sequences drawn from 1..n, in order."""
    return list(combinations(range(1, n + 1), m))


def sequences_with_repetition(n: int, m: int) -> list[tuple[int, ...]]:
    """All length-m sequences drawn from 1..n, repeats allowed, in order."""
    return list(product(range(1, n + 1), repeat=m))


def nondecreasing_sequences(n: int, m: int) -> list[tuple[int, ...]]:
    """All non-decreasing length-m sequences drawn from 1..n, in order."""
    return list(combinations_with_replacement(range(1, n + 1), m))


def hide_and_seek(start: int, target: int) -> int:
    """Fewest seconds to go from start to target moving -1, +1 or x2 on 0..100000."""
    for point in (start, target):
        if not 0 <= point <= _FIELD_LIMIT:
            raise ValueError(f"position {point} outside 0..{_FIELD_LIMIT}")
    seconds = {start: 0}
    queue = deque([start])
    while queue:
        here = queue.popleft()
        if here == target:
            return seconds[here]
        for there in (here - 1, here + 1, here * 2):
            if 0 <= there <= _FIELD_LIMIT and there not in seconds:
                seconds[there] = seconds[here] + 1
                queue.append(there)
    raise ValueError("target cannot be reached")


def cities_at_distance(
    node_count: int, roads: Iterable[tuple[int, int]], distance: int, start: int
) -> list[int]:
    """Cities whose shortest one-way road distance from start equals distance, ascending."""
    adjacency = _adjacency(node_count, roads, directed=True)
    if start not in adjacency:
        raise ValueError(f"start city {start} is not in the graph")
    hops = {start: 0}
    queue = deque([start])
    while queue:
        city = queue.popleft()
        for neighbour in adjacency[city]:
            if neighbour not in hops:
                hops[neighbour] = hops[city] + 1
                queue.append(neighbour)
    return sorted(city for city, hop in hops.items() if hop == distance)


def _is_prime(n: int) -> bool:
    return n >= 2 and all(n % divisor for divisor in range(2, isqrt(n) + 1))


def interesting_primes(digits: int) -> list[int]:
    """All primes with the given number of digits whose every prefix is also prime."""
    if digits < 1:
        raise ValueError("digits must be positive")

    def extend(number: int, length: int) -> Iterator[int]:
        if length == digits:
            yield number
            return
        for digit in (1, 3, 5, 7, 9):
            candidate = number * 10 + digit
            if _is_prime(candidate):
                yield from extend(candidate, length + 1)

    return [prime for first in (2, 3, 5, 7) for prime in extend(first, 1)]


def maze_shortest_path(maze: Iterable[str]) -> int:
    """Cells on the shortest path from the top-left to the bottom-right open cell ('1')."""
    rows = _rows([int(cell) for cell in row] for row in maze)
    if not rows or not rows[0]:
        raise ValueError("maze must not be empty")
    height, width = len(rows), len(rows[0])
    if rows[0][0] == 0:
        raise ValueError("the entrance is blocked")
    length = {(0, 0): 1}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(x, y, height, width):
            if rows[nx][ny] != 0 and (nx, ny) not in length:
                length[(nx, ny)] = length[(x, y)] + 1
                queue.append((nx, ny))
    exit_cell = (height - 1, width - 1)
    if exit_cell not in length:
        raise ValueError("the exit cannot be reached")
    return length[exit_cell]


def count_infected(node_count: int, links: Iterable[tuple[int, int]]) -> int:
    """Computers infected through network links starting from computer 1, not counting it."""
    adjacency = _adjacency(node_count, links)
    if 1 not in adjacency:
        raise ValueError("the network must contain computer 1")
    return len(_reachable(adjacency, 1)) - 1


def days_to_ripen(grid: Iterable[Sequence[int]]) -> int:
    """Days until every tomato (0 unripe, 1 ripe, -1 empty) ripens, or -1 if some never do."""
    rows = _rows(grid)
    height = len(rows)
    width = len(rows[0]) if rows else 0
    days = {(x, y): 0 for x in range(height) for y in range(width) if rows[x][y] == 1}
    queue = deque(sorted(days))
    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(x, y, height, width):
            if rows[nx][ny] != -1 and (nx, ny) not in days:
                days[(nx, ny)] = days[(x, y)] + 1
                queue.append((nx, ny))
    if any(
        rows[x][y] == 0 and (x, y) not in days for x in range(height) for y in range(width)
    ):
        return -1
    return max(days.values(), default=-1)