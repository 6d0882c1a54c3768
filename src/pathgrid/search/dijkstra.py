# search/dijkstra.py
import heapq
import math
from collections.abc import Sequence
from dataclasses import dataclass

from pathgrid.domain.entities.node import INF, Node


@dataclass(frozen=True)
class PathResult:
    nodes: tuple[int, ...]  # start -> end inclusive; empty when unreachable
    cost: float
    reachable: bool
    expanded: int = 0  # heap pops, stale entries included

    def __len__(self) -> int:
        return len(self.nodes)

    def edges(self) -> list[tuple[int, int]]:
        return list(zip(self.nodes, self.nodes[1:]))


def find_path(nodes: Sequence[Node], start: int, end: int) -> PathResult:
    """
    Dijkstra with a binary heap and lazy deletion.

    Only the scratch fields (cost, prev, on_path) of ``nodes`` are touched;
    marking the path for display is left to the caller.
    """
    n = len(nodes)
    if not (0 <= start < n and 0 <= end < n):
        raise IndexError(f"start/end out of range: {start}, {end} (n={n})")

    for node in nodes:
        node.reset_search()

    nodes[start].cost = 0.0
    q: list[tuple[float, int, int]] = [(0.0, 0, start)]
    seq = 0
    expanded = 0

    while q:
        c, _, u = heapq.heappop(q)
        expanded += 1
        if u == end:
            break
        for e in nodes[u].edges:
            v = nodes[e.target]
            alt = c + e.cost
            # strict: equal-cost alternatives keep the first predecessor found
            if alt < v.cost:
                v.cost = alt
                v.prev = u
                seq += 1
                heapq.heappush(q, (alt, seq, e.target))

    total = nodes[end].cost
    if math.isinf(total):
        return PathResult(nodes=(), cost=INF, reachable=False, expanded=expanded)

    path = [end]
    cur = nodes[end].prev
    while cur is not None and path[-1] != start:
        path.append(cur)
        cur = nodes[cur].prev
    path.reverse()
    return PathResult(nodes=tuple(path), cost=total, reachable=True, expanded=expanded)
