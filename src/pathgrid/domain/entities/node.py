# pathgrid/domain/entities/node.py
import math
from dataclasses import dataclass, field

INF = math.inf


@dataclass(frozen=True)
class Edge:
    """Directed half of an undirected connection; endpoints are node indices."""

    source: int
    target: int
    cost: float


@dataclass(eq=False)
class Node:
    id: int
    x: float
    y: float
    edges: list[Edge] = field(default_factory=list)

    # search scratch
    cost: float = INF
    prev: int | None = None
    on_path: bool = False

    # maze scratch
    visited: bool = False

    @property
    def degree(self) -> int:
        return len(self.edges)

    def neighbors(self) -> list[int]:
        return [e.target for e in self.edges]

    def move_to(self, x: float, y: float) -> None:
        self.x, self.y = x, y

    def reset_search(self) -> None:
        self.cost = INF
        self.prev = None
        self.on_path = False


def connect(a: Node, b: Node, cost: float) -> None:
    """Add a -> b and b -> a with the same cost."""
    if a is b or a.id == b.id:
        raise ValueError(f"self loop on node {a.id}")
    if cost < 0 or math.isnan(cost):
        raise ValueError(f"edge cost must be >= 0, got {cost}")
    cost = float(cost)
    a.edges.append(Edge(a.id, b.id, cost))
    b.edges.append(Edge(b.id, a.id, cost))
