# pathgrid/app/view.py
from dataclasses import dataclass
from typing import Literal

from pathgrid.domain.entities.geometry import Point
from pathgrid.domain.graph import Graph

Role = Literal["start", "end", "hover", "path", "default"]


@dataclass(frozen=True)
class NodeView:
    id: int
    x: float
    y: float
    on_path: bool
    is_start: bool
    is_end: bool
    is_hovered: bool

    @property
    def role(self) -> Role:
        # colour priority used by the renderer
        if self.is_start:
            return "start"
        if self.is_end:
            return "end"
        if self.is_hovered:
            return "hover"
        if self.on_path:
            return "path"
        return "default"


@dataclass(frozen=True)
class EdgeView:
    source: int
    target: int
    a: Point
    b: Point
    cost: float
    on_path: bool  # both endpoints on the path

    @property
    def midpoint(self) -> Point:
        return Point((self.a.x + self.b.x) / 2.0, (self.a.y + self.b.y) / 2.0)

    @property
    def vertical(self) -> bool:
        # edge sprites are drawn horizontally and rotated a quarter turn otherwise
        return self.a.y != self.b.y


@dataclass(frozen=True)
class GraphView:
    nodes: tuple[NodeView, ...]
    edges: tuple[EdgeView, ...]
    path: tuple[int, ...]
    path_cost: float | None


def snapshot(g: Graph) -> GraphView:
    """Copy out everything a renderer needs; the graph is not touched."""
    nodes = tuple(
        NodeView(
            id=n.id,
            x=n.x,
            y=n.y,
            on_path=n.on_path,
            is_start=n is g.start_node,
            is_end=n is g.end_node,
            is_hovered=n is g.hover_node,
        )
        for n in g
    )
    edges = []
    for e in g.iter_edges():
        u, v = g.get_node(e.source), g.get_node(e.target)
        edges.append(
            EdgeView(
                source=e.source,
                target=e.target,
                a=Point(u.x, u.y),
                b=Point(v.x, v.y),
                cost=e.cost,
                on_path=u.on_path and v.on_path,
            )
        )
    res = g.last_result
    return GraphView(
        nodes=nodes,
        edges=tuple(edges),
        path=tuple(n.id for n in g.path_node),
        path_cost=res.cost if res is not None and res.reachable else None,
    )
