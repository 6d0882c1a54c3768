# pathgrid/domain/graph.py
from collections.abc import Iterator, Sequence

from pathgrid.domain.entities.geometry import Point, Viewport, screen_to_world
from pathgrid.domain.entities.node import Edge, Node
from pathgrid.search import dijkstra
from pathgrid.search.dijkstra import PathResult
from pathgrid.search.hooks import NoopHooks, SearchHooks

# sprite scale 0.5, squared
DEFAULT_PICK_TOLERANCE = 0.25


class GraphError(RuntimeError):
    pass


class EndpointsNotSetError(GraphError):
    pass


class Graph:
    """
    Owns its nodes; node ids equal their index in ``nodes``.
    Topology is fixed once built. Only the start/end selection, the hover
    node and the derived path state change afterwards.
    """

    def __init__(self, hooks: SearchHooks | None = None):
        self._nodes: list[Node] = []
        self.start_node: Node | None = None
        self.end_node: Node | None = None
        self.hover_node: Node | None = None
        self.path_node: list[Node] = []
        self.last_result: PathResult | None = None
        self.hooks = hooks or NoopHooks()

    # ---------------- nodes ----------------

    def add_node(self, id: int, x: float, y: float) -> Node:
        if id != len(self._nodes):
            raise ValueError(f"node id {id} must equal its index {len(self._nodes)}")
        node = Node(id, float(x), float(y))
        self._nodes.append(node)
        return node

    def get_node(self, index: int) -> Node:
        return self._nodes[index]

    @property
    def nodes(self) -> Sequence[Node]:
        return tuple(self._nodes)

    @property
    def num_nodes(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def index_of(self, node: Node) -> int:
        if 0 <= node.id < len(self._nodes) and self._nodes[node.id] is node:
            return node.id
        raise ValueError(f"node {node.id} does not belong to this graph")

    # ---------------- edges ----------------

    def edge_count(self) -> int:
        return sum(n.degree for n in self._nodes) // 2

    def iter_edges(self) -> Iterator[Edge]:
        """Each undirected edge once, as its source < target half."""
        for n in self._nodes:
            for e in n.edges:
                if e.source < e.target:
                    yield e

    def path_cost(self, indices: Sequence[int]) -> float:
        total = 0.0
        for u, v in zip(indices, indices[1:]):
            costs = [e.cost for e in self._nodes[u].edges if e.target == v]
            if not costs:
                raise ValueError(f"nodes {u} and {v} are not adjacent")
            total += min(costs)
        return total

    def reachable_from(self, index: int) -> set[int]:
        seen = {index}
        stack = [index]
        while stack:
            u = stack.pop()
            for v in self._nodes[u].neighbors():
                if v not in seen:
                    seen.add(v)
                    stack.append(v)
        return seen

    def is_connected(self) -> bool:
        if not self._nodes:
            return True
        return len(self.reachable_from(0)) == len(self._nodes)

    # ---------------- endpoints & path ----------------

    def set_start_node(self, node: Node) -> None:
        self.index_of(node)
        self.start_node = node

    def set_end_node(self, node: Node) -> None:
        self.index_of(node)
        self.end_node = node

    def find_path(self) -> PathResult:
        if self.start_node is None or self.end_node is None:
            self.hooks.error(reason="endpoints_not_set")
            raise EndpointsNotSetError("no start/end node selected")

        s, t = self.start_node.id, self.end_node.id
        res = dijkstra.find_path(self._nodes, s, t)

        for i in res.nodes:
            self._nodes[i].on_path = True
        # endpoints stay highlighted even without a route
        self.start_node.on_path = True
        self.end_node.on_path = True

        self.path_node = [self._nodes[i] for i in res.nodes]
        self.last_result = res
        if res.reachable:
            self.hooks.path_found(
                start=s, end=t, cost=res.cost, length=len(res), expanded=res.expanded
            )
        else:
            self.hooks.path_missing(start=s, end=t, expanded=res.expanded)
        return res

    # ---------------- selection ----------------

    def select_node(
        self,
        x: float,
        y: float,
        width: int,
        height: int,
        zoom: float,
        tolerance: float = DEFAULT_PICK_TOLERANCE,
    ) -> Node | None:
        """Return the first node within ``tolerance`` of the pixel (x, y), or None."""
        if width <= 0 or height <= 0 or zoom <= 0:
            return None
        vp = Viewport(width, height)
        if not vp.contains(x, y):
            return None

        cursor = screen_to_world(x, y, vp, zoom)
        hit = None
        # linear scan; graphs here are small
        for n in self._nodes:
            if cursor.distance_to(Point(n.x, n.y)) < tolerance:
                hit = n
                break
        self.hooks.selection(node=None if hit is None else hit.id, x=cursor.x, y=cursor.y)
        return hit

    # ---------------- reporting ----------------

    def describe(self) -> list[dict]:
        return [{"id": n.id, "x": n.x, "y": n.y, "degree": n.degree} for n in self._nodes]
