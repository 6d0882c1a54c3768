# pathgrid/domain/builders.py
import numpy as np

from pathgrid.domain.entities.node import connect
from pathgrid.domain.graph import Graph

DEFAULT_WEIGHT_RANGE = (10, 15)


def _require_empty(g: Graph) -> None:
    if len(g):
        raise ValueError(f"graph already has {len(g)} nodes")


def _finish(g: Graph, topology: str) -> Graph:
    g.hooks.graph_built(topology=topology, nodes=len(g), edges=g.edge_count())
    if len(g):
        g.set_start_node(g.get_node(0))
        g.set_end_node(g.get_node(len(g) - 1))
        g.find_path()
    return g


def build_empty(g: Graph | None = None) -> Graph:
    g = g if g is not None else Graph()
    _require_empty(g)
    return _finish(g, "empty")


def build_simple(g: Graph | None = None) -> Graph:
    """Five nodes on the x axis joined by unit edges."""
    g = g if g is not None else Graph()
    _require_empty(g)
    nodes = [g.add_node(i, x, 0.0) for i, x in enumerate((-2.0, -1.0, 0.0, 1.0, 2.0))]
    for a, b in zip(nodes, nodes[1:]):
        connect(a, b, 1.0)
    return _finish(g, "simple")


def build_grid(
    g: Graph | None = None,
    *,
    cols: int,
    rows: int,
    disp_x: float,
    disp_y: float,
    start_x: float,
    start_y: float,
    viewport_height: float,
    rng: np.random.Generator,
    weight_range: tuple[int, int] = DEFAULT_WEIGHT_RANGE,
) -> Graph:
    """
    Lay out cols*rows nodes row-major, top row first, and join every node to
    its right and bottom neighbours. Weights are integers drawn uniformly
    from the inclusive ``weight_range``.
    """
    g = g if g is not None else Graph()
    _require_empty(g)
    if cols < 1 or rows < 1:
        raise ValueError(f"grid needs cols, rows >= 1, got {cols}x{rows}")
    lo, hi = weight_range
    if lo < 0 or hi < lo:
        raise ValueError(f"bad weight range {weight_range}")

    y = viewport_height - start_y
    for i in range(rows):
        x = start_x
        for j in range(cols):
            g.add_node(i * cols + j, x, y)
            x += disp_x
        y -= disp_y

    # left/top links come from the mirrored half of connect()
    for i in range(rows):
        for j in range(cols):
            idx = i * cols + j
            if j < cols - 1:
                connect(g.get_node(idx), g.get_node(idx + 1), int(rng.integers(lo, hi + 1)))
            if i < rows - 1:
                connect(g.get_node(idx), g.get_node(idx + cols), int(rng.integers(lo, hi + 1)))

    return _finish(g, "grid")
