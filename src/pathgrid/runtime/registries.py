# runtime/registries.py
from collections.abc import Callable

from pathgrid.config.models import (
    GridTopologyModel,
    MazeTopologyModel,
    SimpleTopologyModel,
    TopologyUnion,
)
from pathgrid.domain.builders import build_grid, build_simple
from pathgrid.domain.graph import Graph
from pathgrid.search.hooks import SearchHooks
from pathgrid.search.maze import carve_maze
from pathgrid.sim.rng import RNGRegistry

TopologyFactory = Callable[[TopologyUnion, dict], Graph]

_topology_registry: dict[str, TopologyFactory] = {}


def register_topology(kind: str):
    def deco(fn: TopologyFactory):
        _topology_registry[kind] = fn
        return fn

    return deco


def make_graph(
    cfg: TopologyUnion, *, rng_registry: RNGRegistry, hooks: SearchHooks | None = None
) -> Graph:
    try:
        factory = _topology_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown topology kind {cfg.kind!r}")
    return factory(cfg, {"rng": rng_registry, "hooks": hooks})


@register_topology("simple")
def _make_simple(cfg: SimpleTopologyModel, deps):
    return build_simple(Graph(hooks=deps["hooks"]))


def _grid(cfg: GridTopologyModel, rng, hooks) -> Graph:
    return build_grid(
        Graph(hooks=hooks),
        cols=cfg.cols,
        rows=cfg.rows,
        disp_x=cfg.disp_x,
        disp_y=cfg.disp_y,
        start_x=cfg.start_x,
        start_y=cfg.start_y,
        viewport_height=cfg.viewport_height,
        rng=rng,
        weight_range=cfg.weight_range,
    )


@register_topology("grid")
def _make_grid(cfg: GridTopologyModel, deps):
    return _grid(cfg, deps["rng"].stream("weights"), deps["hooks"])


@register_topology("maze")
def _make_maze(cfg: MazeTopologyModel, deps):
    # the base grid is scaffolding only, keep its logs quiet
    base = _grid(cfg.base, deps["rng"].stream("weights"), None)
    out = Graph(hooks=deps["hooks"])
    return carve_maze(base, out, deps["rng"].stream("maze"))
