# pathgrid/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from pathgrid.app.camera import Camera
from pathgrid.app.controller import PathController
from pathgrid.app.protocols import InputSource, Renderer
from pathgrid.app.view import GraphView, snapshot
from pathgrid.config.models import DemoModel
from pathgrid.domain.graph import Graph
from pathgrid.io.graph_logging import GraphLogging  # JSON logs
from pathgrid.runtime.registries import make_graph
from pathgrid.search.hooks import NoopHooks, SearchHooks
from pathgrid.sim.rng import RNGRegistry


@dataclass
class App:
    graph: Graph
    controller: PathController
    camera: Camera
    rng: RNGRegistry
    hooks: SearchHooks
    config: DemoModel

    def frame(
        self, source: InputSource, renderer: Renderer | None = None, dt: float = 0.0
    ) -> GraphView:
        """One update: zoom keys, pointer picking/endpoint changes, then draw."""
        inp = source.poll()
        self.camera.tick(dt)
        if inp.zoom == "in":
            self.camera.zoom_in()
        elif inp.zoom == "out":
            self.camera.zoom_out()
        elif inp.zoom == "reset":
            self.camera.reset()

        self.controller.update(inp.pointer, inp.viewport, self.camera.zoom)
        view = snapshot(self.graph)
        if renderer is not None:
            renderer.draw(view, self.camera.zoom)
        return view


def build(cfg: DemoModel | Mapping | None = None, *, use_logging: bool = True) -> App:
    # 0) Validate config
    if cfg is None:
        model = DemoModel()
    else:
        model = cfg if isinstance(cfg, DemoModel) else DemoModel.model_validate(cfg)

    # 1) RNG & hooks
    rng_registry = RNGRegistry(model.seed, scenario=model.name)
    hooks = (
        GraphLogging(
            run=model.name,
            level="DEBUG" if model.log.debug else model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Graph for the configured topology (already has a path)
    graph = make_graph(model.topology, rng_registry=rng_registry, hooks=hooks)
    if use_logging and model.log.debug:
        hooks.graph_dump(graph)

    # 3) Interaction
    camera = Camera(
        zoom=model.camera.zoom, step=model.camera.zoom_step, cooldown_s=model.camera.cooldown_s
    )
    controller = PathController(graph, tolerance=model.selection.pick_tolerance)

    return App(graph, controller, camera, rng_registry, hooks, model)
