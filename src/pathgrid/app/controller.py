# pathgrid/app/controller.py
from dataclasses import dataclass
from typing import Literal

from pathgrid.domain.entities.geometry import Viewport
from pathgrid.domain.entities.node import Node
from pathgrid.domain.graph import DEFAULT_PICK_TOLERANCE, Graph

ZoomCommand = Literal["in", "out", "reset"]


@dataclass(frozen=True)
class PointerState:
    x: float  # pixels, origin top-left
    y: float
    primary: bool = False  # left button
    secondary: bool = False  # right button


@dataclass(frozen=True)
class FrameInput:
    pointer: PointerState
    viewport: Viewport
    zoom: ZoomCommand | None = None


class PathController:
    """
    Turns pointer state into endpoint changes. Primary press moves the start,
    secondary press moves the end; either press recomputes the path, even
    when nothing was picked.
    """

    def __init__(self, graph: Graph, *, tolerance: float = DEFAULT_PICK_TOLERANCE):
        self.graph = graph
        self.tolerance = tolerance

    def update(self, pointer: PointerState, viewport: Viewport, zoom: float) -> Node | None:
        g = self.graph
        n = g.select_node(
            pointer.x, pointer.y, viewport.width, viewport.height, zoom, self.tolerance
        )
        g.hover_node = n

        if pointer.primary:
            # start and end must stay distinct nodes
            if n is not None and n is not g.end_node:
                g.set_start_node(n)
            g.find_path()

        if pointer.secondary:
            if n is not None and n is not g.start_node:
                g.set_end_node(n)
            g.find_path()

        return n
