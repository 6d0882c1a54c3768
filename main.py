# main.py
import sys

from pathgrid.app.build import build
from pathgrid.app.controller import FrameInput, PointerState
from pathgrid.domain.entities.geometry import Point, Viewport, world_to_screen


class ScriptedInput:
    """Clicks a fixed list of world positions, one per frame."""

    def __init__(self, clicks, viewport: Viewport, zoom: float):
        self._frames = [
            FrameInput(PointerState(*world_to_screen(p, viewport, zoom), **btn), viewport)
            for p, btn in clicks
        ]

    def poll(self) -> FrameInput:
        return self._frames.pop(0)


def run(kind: str = "grid", seed: int = 123):
    app = build({"seed": seed, "topology": {"kind": kind}})
    vp = Viewport(1024, 768)
    g = app.graph

    # Re-pick the endpoints with the pointer: start on node 1, end on the node before last
    a, b = g.get_node(1), g.get_node(len(g) - 2)
    src = ScriptedInput(
        [(Point(a.x, a.y), {"primary": True}), (Point(b.x, b.y), {"secondary": True})],
        vp,
        app.camera.zoom,
    )
    app.frame(src, dt=1 / 60)
    view = app.frame(src, dt=1 / 60)
    return view


if __name__ == "__main__":
    run(*sys.argv[1:2])
