from typing import Protocol, runtime_checkable

from pathgrid.app.controller import FrameInput
from pathgrid.app.view import GraphView


# ------------- Platform collaborators --------------------
@runtime_checkable
class InputSource(Protocol):
    """
    Responsibilities:
      • Report pointer position/buttons and the current window size.
      • Translate zoom keys into a ZoomCommand (or None).
    """

    def poll(self) -> FrameInput: ...


@runtime_checkable
class Renderer(Protocol):
    """Draw one frame from a read-only snapshot. Must not keep references to graph nodes."""

    def draw(self, view: GraphView, zoom: float) -> None: ...
