import math
from dataclasses import dataclass


# Core geometry types used by selection and the render view
@dataclass(frozen=True)
class Point:
    x: float  # world units, view centred at the origin
    y: float

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Viewport:
    width: int  # pixels
    height: int

    def contains(self, sx: float, sy: float) -> bool:
        return 0 <= sx <= self.width and 0 <= sy <= self.height


def screen_to_world(sx: float, sy: float, viewport: Viewport, zoom: float) -> Point:
    """
    Map a pixel coordinate (origin top-left, y down) to world space.
    The longer viewport side is stretched by the aspect ratio so that
    world units stay square on screen.
    """
    w, h = float(viewport.width), float(viewport.height)
    if w > h:
        aspect = w / h
        return Point(((2.0 * sx - w) * aspect) / (w * zoom), (-2.0 * sy + h) / (h * zoom))
    aspect = h / w
    return Point((2.0 * sx - w) / (w * zoom), ((-2.0 * sy + h) * aspect) / (h * zoom))


def world_to_screen(p: Point, viewport: Viewport, zoom: float) -> tuple[float, float]:
    # inverse of screen_to_world
    w, h = float(viewport.width), float(viewport.height)
    if w > h:
        aspect = w / h
        return (p.x * w * zoom / aspect + w) / 2.0, (h - p.y * h * zoom) / 2.0
    aspect = h / w
    return (p.x * w * zoom + w) / 2.0, (h - p.y * h * zoom / aspect) / 2.0
