from pathgrid.domain.entities.geometry import Point, Viewport, screen_to_world


class Camera:
    """Uniform zoom about the origin, rate-limited by a cooldown."""

    def __init__(self, zoom: float = 0.25, step: float = 1.5, cooldown_s: float = 0.25):
        self.initial_zoom = zoom
        self.zoom = zoom
        self.step = step
        self.cooldown_s = cooldown_s
        self._since_last = 0.0

    def tick(self, dt: float) -> None:
        self._since_last += dt

    def _ready(self) -> bool:
        if self._since_last < self.cooldown_s:
            return False
        self._since_last = 0.0
        return True

    def zoom_in(self) -> bool:
        if not self._ready():
            return False
        self.zoom *= self.step
        return True

    def zoom_out(self) -> bool:
        if not self._ready():
            return False
        self.zoom /= self.step
        return True

    def reset(self) -> bool:
        if not self._ready():
            return False
        self.zoom = self.initial_zoom
        return True

    def world_bounds(self, viewport: Viewport) -> tuple[Point, Point]:
        """Bottom-left and top-right corners of the visible world rectangle."""
        lo = screen_to_world(0, viewport.height, viewport, self.zoom)
        hi = screen_to_world(viewport.width, 0, viewport, self.zoom)
        return lo, hi
