"""Orbiting camera driven by mouse drags and the wheel."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_ZOOM = -10.0
MIN_FIT_DISTANCE = -2.0
CLOSEST_ZOOM = -0.5
FIT_FACTOR = 2.5
DEGREES_PER_PIXEL = 0.25


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


@dataclass
class Camera:
    """View state: rotation about X and Y and distance along Z."""

    x_rot: float = 0.0
    y_rot: float = 0.0
    zoom: float = DEFAULT_ZOOM
    sphere_radius: float = 0.1
    last_x: int = 0
    last_y: int = 0

    def fit_to(self, points: Iterable[Iterable[float]]) -> None:
        """Move back far enough to see points; no change for an empty set."""
        coords = [abs(c) for point in points for c in point]
        if not coords:
            return
        self.zoom = min(-max(coords) * FIT_FACTOR, MIN_FIT_DISTANCE)

    def press(self, x: int, y: int) -> None:
        """Remember where a mouse button went down."""
        self.last_x, self.last_y = x, y

    def drag(self, x: int, y: int, left_button: bool) -> bool:
        """Follow the mouse; rotate when the left button is held.

        Returns True if the view changed.
        """
        dx = x - self.last_x
        dy = y - self.last_y
        self.last_x, self.last_y = x, y
        if not left_button:
            return False
        self.x_rot += dy * DEGREES_PER_PIXEL
        self.y_rot += dx * DEGREES_PER_PIXEL
        return True

    def wheel(self, angle_delta_y: int) -> bool:
        """Zoom by a wheel delta in eighths of a degree.

        Returns True if the view changed.
        """
        degrees = _round_half_away(angle_delta_y / 8)
        if degrees == 0:
            return False
        self.zoom = min(self.zoom + degrees / 5.0, CLOSEST_ZOOM)
        return True

    def to_eye(self, point: Iterable[float]) -> tuple[float, float, float]:
        """Transform a world point into eye coordinates."""
        x, y, z = point
        a = math.radians(self.y_rot)
        x, z = x * math.cos(a) + z * math.sin(a), -x * math.sin(a) + z * math.cos(a)
        b = math.radians(self.x_rot)
        y, z = y * math.cos(b) - z * math.sin(b), y * math.sin(b) + z * math.cos(b)
        return (x, y, z + self.zoom)