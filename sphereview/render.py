"""Perspective projection of spheres into screen-space discs."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from sphereview.camera import Camera

FIELD_OF_VIEW = 45.0
NEAR_PLANE = 0.1
FAR_PLANE = 100.0
LIGHT_POSITION = (5.0, 5.0, 5.0)
LIGHT_AMBIENT = 0.2
LIGHT_DIFFUSE = 0.8
SPHERE_COLOR = (0.8, 0.2, 0.2)
BACKGROUND = (0.1, 0.1, 0.2)

Color = tuple[float, float, float]


@dataclass(frozen=True)
class Disc:
    """A sphere as seen on screen: centre, radius in pixels, depth, colour."""

    x: float
    y: float
    radius: float
    depth: float
    color: Color


def perspective_scale(height: int, fov_degrees: float) -> float:
    """Pixels per eye-space unit at unit distance for a vertical field of view."""
    return (height / 2.0) / math.tan(math.radians(fov_degrees) / 2.0)


def shade(color: Color, normal_to_light: float) -> Color:
    """Light a colour given the cosine between surface normal and light."""
    intensity = LIGHT_AMBIENT + LIGHT_DIFFUSE * max(0.0, normal_to_light)
    return tuple(min(1.0, channel * intensity) for channel in color)


def _unit(vector: tuple[float, float, float]) -> tuple[float, float, float]:
    length = math.hypot(*vector)
    if length == 0.0:
        return (0.0, 0.0, 1.0)
    return tuple(c / length for c in vector)


def project_scene(
    points: Iterable[Iterable[float]], camera: Camera, width: int, height: int
) -> list[Disc]:
    """Project points as spheres, ordered from farthest to nearest."""
    height = height or 1
    scale = perspective_scale(height, FIELD_OF_VIEW)
    discs = []
    for point in points:
        ex, ey, ez = camera.to_eye(point)
        depth = -ez
        if not NEAR_PLANE < depth < FAR_PLANE:
            continue
        normal = _unit((-ex, -ey, -ez))
        to_light = _unit(tuple(l - e for l, e in zip(LIGHT_POSITION, (ex, ey, ez))))
        cosine = sum(n * t for n, t in zip(normal, to_light))
        discs.append(
            Disc(
                x=width / 2.0 + ex * scale / depth,
                y=height / 2.0 - ey * scale / depth,
                radius=camera.sphere_radius * scale / depth,
                depth=depth,
                color=shade(SPHERE_COLOR, cosine),
            )
        )
    discs.sort(key=lambda disc: disc.depth, reverse=True)
    return discs