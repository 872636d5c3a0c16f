import pytest

from sphereview.camera import Camera
from sphereview.render import (
    LIGHT_AMBIENT,
    SPHERE_COLOR,
    perspective_scale,
    project_scene,
    shade,
)


def test_perspective_scale_right_angle():
    assert perspective_scale(600, 90.0) == pytest.approx(300.0)


def test_perspective_scale_is_proportional_to_height():
    assert perspective_scale(800, 45.0) == pytest.approx(2 * perspective_scale(400, 45.0))


def test_shade_full_light_keeps_color():
    assert shade((0.5, 0.25, 1.0), 1.0) == pytest.approx((0.5, 0.25, 1.0))


def test_shade_facing_away_is_ambient_only():
    dark = shade(SPHERE_COLOR, -0.7)
    assert dark == pytest.approx(tuple(c * LIGHT_AMBIENT for c in SPHERE_COLOR))
    assert dark == shade(SPHERE_COLOR, 0.0)


def test_origin_projects_to_centre():
    camera = Camera()
    (disc,) = project_scene([(0.0, 0.0, 0.0)], camera, 800, 600)
    assert (disc.x, disc.y) == pytest.approx((400.0, 300.0))
    assert disc.depth == pytest.approx(-camera.zoom)
    assert disc.radius > 0


def test_points_behind_camera_are_dropped():
    camera = Camera()
    assert project_scene([(0.0, 0.0, 20.0)], camera, 800, 600) == []


def test_far_to_near_order_and_size():
    camera = Camera()
    discs = project_scene([(0.0, 0.0, 2.0), (0.0, 0.0, -2.0)], camera, 640, 480)
    assert [d.depth for d in discs] == sorted((d.depth for d in discs), reverse=True)
    assert discs[0].radius < discs[1].radius


def test_up_and_right_on_screen():
    discs = project_scene([(1.0, 1.0, 0.0)], Camera(), 200, 100)
    assert discs[0].x > 100 and discs[0].y < 50


def test_zero_height_is_tolerated():
    discs = project_scene([(0.0, 0.0, 0.0)], Camera(), 100, 0)
    assert len(discs) == 1