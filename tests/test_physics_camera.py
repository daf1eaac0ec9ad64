import math

import pytest

from orbits.camera import Camera2D
from orbits.physics import (
    TWO_PI,
    circular_orbit_velocity,
    orbital_angular_velocity,
    point_accelerations,
    wrap_angle,
)
from orbits.vector_utils import blend_color, clamp, polar_to_cartesian


def test_wrap_angle_range() -> None:
    assert wrap_angle(0.0) == 0.0
    assert wrap_angle(TWO_PI) == pytest.approx(0.0)
    assert wrap_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
    assert wrap_angle(5 * math.pi) == pytest.approx(math.pi)
    assert 0.0 <= wrap_angle(-1e-18) < TWO_PI


def test_kepler_relations() -> None:
    gm, r = 1.0e6, 100.0
    assert circular_orbit_velocity(gm, r) == pytest.approx(100.0)
    assert orbital_angular_velocity(gm, r) == pytest.approx(1.0)
    assert circular_orbit_velocity(gm, 0.0) == 0.0
    assert orbital_angular_velocity(gm, -5.0) == 0.0


def test_vector_helpers() -> None:
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    x, y = polar_to_cartesian(2.0, math.pi / 2)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(2.0)
    assert blend_color((0, 0, 0), (200, 100, 50), 0.5) == (100, 50, 25)
    assert blend_color((0, 0, 0), (200, 100, 50), 2.0) == (200, 100, 50)


@pytest.mark.parametrize("size", [(800, 800), (1920, 1080), (640, 900)])
def test_fit_radius_keeps_orbit_on_screen(size) -> None:
    cam = Camera2D()
    cam.set_viewport_size(*size)
    cam.fit_radius(300.0)
    w, h = size
    for theta in (0.0, math.pi / 2, math.pi, 3 * math.pi / 2):
        px, py = cam.world_to_screen(polar_to_cartesian(300.0, theta))
        assert 0 <= px < w
        assert 0 <= py < h
    assert cam.world_to_screen((0.0, 0.0)) == (w // 2, h // 2)


def test_screen_to_world_inverts_world_to_screen() -> None:
    cam = Camera2D()
    cam.set_viewport_size(800, 600)
    cam.fit_radius(150.0)
    wx, wy = cam.screen_to_world(cam.world_to_screen((120.0, -40.0)))
    assert wx == pytest.approx(120.0, abs=1.0 / cam.scale)
    assert wy == pytest.approx(-40.0, abs=1.0 / cam.scale)


def test_length_to_screen_has_minimum() -> None:
    cam = Camera2D(scale=0.01)
    assert cam.length_to_screen(5.0, minimum=2) == 2
    cam.scale = 2.0
    assert cam.length_to_screen(5.0) == 10


def test_point_accelerations_pull_toward_attractors() -> None:
    (ax, ay), = point_accelerations([(10.0, 0.0)], [((0.0, 0.0), 100.0)])
    assert ax == pytest.approx(-1.0)
    assert ay == pytest.approx(0.0)

    left, right = point_accelerations(
        [(-5.0, 0.0), (5.0, 0.0)],
        [((0.0, 0.0), 50.0), ((0.0, 0.0), 50.0)],
    )
    assert left[0] == pytest.approx(4.0)
    assert right[0] == pytest.approx(-4.0)


def test_point_accelerations_softening_and_coincident_points() -> None:
    soft, = point_accelerations([(3.0, 0.0)], [((0.0, 0.0), 1.0)], softening=4.0)
    assert soft[0] == pytest.approx(-3.0 / 125.0)
    assert point_accelerations([(0.0, 0.0)], [((0.0, 0.0), 1.0)]) == [(0.0, 0.0)]
