import math

import numpy as np
import pytest

from wavespacetime.model.projection import CameraOrientation, Projector, clamp_elevation


@pytest.fixture
def projector(config):
    return Projector(config)


def test_centre_of_diagram_maps_to_viewport_centre(projector):
    p = projector.project(2.0, 1.25, 0.0, 1000, 600, CameraOrientation(0.0, 90.0))
    assert p.x == pytest.approx(500.0)
    assert p.y == pytest.approx(300.0)


def test_centre_is_fixed_for_any_camera(projector):
    for azim in (-170.0, -60.0, 0.0, 45.0, 400.0):
        for elev in (0.0, 25.0, 90.0):
            p = projector.project(2.0, 1.25, 0.0, 1000, 600, CameraOrientation(azim, elev))
            assert p.x == pytest.approx(500.0)
            assert p.y == pytest.approx(300.0)


def test_scale_uses_smaller_viewport_side(projector):
    assert projector.scale(1000, 600) == pytest.approx(120.0)
    assert projector.scale(300, 800) == pytest.approx(60.0)


def test_edge_on_view_hides_time_axis(projector):
    camera = CameraOrientation(0.0, 0.0)
    a = projector.project(1.0, 0.0, 0.0, 1000, 600, camera)
    b = projector.project(1.0, 2.5, 0.0, 1000, 600, camera)
    # time only moves along x at azimuth 0 with no tilt -> collapses entirely
    assert a.x == pytest.approx(b.x)
    assert a.y == pytest.approx(b.y)


def test_displacement_points_up(projector):
    camera = CameraOrientation(-60.0, 25.0)
    base = projector.project(1.0, 1.0, 0.0, 1000, 600, camera)
    lifted = projector.project(1.0, 1.0, 1.0, 1000, 600, camera)
    assert lifted.x == pytest.approx(base.x)
    assert base.y - lifted.y == pytest.approx(120.0 * math.cos(math.radians(25.0)))


def test_top_down_view_flattens_displacement(projector):
    camera = CameraOrientation(30.0, 90.0)
    base = projector.project(3.0, 0.5, 0.0, 1000, 600, camera)
    lifted = projector.project(3.0, 0.5, 1.0, 1000, 600, camera)
    assert lifted.x == pytest.approx(base.x)
    assert lifted.y == pytest.approx(base.y)


def test_projection_is_affine(projector):
    camera = CameraOrientation(-60.0, 25.0)
    p0 = projector.project(0.0, 0.0, 0.0, 1000, 600, camera)
    p1 = projector.project(4.0, 2.5, 1.0, 1000, 600, camera)
    mid = projector.project(2.0, 1.25, 0.5, 1000, 600, camera)
    assert mid.x == pytest.approx((p0.x + p1.x) / 2)
    assert mid.y == pytest.approx((p0.y + p1.y) / 2)


def test_array_matches_scalar(projector):
    camera = CameraOrientation(-35.0, 40.0)
    xs = np.linspace(0.0, 4.0, 9)
    zs = np.sin(xs)
    sx, sy = projector.project_array(xs, 0.75, zs, 1000, 600, camera)
    assert sx.shape == sy.shape == (9,)
    for i, x in enumerate(xs):
        p = projector.project(x, 0.75, zs[i], 1000, 600, camera)
        assert sx[i] == pytest.approx(p.x)
        assert sy[i] == pytest.approx(p.y)


def test_array_broadcasts_scalar_inputs(projector):
    sx, sy = projector.project_array(np.array([0.0, 1.0, 2.0]), 0.0, 0.0, 1000, 600, CameraOrientation())
    assert sx.shape == (3,)
    assert sy.shape == (3,)


def test_camera_elevation_clamped():
    assert CameraOrientation(0.0, 120.0).elevation_deg == 90.0
    assert CameraOrientation(0.0, -5.0).elevation_deg == 0.0
    assert clamp_elevation(45.0) == 45.0


def test_rotated_keeps_azimuth_unbounded():
    camera = CameraOrientation(170.0, 80.0).rotated(30.0, 30.0)
    assert camera.azimuth_deg == pytest.approx(200.0)
    assert camera.elevation_deg == 90.0


def test_scalar_projection_returns_plain_floats(projector):
    p = projector.project(1.0, 2.0, 0.5, 1000, 600, CameraOrientation(-60.0, 25.0))
    assert type(p.x) is float
    assert type(p.y) is float
