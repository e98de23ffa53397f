import pytest

from wavespacetime.controller.interaction import InteractionController


@pytest.fixture
def controller(store):
    return InteractionController(store, sensitivity=0.5)


def test_move_without_press_is_ignored(store, controller):
    before = store.camera
    controller.drag_move(50.0, 80.0)
    assert store.camera == before
    assert not controller.is_dragging


def test_drag_right_decreases_azimuth(store, controller):
    controller.drag_start(100.0, 100.0)
    controller.drag_move(120.0, 100.0)
    assert store.camera.azimuth_deg == pytest.approx(-70.0)
    assert store.camera.elevation_deg == pytest.approx(25.0)


def test_drag_down_increases_elevation(store, controller):
    controller.drag_start(100.0, 100.0)
    controller.drag_move(100.0, 110.0)
    assert store.camera.elevation_deg == pytest.approx(30.0)


def test_deltas_are_incremental(store, controller):
    controller.drag_start(0.0, 0.0)
    controller.drag_move(10.0, 0.0)
    controller.drag_move(20.0, 0.0)
    assert store.camera.azimuth_deg == pytest.approx(-70.0)


def test_elevation_clamped_for_large_drags(store, controller):
    controller.drag_start(0.0, 0.0)
    controller.drag_move(0.0, 1000.0)
    assert store.camera.elevation_deg == 90.0
    controller.drag_move(0.0, -5000.0)
    assert store.camera.elevation_deg == 0.0


def test_release_stops_rotation(store, controller):
    controller.drag_start(0.0, 0.0)
    controller.drag_end()
    before = store.camera
    controller.drag_move(40.0, 40.0)
    assert store.camera == before
