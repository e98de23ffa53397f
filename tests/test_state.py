import pytest

from wavespacetime.model.projection import CameraOrientation
from wavespacetime.model.state import DisplayToggles, PlaybackState


def test_defaults(store):
    assert store.playback == PlaybackState(0.0, False)
    assert store.toggles == DisplayToggles(True, True)
    assert store.camera == CameraOrientation(-60.0, 25.0)


def test_time_is_clamped(store):
    store.set_current_time(9.0)
    assert store.current_time == 2.5
    assert store.at_end()
    store.set_current_time(-1.0)
    assert store.current_time == 0.0


def test_signals_emitted_after_commit(store):
    seen = []
    store.time_changed.connect(lambda t: seen.append(("time", t, store.current_time)))
    store.changed.connect(lambda: seen.append(("changed", store.current_time)))

    store.set_current_time(1.0)
    assert seen == [("time", 1.0, 1.0), ("changed", 1.0)]


def test_no_signal_without_change(store):
    count = []
    store.changed.connect(lambda: count.append(1))
    store.set_current_time(0.0)
    store.set_playing(False)
    store.set_show_history(True)
    store.set_camera(CameraOrientation(-60.0, 25.0))
    assert count == []


def test_toggles(store):
    received = []
    store.toggles_changed.connect(received.append)

    store.toggle_history()
    store.toggle_vibration()
    assert store.toggles == DisplayToggles(False, False)
    assert received[-1] == DisplayToggles(False, False)

    store.set_show_vibration(True)
    assert store.toggles.show_vibration is True


def test_reset_camera_restores_initial(store):
    store.set_camera(CameraOrientation(10.0, 80.0))
    store.reset_camera()
    assert store.camera == CameraOrientation(-60.0, 25.0)


@pytest.mark.parametrize("t", [0.0, 1.0, 2.5])
def test_clamp_time_inside_range_unchanged(store, t):
    assert store.clamp_time(t) == t
