import pytest

from wavespacetime.controller.animation import AnimationDriver, FrameTicker, screen_refresh_interval_ms


@pytest.fixture
def driver(store, ticker):
    return AnimationDriver(store, ticker, increment=0.015)


def test_play_starts_ticking(store, ticker, driver):
    driver.play()
    assert store.is_playing
    assert ticker.is_active()


def test_tick_advances_by_increment(store, ticker, driver):
    driver.play()
    ticker.fire(10)
    assert store.current_time == pytest.approx(0.15)


def test_tick_clamps_exactly_at_end(store, ticker, driver):
    driver.scrub_to(2.49)
    driver.play()
    ticker.fire()
    assert store.current_time == 2.5
    assert not store.is_playing
    assert not ticker.is_active()


def test_full_run_never_overshoots(store, ticker, driver):
    times = []
    store.time_changed.connect(times.append)
    driver.play()
    ticker.fire(500)
    assert max(times) == 2.5
    assert store.current_time == 2.5
    assert not store.is_playing


def test_play_at_end_replays_from_start(store, ticker, driver):
    driver.scrub_to(2.5)
    driver.play()
    assert store.current_time == 0.0
    assert store.is_playing


def test_scrub_pauses(store, ticker, driver):
    driver.play()
    ticker.fire(3)
    driver.scrub_to(1.2)
    assert not store.is_playing
    assert not ticker.is_active()
    assert store.current_time == pytest.approx(1.2)


def test_scrub_is_clamped(store, driver):
    driver.scrub_to(7.0)
    assert store.current_time == 2.5
    driver.jump_to(-3.0)
    assert store.current_time == 0.0


def test_reset(store, ticker, driver):
    driver.play()
    ticker.fire(20)
    driver.reset()
    assert store.current_time == 0.0
    assert not store.is_playing
    assert not ticker.is_active()


def test_toggle_play(store, driver):
    driver.toggle_play()
    assert store.is_playing
    driver.toggle_play()
    assert not store.is_playing


def test_stale_tick_while_idle_does_nothing(store, ticker, driver):
    driver.scrub_to(1.0)
    ticker.fire()
    assert store.current_time == pytest.approx(1.0)


def test_shutdown_stops_tick(store, ticker, driver):
    driver.play()
    driver.shutdown()
    assert not ticker.is_active()
    assert not store.is_playing


def test_frame_ticker_wraps_timer(qapp):
    ticker = FrameTicker(16)
    ticker.start()
    assert ticker.is_active()
    assert ticker.timer.interval() == 16
    ticker.stop()
    assert not ticker.is_active()


def test_refresh_interval_is_positive(qapp):
    assert screen_refresh_interval_ms(60.0) >= 1
