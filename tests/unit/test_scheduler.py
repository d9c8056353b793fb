"""Unit tests for the background playback scheduler."""

import threading
import time

import pytest

from videogen.core.editor import EditorSession
from videogen.core.scheduler import PlaybackScheduler


@pytest.fixture
def session(demo_document, fake_clock):
    return EditorSession(demo_document, time_source=fake_clock)


class TestStep:
    """``step`` is the body of one scheduler iteration, testable without a thread."""

    def test_paused_step_does_nothing(self, session, fake_clock):
        frames = []
        scheduler = PlaybackScheduler(session, on_frame=frames.append, tick_rate=60)
        fake_clock.advance(5)
        assert scheduler.step() is None
        assert frames == []
        assert session.current_time == 0

    def test_playing_step_ticks_and_reports(self, session, fake_clock):
        frames = []
        scheduler = PlaybackScheduler(session, on_frame=frames.append, tick_rate=60)
        session.play()
        fake_clock.advance(45)
        snapshot = scheduler.step()
        assert snapshot.current_time == pytest.approx(45)
        assert snapshot.properties.x == pytest.approx(55)
        assert frames == [snapshot]

    def test_playing_step_without_keyframes(self, demo_document, fake_clock):
        demo_document["animation"]["character"]["animations"] = []
        session = EditorSession(demo_document, time_source=fake_clock)
        frames = []
        scheduler = PlaybackScheduler(session, on_frame=frames.append, tick_rate=60)
        session.play()
        fake_clock.advance(2)
        snapshot = scheduler.step()
        assert snapshot.current_time == pytest.approx(2)
        assert snapshot.properties is None
        assert frames == [snapshot]

    def test_step_without_callback(self, session, fake_clock):
        scheduler = PlaybackScheduler(session, tick_rate=60)
        session.play()
        fake_clock.advance(1)
        assert scheduler.step() is None
        assert session.current_time == pytest.approx(1)


class TestConfiguration:

    def test_interval_from_rate(self, session):
        assert PlaybackScheduler(session, tick_rate=50).interval == pytest.approx(0.02)

    def test_rate_from_environment(self, session, monkeypatch):
        monkeypatch.setenv("VIDEOGEN_TICK_RATE", "25")
        assert PlaybackScheduler(session).interval == pytest.approx(0.04)

    @pytest.mark.parametrize("rate", [0, -60])
    def test_rejects_non_positive_rate(self, session, rate):
        with pytest.raises(ValueError, match="tick_rate must be positive"):
            PlaybackScheduler(session, tick_rate=rate)


class TestThreadedPlayback:

    def test_advances_in_real_time_and_stops(self, demo_document):
        session = EditorSession(demo_document)
        got_frame = threading.Event()
        scheduler = PlaybackScheduler(session, on_frame=lambda s: got_frame.set(), tick_rate=200)

        session.play()
        with scheduler:
            assert scheduler.running
            assert got_frame.wait(timeout=5)
            time.sleep(0.05)
        assert not scheduler.running
        assert session.current_time > 0

    def test_pause_freezes_time_while_running(self, demo_document):
        session = EditorSession(demo_document)
        scheduler = PlaybackScheduler(session, tick_rate=200)
        session.play()
        scheduler.start()
        try:
            time.sleep(0.05)
            session.pause()
            frozen = session.current_time
            time.sleep(0.05)
            assert session.current_time == frozen
        finally:
            scheduler.stop()

    def test_start_is_idempotent(self, session):
        scheduler = PlaybackScheduler(session, tick_rate=100)
        scheduler.start()
        thread = scheduler._thread
        scheduler.start()
        assert scheduler._thread is thread
        scheduler.stop()

    def test_callback_error_stops_and_reraises(self, demo_document):
        session = EditorSession(demo_document)

        def broken(snapshot):
            raise RuntimeError("renderer crashed")

        scheduler = PlaybackScheduler(session, on_frame=broken, tick_rate=200)
        session.play()
        scheduler.start()
        deadline = time.monotonic() + 5
        while scheduler.running and time.monotonic() < deadline:
            time.sleep(0.01)
        assert not scheduler.running
        with pytest.raises(RuntimeError, match="renderer crashed"):
            scheduler.stop()
