"""Unit tests for the looping playback clock."""

import math

import pytest

from videogen.core.errors import InvalidDuration
from videogen.core.playback import PlaybackClock, validate_duration


@pytest.fixture
def clock(fake_clock):
    return PlaybackClock(duration=120, time_source=fake_clock)


class TestConstruction:

    def test_initial_state(self, clock):
        assert clock.current_time == 0
        assert clock.is_playing is False
        assert clock.duration == 120
        assert clock.last_tick_timestamp is None

    @pytest.mark.parametrize("duration", [0, -1, -0.001, math.inf, math.nan, "abc", None])
    def test_rejects_invalid_duration(self, duration):
        with pytest.raises(InvalidDuration):
            PlaybackClock(duration=duration)

    def test_validate_duration_returns_float(self):
        assert validate_duration(12) == 12.0
        assert isinstance(validate_duration(12), float)


class TestPlayPause:

    def test_play_captures_timestamp(self, clock, fake_clock):
        clock.play()
        assert clock.is_playing is True
        assert clock.last_tick_timestamp == fake_clock.now

    def test_play_with_explicit_now(self, clock):
        clock.play(now=5.0)
        assert clock.last_tick_timestamp == 5.0

    def test_play_twice_keeps_original_timestamp(self, clock, fake_clock):
        clock.play()
        first = clock.last_tick_timestamp
        fake_clock.advance(3)
        clock.play()
        assert clock.last_tick_timestamp == first

    def test_pause(self, clock, fake_clock):
        clock.play()
        fake_clock.advance(2)
        clock.tick()
        clock.pause()
        assert clock.is_playing is False
        assert clock.current_time == pytest.approx(2)

    def test_toggle(self, clock):
        clock.toggle()
        assert clock.is_playing
        clock.toggle()
        assert not clock.is_playing


class TestTick:

    def test_advances_by_elapsed_wall_clock(self, clock, fake_clock):
        clock.play()
        fake_clock.advance(0.016)
        assert clock.tick() == pytest.approx(0.016)
        fake_clock.advance(0.5)
        assert clock.tick() == pytest.approx(0.516)

    def test_explicit_now(self, clock):
        clock.play(now=10.0)
        assert clock.tick(12.5) == pytest.approx(2.5)
        assert clock.last_tick_timestamp == 12.5

    def test_wraps_to_zero_not_modulo(self, clock):
        clock.seek(118)
        clock.play(now=0.0)
        assert clock.tick(5.0) == 0.0

    def test_huge_overshoot_still_wraps_once(self, clock):
        clock.play(now=0.0)
        assert clock.tick(1000.0) == 0.0

    def test_exactly_reaching_duration_wraps(self, clock):
        clock.seek(119)
        clock.play(now=0.0)
        assert clock.tick(1.0) == 0.0

    def test_continues_after_wrap(self, clock):
        clock.seek(118)
        clock.play(now=0.0)
        clock.tick(5.0)
        assert clock.tick(6.5) == pytest.approx(1.5)

    def test_backwards_wall_clock_does_not_rewind(self, clock):
        clock.seek(50)
        clock.play(now=10.0)
        assert clock.tick(9.0) == 50
        assert clock.tick(10.0) == pytest.approx(51)


class TestPauseFreeze:
    """A stray tick after pause must not move time."""

    def test_stray_ticks_ignored(self, clock, fake_clock):
        clock.play()
        fake_clock.advance(4)
        clock.tick()
        clock.pause()
        frozen = clock.current_time
        for _ in range(5):
            fake_clock.advance(1)
            assert clock.tick() == frozen
        assert clock.current_time == frozen

    def test_resume_measures_from_play(self, clock, fake_clock):
        clock.play()
        fake_clock.advance(4)
        clock.tick()
        clock.pause()
        fake_clock.advance(100)
        clock.play()
        fake_clock.advance(1)
        assert clock.tick() == pytest.approx(5)

    def test_tick_before_first_play_is_noop(self, clock):
        assert clock.tick(50.0) == 0
        assert clock.last_tick_timestamp is None


class TestSeekSkipReset:

    @pytest.mark.parametrize("target,expected", [
        (45, 45),
        (-3, 0),
        (120, 120),
        (500, 120),
        (0, 0),
    ])
    def test_seek_clamps(self, clock, target, expected):
        clock.seek(target)
        assert clock.current_time == expected

    def test_skip_forward_and_back(self, clock):
        clock.skip(10)
        assert clock.current_time == 10
        clock.skip(-4)
        assert clock.current_time == 6

    def test_skip_clamps(self, clock):
        clock.seek(115)
        clock.skip(10)
        assert clock.current_time == 120
        clock.seek(3)
        clock.skip(-10)
        assert clock.current_time == 0

    def test_reset(self, clock):
        clock.seek(80)
        clock.reset()
        assert clock.current_time == 0

    @pytest.mark.parametrize("target", [math.nan, math.inf, -math.inf])
    def test_seek_rejects_non_finite(self, clock, target):
        clock.seek(40)
        with pytest.raises(ValueError, match="finite"):
            clock.seek(target)
        assert clock.current_time == 40

    @pytest.mark.parametrize("delta", [math.nan, math.inf, -math.inf])
    def test_skip_rejects_non_finite(self, clock, delta):
        clock.seek(40)
        with pytest.raises(ValueError, match="finite"):
            clock.skip(delta)
        assert clock.current_time == 40

    def test_ticks_after_rejected_seek_still_wrap(self, clock):
        clock.seek(118)
        with pytest.raises(ValueError):
            clock.seek(math.nan)
        clock.play(now=0.0)
        assert clock.tick(5.0) == 0.0

    def test_seek_keeps_play_state(self, clock):
        clock.play(now=0.0)
        clock.seek(30)
        assert clock.is_playing
        clock.pause()
        clock.seek(60)
        assert not clock.is_playing
        assert clock.current_time == 60

    def test_seek_while_playing_then_tick(self, clock):
        clock.play(now=0.0)
        clock.seek(30)
        assert clock.tick(1.0) == pytest.approx(31)


class TestSetDuration:

    def test_clamps_current_time(self, clock):
        clock.seek(100)
        clock.set_duration(60)
        assert clock.duration == 60
        assert clock.current_time == 60

    def test_keeps_time_within_new_duration(self, clock):
        clock.seek(20)
        clock.set_duration(60)
        assert clock.current_time == 20

    def test_rejects_invalid_and_keeps_state(self, clock):
        clock.seek(20)
        with pytest.raises(InvalidDuration):
            clock.set_duration(0)
        assert clock.duration == 120
        assert clock.current_time == 20
