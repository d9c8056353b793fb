"""Playback clock that drives the animation preview.

The clock owns the logical playback time. An external scheduler (a timer
thread, a frame callback or a game loop) calls ``tick`` once per frame while
playing; the clock advances by the wall-clock time elapsed since the previous
tick and jumps back to zero when it reaches the project duration.

Classes:
    PlaybackClock: Play/pause/seek state machine with looping
"""

import math
import time
from typing import Callable, Optional

from videogen.core.errors import InvalidDuration

__all__ = ['PlaybackClock', 'validate_duration']


def validate_duration(duration: float) -> float:
    """Return ``duration`` as a float, rejecting non-positive or non-finite values.

    Raises:
        InvalidDuration: If ``duration`` is not a positive finite number
    """
    try:
        value = float(duration)
    except (TypeError, ValueError):
        raise InvalidDuration(duration) from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidDuration(duration)
    return value


class PlaybackClock:
    """Looping playback clock with two states, paused (initial) and playing.

    Attributes:
        current_time: Logical playback time in seconds
        is_playing: True while ticks advance the clock
        duration: Loop length in seconds, always positive
        last_tick_timestamp: Wall-clock instant of the last play/tick, or None

    Examples:
        >>> clock = PlaybackClock(duration=120, time_source=lambda: 0.0)
        >>> clock.play(now=100.0)
        >>> clock.tick(100.5)
        0.5
        >>> clock.seek(118.0)
        >>> clock.tick(105.5)
        0.0
    """

    def __init__(
        self,
        duration: float,
        time_source: Optional[Callable[[], float]] = None
    ) -> None:
        self.duration = validate_duration(duration)
        self.current_time = 0.0
        self.is_playing = False
        self.last_tick_timestamp: Optional[float] = None
        self._time_source = time_source or time.monotonic

    def now(self) -> float:
        return self._time_source()

    def play(self, now: Optional[float] = None) -> None:
        """Start advancing on ticks, measuring from ``now``."""
        if self.is_playing:
            return
        self.is_playing = True
        self.last_tick_timestamp = self.now() if now is None else now

    def pause(self) -> None:
        """Freeze playback; ticks are ignored until the next ``play``."""
        self.is_playing = False

    def toggle(self, now: Optional[float] = None) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play(now)

    def tick(self, now: Optional[float] = None) -> float:
        """Advance by the wall-clock time elapsed since the previous tick.

        Reaching the duration resets playback to exactly zero, however far
        the tick overshot.

        Args:
            now: Current wall-clock instant in seconds (defaults to the time source)

        Returns:
            The current playback time after the tick
        """
        if not self.is_playing:
            return self.current_time

        if now is None:
            now = self.now()
        delta = max(0.0, now - self.last_tick_timestamp)
        self.last_tick_timestamp = now

        self.current_time += delta
        if self.current_time >= self.duration:
            self.current_time = 0.0
        return self.current_time

    def seek(self, target_time: float) -> None:
        """Jump to ``target_time``, clamped to ``[0, duration]``.

        Raises:
            ValueError: If ``target_time`` is NaN or infinite; the clock is unchanged
        """
        target_time = float(target_time)
        if not math.isfinite(target_time):
            raise ValueError(f"Seek target must be a finite number of seconds, got {target_time!r}")
        self.current_time = min(max(target_time, 0.0), self.duration)

    def skip(self, delta_seconds: float) -> None:
        """Move relative to the current time, clamped to ``[0, duration]``.

        Raises:
            ValueError: If ``delta_seconds`` is NaN or infinite
        """
        delta_seconds = float(delta_seconds)
        if not math.isfinite(delta_seconds):
            raise ValueError(f"Skip offset must be a finite number of seconds, got {delta_seconds!r}")
        self.seek(self.current_time + delta_seconds)

    def reset(self) -> None:
        self.seek(0.0)

    def set_duration(self, duration: float) -> None:
        """Swap in a new loop length, keeping the play state.

        Raises:
            InvalidDuration: If ``duration`` is not positive; the clock is unchanged
        """
        self.duration = validate_duration(duration)
        if self.current_time > self.duration:
            self.current_time = self.duration

    def __repr__(self) -> str:
        state = "playing" if self.is_playing else "paused"
        return f"PlaybackClock({state}, {self.current_time:.3f}/{self.duration:g}s)"
