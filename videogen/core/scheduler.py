"""Background frame scheduler for headless playback.

``PlaybackScheduler`` stands in for a display's per-frame callback: a daemon
thread calls ``EditorSession.tick`` at a fixed rate and hands each resulting
snapshot to an optional frame callback. Ticks delivered while the session is
paused are no-ops, so a frame that races with ``pause()`` cannot move time.
"""

import logging
import threading
from typing import Callable, Optional

from videogen.config.settings import get_log_level, get_tick_rate
from videogen.core.editor import EditorSession
from videogen.models.document import PlaybackSnapshot

__all__ = ['PlaybackScheduler']

log = logging.getLogger(__name__)
log.setLevel(get_log_level())

FrameCallback = Callable[[PlaybackSnapshot], None]


class PlaybackScheduler:
    """Drive an editor session's clock from a timer thread.

    Args:
        session: Session whose clock is ticked
        on_frame: Called with a snapshot after every tick while playing
        tick_rate: Ticks per second (defaults to VIDEOGEN_TICK_RATE or 60)

    If ``on_frame`` raises, the scheduler stops and keeps the exception in
    ``error``; it is re-raised by ``stop()``.
    """

    def __init__(
        self,
        session: EditorSession,
        on_frame: Optional[FrameCallback] = None,
        tick_rate: Optional[float] = None
    ) -> None:
        rate = get_tick_rate() if tick_rate is None else tick_rate
        if rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {rate!r}")
        self.session = session
        self.on_frame = on_frame
        self.interval = 1.0 / rate
        self.error: Optional[BaseException] = None
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self.error = None
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="videogen-playback", daemon=True)
        self._thread.start()
        log.info(f"Playback scheduler started at {1.0 / self.interval:g} ticks/s")

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
            log.info("Playback scheduler stopped")
        if self.error is not None:
            error, self.error = self.error, None
            raise error

    def step(self) -> Optional[PlaybackSnapshot]:
        """Run a single tick and return the snapshot passed to ``on_frame``.

        Returns None while paused or when no frame callback is set.
        """
        with self.session.lock:
            if not self.session.is_playing:
                return None
            self.session.tick()
            snapshot = self.session.snapshot() if self.on_frame else None
        if snapshot is not None:
            self.on_frame(snapshot)
        return snapshot

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval):
            try:
                self.step()
            except Exception as e:
                log.error(f"Playback scheduler stopped on error: {e}")
                self.error = e
                return

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
