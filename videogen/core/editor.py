"""Editor session: the single owner of the preview state.

An ``EditorSession`` binds the active project document to a
``PlaybackClock``. The document is only ever replaced whole: a new document
is validated first and then keyframes and duration are swapped in one step,
so a rejected document leaves the session exactly as it was.

Every mutation and snapshot runs under one re-entrant lock, which linearizes
the scheduler thread's ticks with control calls arriving from the UI or the
HTTP API.
"""

import threading
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import pandas as pd

from videogen.config.defaults import SKIP_SECONDS
from videogen.config.settings import get_default_document, load_document
from videogen.core.keyframes import bake_frames, interpolate
from videogen.core.playback import PlaybackClock
from videogen.models.document import (
    InterpolatedProperties,
    Keyframe,
    PlaybackSnapshot,
    ProjectDocument,
)
from videogen.utils.logging import log

__all__ = ['EditorSession']

DocumentInput = Union[ProjectDocument, Dict[str, Any]]


class EditorSession:
    """Active document plus playback state, safe to share across threads.

    Args:
        document: Initial document (raw dict or validated); defaults to the demo template
        time_source: Wall-clock function for the playback clock (seconds)

    Examples:
        >>> session = EditorSession()
        >>> session.seek(45)
        >>> session.properties().x
        55.0
    """

    def __init__(
        self,
        document: Optional[DocumentInput] = None,
        time_source: Optional[Callable[[], float]] = None
    ) -> None:
        self._lock = threading.RLock()
        self._document = get_default_document() if document is None else load_document(document)
        self._clock = PlaybackClock(self._document.duration, time_source=time_source)
        self._listeners: List[Callable[[ProjectDocument], None]] = []

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def document(self) -> ProjectDocument:
        with self._lock:
            return self._document

    @property
    def keyframes(self) -> Tuple[Keyframe, ...]:
        with self._lock:
            return self._document.keyframes

    @property
    def current_time(self) -> float:
        with self._lock:
            return self._clock.current_time

    @property
    def is_playing(self) -> bool:
        with self._lock:
            return self._clock.is_playing

    @property
    def duration(self) -> float:
        with self._lock:
            return self._clock.duration

    # Control surface

    def play(self) -> None:
        with self._lock:
            if not self._clock.is_playing:
                self._clock.play()
                log.debug(f"Playback started at {self._clock.current_time:.2f}s")

    def pause(self) -> None:
        with self._lock:
            if self._clock.is_playing:
                self._clock.pause()
                log.debug(f"Playback paused at {self._clock.current_time:.2f}s")

    def toggle(self) -> None:
        with self._lock:
            if self._clock.is_playing:
                self.pause()
            else:
                self.play()

    def seek(self, target_time: float) -> None:
        with self._lock:
            self._clock.seek(target_time)

    def skip(self, delta_seconds: float = SKIP_SECONDS) -> None:
        with self._lock:
            self._clock.skip(delta_seconds)

    def reset(self) -> None:
        with self._lock:
            self._clock.reset()

    def tick(self, now: Optional[float] = None) -> float:
        """Advance the clock by one scheduler frame."""
        with self._lock:
            before = self._clock.current_time
            current = self._clock.tick(now)
            if self._clock.is_playing and current < before:
                log.debug(f"Looped back to start after {before:.2f}s")
            return current

    def replace_document(self, document: DocumentInput) -> ProjectDocument:
        """Swap in a complete new document.

        The new document is validated before anything changes. Keyframes and
        duration are replaced together; playback position and state are kept,
        with the position clamped to the new duration.

        Raises:
            MalformedDocument: If the document does not validate
            InvalidDuration: If its duration is not positive
        """
        try:
            validated = load_document(document)
        except ValueError as e:
            log.warning(f"Rejected document update: {e}")
            raise

        with self._lock:
            self._clock.set_duration(validated.duration)
            self._document = validated
            listeners = list(self._listeners)

        log.info(
            f"Document '{validated.project.name}' applied: "
            f"{len(validated.keyframes)} keyframe(s), {validated.duration:g}s"
        )
        for listener in listeners:
            listener(validated)
        return validated

    def add_document_listener(self, listener: Callable[[ProjectDocument], None]) -> None:
        with self._lock:
            self._listeners.append(listener)

    # Outputs

    def properties(self, query_time: Optional[float] = None) -> InterpolatedProperties:
        """Interpolated character properties at ``query_time`` (default: now).

        Raises:
            EmptyKeyframeList: If the document has no keyframes
        """
        with self._lock:
            t = self._clock.current_time if query_time is None else query_time
            return interpolate(self._document.keyframes, t)

    def snapshot(self) -> PlaybackSnapshot:
        """Consistent view of time, play state and properties for rendering.

        ``properties`` is None when the document has no keyframes, so clock
        state can always be reported.
        """
        with self._lock:
            keyframes = self._document.keyframes
            current_time = self._clock.current_time
            return PlaybackSnapshot(
                current_time=current_time,
                is_playing=self._clock.is_playing,
                duration=self._clock.duration,
                properties=interpolate(keyframes, current_time) if keyframes else None,
            )

    def bake(self, fps: Optional[float] = None) -> pd.DataFrame:
        """Per-frame properties for the whole project at ``fps`` (default: project fps)."""
        with self._lock:
            document = self._document
        return bake_frames(document.keyframes, document.duration, fps or document.project.fps)

    def __repr__(self) -> str:
        return f"EditorSession({self.document.project.name!r}, {self._clock!r})"
