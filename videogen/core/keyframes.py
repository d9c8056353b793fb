"""Keyframe interpolation for character animation previews.

This module is the pure half of the preview engine. Given the keyframes of a
character animation and a playback time it computes the interpolated
position, scale and rotation. It holds no state and may be called from any
thread.

Selection rules:
- ``before`` is the keyframe with the greatest time not after the query,
  the last one in sequence order winning ties. Falls back to the first
  keyframe.
- ``after`` is the first keyframe in sequence order whose time is not before
  the query. Falls back to the last keyframe.
- An exact hit on ``before`` or a collapsed pair returns ``before`` as-is,
  which also holds the first/last value outside the keyframe span.

Functions:
    interpolate: Interpolated properties at one time
    find_bracketing_keyframes: The ``(before, after)`` pair for a time
    sort_keyframes: Stable time-ordered copy of a keyframe list
    bake_frames: Per-frame properties over a whole project as a DataFrame
"""

import math
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from videogen.core.errors import EmptyKeyframeList, InvalidDuration
from videogen.models.document import InterpolatedProperties, Keyframe

__all__ = [
    'PROPERTY_NAMES',
    'interpolate',
    'find_bracketing_keyframes',
    'sort_keyframes',
    'bake_frames',
]

PROPERTY_NAMES = ('x', 'y', 'scale', 'rotation')


def find_bracketing_keyframes(
    keyframes: Sequence[Keyframe],
    query_time: float
) -> Tuple[int, int]:
    """Locate the keyframes surrounding a playback time.

    Args:
        keyframes: Keyframes in document order (not necessarily sorted)
        query_time: Playback time in seconds

    Returns:
        Tuple ``(before_index, after_index)`` into ``keyframes``

    Raises:
        EmptyKeyframeList: If ``keyframes`` is empty

    Examples:
        >>> kfs = [Keyframe(time=0, x=0, y=0), Keyframe(time=10, x=10, y=0)]
        >>> find_bracketing_keyframes(kfs, 5)
        (0, 1)
        >>> find_bracketing_keyframes(kfs, 10)
        (1, 1)
        >>> find_bracketing_keyframes(kfs, -3)
        (0, 0)
    """
    if not keyframes:
        raise EmptyKeyframeList()

    before_index = -1
    after_index = -1
    before_time = -math.inf

    for i, keyframe in enumerate(keyframes):
        # Greatest qualifying time, last occurrence wins on ties
        if keyframe.time <= query_time and keyframe.time >= before_time:
            before_index = i
            before_time = keyframe.time
        if keyframe.time >= query_time:
            if after_index == -1 or keyframe.time < keyframes[after_index].time:
                after_index = i

    # Out of range: hold the earliest or latest keyframe by time
    if before_index == -1:
        before_index = min(range(len(keyframes)), key=lambda i: keyframes[i].time)
    if after_index == -1:
        after_index = max(range(len(keyframes)), key=lambda i: keyframes[i].time)

    return before_index, after_index


def interpolate(keyframes: Sequence[Keyframe], query_time: float) -> InterpolatedProperties:
    """Interpolate character properties at a playback time.

    Each of x, y, scale and rotation is interpolated linearly and
    independently between the bracketing keyframes. Times outside the
    keyframe span hold the first or last keyframe's values.

    Args:
        keyframes: Keyframes in document order
        query_time: Playback time in seconds, any real number

    Returns:
        InterpolatedProperties for ``query_time``

    Raises:
        EmptyKeyframeList: If ``keyframes`` is empty

    Examples:
        >>> kfs = [
        ...     Keyframe(time=30, x=70, y=50, scale=1.2, rotation=0),
        ...     Keyframe(time=60, x=40, y=70, scale=1.0, rotation=45),
        ... ]
        >>> interpolate(kfs, 45).x
        55.0
        >>> interpolate(kfs, 150).rotation
        45.0
    """
    before_index, after_index = find_bracketing_keyframes(keyframes, query_time)
    before = keyframes[before_index]
    after = keyframes[after_index]

    if before.time == query_time:
        return before.properties()

    if before_index == after_index or before.time == after.time:
        return before.properties()

    factor = (query_time - before.time) / (after.time - before.time)

    return InterpolatedProperties(**{
        name: getattr(before, name) + (getattr(after, name) - getattr(before, name)) * factor
        for name in PROPERTY_NAMES
    })


def sort_keyframes(keyframes: Sequence[Keyframe]) -> list[Keyframe]:
    """Return keyframes ordered by time, keeping document order for equal times.

    Examples:
        >>> kfs = [Keyframe(time=5, x=1, y=0), Keyframe(time=0, x=2, y=0)]
        >>> [k.time for k in sort_keyframes(kfs)]
        [0.0, 5.0]
    """
    return sorted(keyframes, key=lambda keyframe: keyframe.time)


def bake_frames(
    keyframes: Sequence[Keyframe],
    duration: float,
    fps: float = 30
) -> pd.DataFrame:
    """Sample the animation once per output frame.

    Frame ``i`` is sampled at ``i / fps`` seconds; the project spans
    ``ceil(duration * fps)`` frames.

    Args:
        keyframes: Keyframes in document order
        duration: Project duration in seconds
        fps: Output frame rate

    Returns:
        DataFrame indexed by frame number with columns
        ``time, x, y, scale, rotation``

    Raises:
        EmptyKeyframeList: If ``keyframes`` is empty
        InvalidDuration: If ``duration`` is not positive
        ValueError: If ``fps`` is not positive

    Examples:
        >>> kfs = [Keyframe(time=0, x=0, y=0), Keyframe(time=1, x=10, y=0)]
        >>> df = bake_frames(kfs, duration=1, fps=4)
        >>> list(df['x'])
        [0.0, 2.5, 5.0, 7.5]
    """
    if not keyframes:
        raise EmptyKeyframeList()
    if not (duration > 0) or not math.isfinite(duration):
        raise InvalidDuration(duration)
    if not fps > 0:
        raise ValueError(f"fps must be positive, got {fps!r}")

    # Round off float noise first: 0.1 * 30 is 3.0000000000000004, not 3
    frame_count = math.ceil(round(duration * fps, 9))
    times = np.arange(frame_count) / fps

    rows = []
    for t in times:
        props = interpolate(keyframes, float(t))
        rows.append((float(t),) + tuple(getattr(props, name) for name in PROPERTY_NAMES))

    frames = pd.DataFrame(rows, columns=('time',) + PROPERTY_NAMES)
    frames.index.name = 'frame'
    return frames
