"""Pure functions for timeline layout.

Positions on the timeline strip are expressed as percentages of the project
duration, so any renderer can map them onto its own width. Nothing here
touches rendering state.
"""

import math
from typing import Any, Dict, List, Sequence

from videogen.config.defaults import MARKER_INTERVAL
from videogen.core.playback import validate_duration
from videogen.models.document import Clip, Keyframe
from videogen.utils.format_utils import format_keyframe_tooltip

__all__ = [
    'ruler_marker_times',
    'time_to_percent',
    'keyframe_markers',
    'clip_blocks',
    'timeline_layout',
]

# Vertical offset between stacked clip blocks, in pixels
CLIP_ROW_OFFSET = 16


def ruler_marker_times(duration: float, interval: float = MARKER_INTERVAL) -> List[float]:
    """Times of the labelled ruler marks, from 0 up to and including the mark past the end.

    Args:
        duration: Project duration in seconds
        interval: Spacing between marks in seconds

    Returns:
        ``ceil(duration / interval) + 1`` evenly spaced times starting at 0

    Examples:
        >>> ruler_marker_times(120)
        [0, 30, 60, 90, 120]
        >>> ruler_marker_times(100)
        [0, 30, 60, 90, 120]
    """
    duration = validate_duration(duration)
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval!r}")
    count = math.ceil(duration / interval) + 1
    return [i * interval for i in range(count)]


def time_to_percent(time: float, duration: float) -> float:
    """Convert a time to a horizontal position in percent of the duration.

    Not clamped, so items past the end land beyond 100.

    Examples:
        >>> time_to_percent(30, 120)
        25.0
    """
    return time / validate_duration(duration) * 100


def keyframe_markers(keyframes: Sequence[Keyframe], duration: float) -> List[Dict[str, Any]]:
    """Marker position and tooltip for each keyframe, in document order."""
    return [
        {
            'index': index,
            'time': keyframe.time,
            'left': time_to_percent(keyframe.time, duration),
            'title': format_keyframe_tooltip(keyframe),
        }
        for index, keyframe in enumerate(keyframes)
    ]


def clip_blocks(clips: Sequence[Clip], duration: float) -> List[Dict[str, Any]]:
    """Geometry of each clip block; later clips are stacked lower.

    Examples:
        >>> blocks = clip_blocks([Clip(id=1, start=30, end=60, source="a.mp4")], 120)
        >>> blocks[0]['left'], blocks[0]['width'], blocks[0]['top']
        (25.0, 25.0, 0)
    """
    return [
        {
            'id': clip.id,
            'source': clip.source,
            'left': time_to_percent(clip.start, duration),
            'width': time_to_percent(clip.end - clip.start, duration),
            'top': index * CLIP_ROW_OFFSET,
        }
        for index, clip in enumerate(clips)
    ]


def timeline_layout(
    keyframes: Sequence[Keyframe],
    clips: Sequence[Clip],
    duration: float,
    current_time: float
) -> Dict[str, Any]:
    """Everything needed to draw the timeline strip in one structure."""
    return {
        'duration': duration,
        'markers': ruler_marker_times(duration),
        'keyframes': keyframe_markers(keyframes, duration),
        'clips': clip_blocks(clips, duration),
        'playhead': time_to_percent(current_time, duration),
    }
