"""Preview engine core: interpolation, playback clock and session state."""

from .errors import EmptyKeyframeList, InvalidDuration, MalformedDocument, VideogenError
from .keyframes import bake_frames, find_bracketing_keyframes, interpolate, sort_keyframes
from .playback import PlaybackClock

__all__ = [
    'VideogenError',
    'EmptyKeyframeList',
    'InvalidDuration',
    'MalformedDocument',
    'interpolate',
    'find_bracketing_keyframes',
    'sort_keyframes',
    'bake_frames',
    'PlaybackClock',
]
