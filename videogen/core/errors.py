"""Exceptions raised by the keyframe preview engine.

All errors derive from ``VideogenError``, itself a ``ValueError``, so callers
that already guard input handling with ``except ValueError`` keep working.
"""

__all__ = [
    'VideogenError',
    'EmptyKeyframeList',
    'InvalidDuration',
    'MalformedDocument',
]


class VideogenError(ValueError):
    """Base class for engine errors."""


class EmptyKeyframeList(VideogenError):
    """Interpolation was requested on a keyframe list with no entries."""

    def __init__(self, message: str = "Cannot interpolate an empty keyframe list"):
        super().__init__(message)


class InvalidDuration(VideogenError):
    """A project duration was zero, negative or not a finite number."""

    def __init__(self, duration):
        self.duration = duration
        super().__init__(f"Project duration must be a positive number of seconds, got {duration!r}")


class MalformedDocument(VideogenError):
    """A project document failed structural validation."""
