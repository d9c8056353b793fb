"""Pure functions for the preview's text readouts.

Numbers are rounded half away from zero, the way the editor's readouts have
always displayed them (22.5 degrees shows as 23).
"""

from decimal import ROUND_HALF_UP, Decimal

from videogen.models.document import InterpolatedProperties, Keyframe


def format_fixed(value: float, digits: int) -> str:
    """Format ``value`` with exactly ``digits`` decimals, rounding half up.

    Examples:
        >>> format_fixed(22.5, 0)
        '23'
        >>> format_fixed(12.345, 1)
        '12.3'
        >>> format_fixed(1.1, 2)
        '1.10'
    """
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Shortest plain rendering of a number ("30", "1.2").

    Examples:
        >>> format_number(30.0)
        '30'
        >>> format_number(1.2)
        '1.2'
    """
    return f"{float(value):g}"


def format_time_overlay(current_time: float) -> str:
    """Caption drawn over the preview, e.g. ``'Time: 12.3s'``."""
    return f"Time: {format_fixed(current_time, 1)}s"


def format_status_line(current_time: float, properties: InterpolatedProperties) -> str:
    """Footer readout of time and character properties.

    Examples:
        >>> props = InterpolatedProperties(x=55, y=60, scale=1.1, rotation=22.5)
        >>> format_status_line(45, props)
        'Current Time: 45.0s | Position: (55.0%, 60.0%) | Scale: 1.10 | Rotation: 23°'
    """
    return (
        f"Current Time: {format_fixed(current_time, 1)}s | "
        f"Position: ({format_fixed(properties.x, 1)}%, {format_fixed(properties.y, 1)}%) | "
        f"Scale: {format_fixed(properties.scale, 2)} | "
        f"Rotation: {format_fixed(properties.rotation, 0)}°"
    )


def format_duration_label(duration: float) -> str:
    return f"Total Duration: {format_number(duration)}s"


def format_keyframe_tooltip(keyframe: Keyframe) -> str:
    """Hover text for a keyframe marker, e.g. ``'Keyframe at 30s (x:70, y:50)'``."""
    return (
        f"Keyframe at {format_number(keyframe.time)}s "
        f"(x:{format_number(keyframe.x)}, y:{format_number(keyframe.y)})"
    )


def format_play_button_label(is_playing: bool) -> str:
    return "Pause" if is_playing else "Play"
