"""
videogen utility modules - pure functions organized by domain.

Modules:
    timeline_utils: Ruler marks, keyframe markers and clip geometry
    format_utils: Text readouts for the preview and footer
    logging: Coloured console logging helpers
"""

__all__ = [
    "timeline_utils",
    "format_utils",
]
