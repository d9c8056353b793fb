"""
videogen - keyframe preview engine for character animation on a video timeline.

Package structure:
    videogen/
        core/       - Interpolation, playback clock, editor session, scheduler
        models/     - Pydantic models for the project document
        config/     - Default document templates and settings loading
        utils/      - Pure helpers (timeline layout, readout formatting, logging)
        api/        - FastAPI control surface

Typical use:
    >>> from videogen.core.editor import EditorSession
    >>> session = EditorSession()
    >>> session.seek(45)
    >>> session.properties().x
    55.0
"""

__version__ = "0.3.0"
__all__ = ["core", "models", "config", "utils", "api"]
