"""videogen REST API module.

This module exposes the preview engine's control surface (play, pause, seek,
skip, reset, document replacement) and its outputs over FastAPI.

Mount the routes on an existing app with ``editor_api(app, session)`` or
build a standalone app with ``create_app()``.
"""

from .api import create_app, editor_api
from .models import (
    ErrorResponse,
    SeekRequest,
    SkipRequest,
    StateResponse,
)

__all__ = [
    "create_app",
    "editor_api",
    "ErrorResponse",
    "SeekRequest",
    "SkipRequest",
    "StateResponse",
]
