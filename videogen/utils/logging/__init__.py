"""Logging utilities for videogen."""

from .log import (
    BOLD, UNDERLINE, ITALIC,
    RED, ORANGE, YELLOW, GREEN, BLUE, PURPLE,
    RESET_COLOR,
    debug, info, warning, error,
)

__all__ = [
    "BOLD", "UNDERLINE", "ITALIC",
    "RED", "ORANGE", "YELLOW", "GREEN", "BLUE", "PURPLE",
    "RESET_COLOR",
    "debug", "info", "warning", "error",
]
