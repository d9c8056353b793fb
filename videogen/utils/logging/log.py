"""Coloured console logging for videogen.

Thin helpers over the stdlib ``videogen`` logger that prefix each message and
wrap it in an ANSI colour, so engine events stand out in a busy terminal.
"""

import logging
import os

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
ITALIC = "\033[3m"

RED = "\033[91m"
ORANGE = "\033[38;5;208m"
YELLOW = "\033[93m"
GREEN = "\033[92m"
BLUE = "\033[94m"
PURPLE = "\033[95m"

RESET_COLOR = "\033[0m"

PREFIX = "videogen"

_logger = logging.getLogger(PREFIX)


def _use_color() -> bool:
    return os.environ.get("NO_COLOR") is None


def _format(message: str, color: str) -> str:
    if _use_color():
        return f"{color}[{PREFIX}]{RESET_COLOR} {message}"
    return f"[{PREFIX}] {message}"


def debug(message: str) -> None:
    _logger.debug(_format(message, BLUE))


def info(message: str) -> None:
    _logger.info(_format(message, GREEN))


def warning(message: str) -> None:
    _logger.warning(_format(message, YELLOW))


def error(message: str) -> None:
    _logger.error(_format(message, RED))
