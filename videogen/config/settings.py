import json
import os

from pydantic import ValidationError

from videogen.core.errors import InvalidDuration, MalformedDocument
from videogen.models.document import ProjectDocument
from videogen.utils.logging import log

from .defaults import DEFAULT_TEMPLATE, DEFAULT_TICK_RATE, get_default_document_template

LOG_LEVEL_ENV = "VIDEOGEN_LOG_LEVEL"
TICK_RATE_ENV = "VIDEOGEN_TICK_RATE"


def get_log_level():
    """Return the configured log level name, INFO unless overridden."""
    return (os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()


def get_tick_rate():
    """Return scheduler ticks per second from the environment, or the default."""
    raw = os.environ.get(TICK_RATE_ENV)
    if not raw:
        return DEFAULT_TICK_RATE
    try:
        rate = float(raw)
    except ValueError:
        raise ValueError(f"{TICK_RATE_ENV} must be a number, got {raw!r}") from None
    if rate <= 0:
        raise ValueError(f"{TICK_RATE_ENV} must be positive, got {raw!r}")
    return rate


def load_document(data):
    """
    Validate a raw project document.

    Args:
        data: dict parsed from JSON, or an existing ProjectDocument

    Returns:
        ProjectDocument

    Raises:
        MalformedDocument: if the structure does not validate
        InvalidDuration: if project.duration is not a positive number
    """
    if isinstance(data, ProjectDocument):
        document = data
    else:
        try:
            document = ProjectDocument.model_validate(data)
        except ValidationError as e:
            raise MalformedDocument(f"Invalid project document: {e}") from e

    if not document.project.has_valid_duration:
        raise InvalidDuration(document.project.duration)
    return document


def load_document_file(path):
    """Read and validate a project document stored as UTF-8 JSON."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedDocument(f"Invalid JSON in {path}: {e}") from e

    document = load_document(data)
    log.info(f"Loaded project '{document.project.name}' from {path}")
    return document


def get_default_document(template_type=DEFAULT_TEMPLATE):
    return load_document(get_default_document_template(template_type))
