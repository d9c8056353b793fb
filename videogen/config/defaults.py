import copy

# Seconds moved by the rewind / fast-forward buttons
SKIP_SECONDS = 10

# Spacing of the labelled ruler marks on the timeline, in seconds
MARKER_INTERVAL = 30

# Scheduler ticks per second, roughly one per display refresh
DEFAULT_TICK_RATE = 60

DEFAULT_TEMPLATE = "demo"


def get_template_names():
    return {
        'demo': 'Character Animation Demo',
        'minimal': 'Minimal',
    }


def _demo_document():
    return {
        "project": {
            "name": "Character Animation Demo",
            "duration": 120,
            "resolution": "1920x1080",
            "fps": 30,
        },
        "timeline": {
            "clips": [
                {"id": 1, "start": 0, "end": 30, "source": "intro.mp4"},
                {"id": 2, "start": 30, "end": 60, "source": "main.mp4"},
            ],
        },
        "animation": {
            "character": {
                "type": "boy",
                "position": {"x": 50, "y": 50},
                "scale": 1,
                "animations": [
                    {"time": 0, "x": 10, "y": 50, "scale": 1, "rotation": 0},
                    {"time": 30, "x": 70, "y": 50, "scale": 1.2, "rotation": 0},
                    {"time": 60, "x": 40, "y": 70, "scale": 1, "rotation": 45},
                    {"time": 90, "x": 10, "y": 50, "scale": 1, "rotation": 0},
                ],
            },
        },
    }


def _minimal_document():
    return {
        "project": {
            "name": "Untitled",
            "duration": 10,
            "resolution": "1280x720",
            "fps": 30,
        },
        "timeline": {"clips": []},
        "animation": {
            "character": {
                "type": "boy",
                "position": {"x": 50, "y": 50},
                "scale": 1,
                "animations": [
                    {"time": 0, "x": 50, "y": 50, "scale": 1, "rotation": 0},
                ],
            },
        },
    }


_TEMPLATES = {
    'demo': _demo_document,
    'minimal': _minimal_document,
}


def get_default_document_template(template_type=DEFAULT_TEMPLATE):
    """
    Create a raw (unvalidated) project document from a named template.

    Args:
        template_type: "demo" or "minimal"

    Returns:
        dict: A fresh copy that callers may mutate freely
    """
    try:
        factory = _TEMPLATES[template_type]
    except KeyError:
        raise ValueError(
            f"Unknown document template {template_type!r}, expected one of {sorted(_TEMPLATES)}"
        ) from None
    return copy.deepcopy(factory())
