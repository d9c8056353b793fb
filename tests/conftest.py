"""Pytest configuration for videogen tests.

This file is automatically loaded by pytest before running tests.
It configures the Python path so that the videogen package can be imported
from a source checkout, and provides shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to Python path
# This allows `from videogen.core import ...` to work without installing
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

from videogen.config.defaults import get_default_document_template  # noqa: E402
from videogen.models.document import Keyframe  # noqa: E402


class FakeClock:
    """Manually advanced time source for deterministic playback tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def demo_document():
    """Raw demo document: 120 s, four keyframes, two clips."""
    return get_default_document_template("demo")


@pytest.fixture
def demo_keyframes(demo_document):
    return [Keyframe(**k) for k in demo_document["animation"]["character"]["animations"]]
