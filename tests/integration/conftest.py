import pytest
from fastapi.testclient import TestClient

from videogen.api import create_app
from videogen.core.editor import EditorSession


@pytest.fixture
def session(demo_document, fake_clock):
    return EditorSession(demo_document, time_source=fake_clock)


@pytest.fixture
def client(session):
    with TestClient(create_app(session)) as test_client:
        yield test_client
