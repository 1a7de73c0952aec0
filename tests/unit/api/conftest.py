import pytest
from fastapi.testclient import TestClient

from studytrack.api.main import create_app
from studytrack.config import Settings
from studytrack.contact import InMemoryContactStore


@pytest.fixture
def public_dir(tmp_path):
    path = tmp_path / "public"
    path.mkdir()
    return path


@pytest.fixture
def store():
    return InMemoryContactStore()


@pytest.fixture
def client(public_dir, store):
    app = create_app(settings=Settings(public_dir=public_dir), store=store)
    with TestClient(app) as client:
        yield client
