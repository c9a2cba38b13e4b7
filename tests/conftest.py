import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from trashcam.config import settings
from trashcam.db import get_images_col, get_players_col
from trashcam.main import app


@pytest.fixture
def mock_db():
    return AsyncMongoMockClient()["trashcam_test"]


@pytest.fixture
def players_col(mock_db):
    return mock_db["players"]


@pytest.fixture
def images_col(mock_db):
    return mock_db["images"]


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    d = tmp_path / "uploads"
    d.mkdir()
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(d))
    return d


@pytest.fixture
def client(players_col, images_col, upload_dir):
    app.dependency_overrides[get_players_col] = lambda: players_col
    app.dependency_overrides[get_images_col] = lambda: images_col
    # no context manager: lifespan would try to reach a real MongoDB
    yield TestClient(app)
    app.dependency_overrides.clear()
