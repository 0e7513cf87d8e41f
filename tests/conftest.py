import pytest
from fastapi.testclient import TestClient

from server.app import app
from server.config import get_settings


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENV", "test")
    # Media references use message ids unless a test turns storage on
    monkeypatch.delenv("S3_ENABLED", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def storage_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("S3_ENABLED", "true")
    get_settings.cache_clear()


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)
