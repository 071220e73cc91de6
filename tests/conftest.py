import pytest
from fastapi.testclient import TestClient

from glutools.core.config import get_settings
from glutools.main import create_app
from glutools.services.kv_store import MemoryKeyValueStore
from glutools.services.seed import seed_store

API_KEY = "test-key"
SUPER_EMAIL = "admin@glutools.com"
SUPER_PASSWORD = "admin123"


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def seeded_store(store):
    seed_store(store)
    return store


@pytest.fixture
def test_client(monkeypatch):
    """
    TestClient on a fresh app (in-memory store, seeded by the lifespan),
    with a few env variables forced for the tests.
    """
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("APP_NAME", "GLU Tools API (tests)")
    monkeypatch.setenv("API_KEY", API_KEY)
    monkeypatch.setenv("API_PREFIX", "/api")
    monkeypatch.setenv("STORE_BACKEND", "memory")
    monkeypatch.setenv("SEED_ON_STARTUP", "true")
    monkeypatch.setenv("MAX_UPLOAD_MB", "1")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost")
    monkeypatch.setenv("DEFAULT_ADMIN_EMAIL", SUPER_EMAIL)
    monkeypatch.setenv("DEFAULT_ADMIN_PASSWORD", SUPER_PASSWORD)

    # the settings are cached: clear so the env above is picked up
    get_settings.cache_clear()

    app = create_app()
    with TestClient(app) as client:
        yield client

    get_settings.cache_clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {API_KEY}"}


@pytest.fixture
def super_admin_headers(auth_headers):
    return {
        **auth_headers,
        "X-Admin-Email": SUPER_EMAIL,
        "X-Admin-Password": SUPER_PASSWORD,
    }
