"""
Shared fixtures: every test gets its own data directory and a fast bcrypt
work factor so hashing does not dominate the run.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from levellore.core.config import Settings
from levellore.db import JsonFileStore
from levellore.main import create_app
from levellore.services import ServiceCoordinator


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATA_FILE=str(tmp_path / "data" / "data.json"),
        SQLITE_PATH=str(tmp_path / "data" / "levellore.db"),
        STATIC_DIR=None,
        BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
    )


@pytest_asyncio.fixture
async def store(tmp_path):
    store = JsonFileStore(str(tmp_path / "data.json"))
    await store.initialize()
    return store


@pytest_asyncio.fixture
async def services(settings):
    coordinator = ServiceCoordinator(settings)
    await coordinator.initialize()
    yield coordinator
    await coordinator.cleanup()


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def login(client):
    """Register (if needed) and log in, returning ready-to-use auth headers"""
    def _login(username: str = "spongebob", password: str = "krabby-patty") -> dict:
        client.post("/api/register", json={"username": username, "password": password})
        response = client.post("/api/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return auth_headers(response.json()["token"])
    return _login
