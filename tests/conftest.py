"""Shared fixtures. Every test gets its own SQLite file under tmp_path."""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from eduplay.core.config import Settings
from eduplay.main import create_app
from eduplay.services import build_services

DEMO_PASSWORD = "password123"


@pytest.fixture
def settings(tmp_path):
    public = tmp_path / "public"
    (public / "css").mkdir(parents=True)
    (public / "index.html").write_text("<html>shell</html>")
    (public / "css" / "style.css").write_text("body {}")
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite'}",
        public_dir=public,
        secret_key="test-secret",
        demo_password=DEMO_PASSWORD,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def services(settings):
    """Services over a fresh, unseeded schema."""
    services = build_services(settings)
    await services.db.create_schema()
    yield services
    await services.db.dispose()


@pytest_asyncio.fixture
async def player(services):
    result = await services.auth.register("player", "player@example.com", "secret-pw")
    return result["user"]


@pytest_asyncio.fixture
async def game_id(services):
    return await services.games.create_game({"title": "Quiz", "path": "/games/quiz/"})


@pytest.fixture
def client(settings):
    """HTTP client over the full app; the lifespan seeds the demo rows."""
    with TestClient(create_app(settings)) as client:
        yield client


def login(client, identifier, password=DEMO_PASSWORD) -> dict:
    response = client.post("/api/auth/login", json={"identifier": identifier, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def user_headers(client):
    return login(client, "demo")


@pytest.fixture
def admin_headers(client):
    return login(client, "admin")
