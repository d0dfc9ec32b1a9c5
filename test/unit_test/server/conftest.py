from pathlib import Path
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel.pool import StaticPool

from profilehub.core.database import Base
from profilehub.core.database import entities  # noqa: F401
from profilehub.server.core.config import Settings

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as session:
        yield session


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "uploads"
    directory.mkdir()
    return directory


@pytest.fixture
def app_settings(upload_dir: Path) -> Settings:
    """Settings with the role switch off, as in a default deployment."""
    return Settings(DATABASE_URL=TEST_DATABASE_URL, UPLOAD_DIR=str(upload_dir), UPLOAD_MAX_BYTES=1024)


@pytest.fixture
def make_client(session: AsyncSession) -> Callable:
    """Factory for an HTTP client bound to the test session and the given settings."""
    from profilehub.core.database import get_session
    from profilehub.server.core.config import get_settings
    from profilehub.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    def factory(settings: Settings) -> AsyncClient:
        app.dependency_overrides[get_session] = get_session_override
        app.dependency_overrides[get_settings] = lambda: settings
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost")

    yield factory

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(name="client")
async def client_fixture(make_client, app_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    async with make_client(app_settings) as client:
        yield client


@pytest_asyncio.fixture
async def auth_client(make_client, upload_dir: Path) -> AsyncGenerator[AsyncClient, None]:
    """Client against a server with the admin/viewer role switch enforced."""
    settings = Settings(
        DATABASE_URL=TEST_DATABASE_URL,
        UPLOAD_DIR=str(upload_dir),
        AUTH_ENABLED=True,
        ADMIN_PASSWORD="s3cret",
    )
    async with make_client(settings) as client:
        yield client


@pytest.fixture
def profile_payload() -> dict:
    return {
        "profileId": "P-001",
        "specialId": "SP01",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "555-0100",
        "description": "Analyst",
    }


@pytest.fixture
def create_profile(client: AsyncClient, profile_payload: dict) -> Callable:
    """Create a profile through the API, overriding any payload fields."""

    async def _create(**overrides) -> dict:
        response = await client.post("/api/profiles", json={**profile_payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()

    return _create
