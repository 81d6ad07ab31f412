"""Pytest configuration and shared fixtures.

This module provides:
- Settings pointing at a throwaway MongoDB database
- Fake repositories (AsyncMock with the real repository spec) for route tests
- FastAPI test client over ASGITransport
- A real MongoDB database for integration tests, skipped when unreachable
"""

# Set environment variables BEFORE any imports that trigger Settings validation
import os

os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DATABASE", "test_chatbot_onboarding")

from collections.abc import AsyncGenerator, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from core.config import Settings, clear_settings_cache
from core.wide_event import clear_wide_event, init_wide_event
from repositories import (
    ActividadRepository,
    ConfiguracionRepository,
    ConversacionRepository,
    DocumentoRepository,
    FAQRepository,
    MensajeAutomaticoRepository,
    RepositorySet,
    UsuarioRepository,
)
from tests.fakes import make_cursor

# =============================================================================
# Test Settings
# =============================================================================

TEST_MONGODB_URL = "mongodb://localhost:27017"
TEST_DATABASE_NAME = "test_chatbot_onboarding"


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return Settings(
        mongodb_url=TEST_MONGODB_URL,
        mongodb_database=TEST_DATABASE_NAME,
        mongodb_timeout_ms=2000,
    )


@pytest.fixture(autouse=True)
def setup_wide_event():
    """Open a wide event per test so store accounting is observable."""
    init_wide_event(request_id="test")
    yield
    clear_wide_event()


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None]:
    """Reset settings cache before each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Collection / Repository Fakes
# =============================================================================


@pytest.fixture
def mock_collection() -> MagicMock:
    """A fake AsyncCollection.

    ``find`` is synchronous in the driver (it returns a cursor), the rest
    are coroutines.
    """
    collection = MagicMock()
    collection.find = MagicMock(return_value=make_cursor([]))
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.replace_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


@pytest.fixture
def mock_db(mock_collection: MagicMock) -> MagicMock:
    db = MagicMock()
    db.get_collection = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def fake_repositories() -> RepositorySet:
    """Repositories whose every method is an AsyncMock.

    spec=... keeps the fakes honest: calling a method the real repository
    does not have fails the test.
    """
    return RepositorySet(
        actividades=AsyncMock(spec=ActividadRepository),
        configuracion=AsyncMock(spec=ConfiguracionRepository),
        conversaciones=AsyncMock(spec=ConversacionRepository),
        documentos=AsyncMock(spec=DocumentoRepository),
        faqs=AsyncMock(spec=FAQRepository),
        mensajes_automaticos=AsyncMock(spec=MensajeAutomaticoRepository),
        usuarios=AsyncMock(spec=UsuarioRepository),
    )


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================


@pytest_asyncio.fixture(scope="function")
async def app(fake_repositories: RepositorySet) -> AsyncGenerator[FastAPI]:
    """FastAPI app wired to fake repositories.

    ASGITransport does not run the lifespan, so nothing connects to MongoDB.
    """
    from main import app as fastapi_app

    fastapi_app.state.repositories = fake_repositories
    fastapi_app.state.db = MagicMock()

    yield fastapi_app


@pytest_asyncio.fixture(scope="function")
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing routes.

    Unhandled exceptions are rendered by the app's last-resort handler
    instead of being re-raised into the test.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        yield ac


# =============================================================================
# Database Fixtures
# =============================================================================

# Check if MongoDB is available (skip DB tests in CI without database)
_DB_AVAILABLE = None


def _check_db_available() -> bool:
    """Check if MongoDB is listening on localhost. Cached after first check."""
    global _DB_AVAILABLE
    if _DB_AVAILABLE is not None:
        return _DB_AVAILABLE

    import socket

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.settimeout(1)
        result = sock.connect_ex(("localhost", 27017))
        sock.close()
        _DB_AVAILABLE = result == 0
    except OSError:
        _DB_AVAILABLE = False

    return _DB_AVAILABLE


@pytest_asyncio.fixture(scope="function")
async def mongo_db(test_settings: Settings) -> AsyncGenerator[AsyncDatabase]:
    """A real, empty MongoDB database dropped after each test."""
    if not _check_db_available():
        pytest.skip("MongoDB not available - skipping database test")

    client: AsyncMongoClient = AsyncMongoClient(
        test_settings.mongodb_url,
        tz_aware=True,
        serverSelectionTimeoutMS=test_settings.mongodb_timeout_ms,
    )
    await client.drop_database(test_settings.mongodb_database)
    db = client.get_database(test_settings.mongodb_database)
    try:
        yield db
    finally:
        await client.drop_database(test_settings.mongodb_database)
        await client.close()
