"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from meetnotes.api.dependencies import get_email_client, get_generation_client
from meetnotes.config import Settings
from meetnotes.infrastructure.database import get_session
from meetnotes.infrastructure.gemini_client import GeminiClient
from meetnotes.infrastructure.mailer import DELIVERED_MESSAGE, EmailClient
from meetnotes.infrastructure.models import Base
from meetnotes.main import create_app
from meetnotes.repositories.summary_repo import SummaryRepository
from meetnotes.services.summaries import SummaryService

# Test database URL (use SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

GENERATED_TEXT = "Alice and Bob reviewed Q3 goals."


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the developer's .env file."""
    return Settings(
        _env_file=None,
        database_url=TEST_DATABASE_URL,
        gemini_api_key="test-key",
    )


@pytest.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def summary_repo(test_session) -> SummaryRepository:
    return SummaryRepository(test_session)


@pytest.fixture
def fake_generator() -> MagicMock:
    """Gemini client stand-in that returns a fixed summary."""
    generator = MagicMock(spec=GeminiClient)
    generator.generate = AsyncMock(return_value=GENERATED_TEXT)
    return generator


@pytest.fixture
def fake_notifier() -> MagicMock:
    """Email client stand-in that always succeeds."""
    notifier = MagicMock(spec=EmailClient)
    notifier.send = AsyncMock(return_value=DELIVERED_MESSAGE)
    return notifier


@pytest.fixture
def summary_service(summary_repo, fake_generator, fake_notifier) -> SummaryService:
    return SummaryService(summary_repo, fake_generator, fake_notifier)


@pytest.fixture
def app(test_settings, session_factory, fake_generator, fake_notifier) -> FastAPI:
    """Application wired to the test database and fake external clients."""
    application = create_app(test_settings)

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session
            await session.commit()

    application.dependency_overrides[get_session] = override_session
    application.dependency_overrides[get_generation_client] = lambda: fake_generator
    application.dependency_overrides[get_email_client] = lambda: fake_notifier
    return application


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
