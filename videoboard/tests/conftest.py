"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator, Awaitable, Callable
from httpx import AsyncClient, ASGITransport

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from videoboard.app.core.security import create_admin_token
from videoboard.app.db.base import Base, get_db
from videoboard.app.main import app
from videoboard.app.models.suggestion import Suggestion, SuggestionStatus


def _memory_engine():
    # One shared connection so every session sees the same in-memory database
    return create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture(scope="function")
async def test_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Create a test database session.

    Each test gets a fresh database with all tables created.
    """
    engine = _memory_engine()

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Provide session to test
    async with async_session() as session:
        yield session

    # Cleanup
    await engine.dispose()


@pytest.fixture(scope="function")
async def test_client_with_db() -> AsyncGenerator[AsyncClient, None]:
    """
    Create test client with in-memory database.

    This fixture creates a fresh test database for each test and
    overrides the app's database dependency.
    """
    test_engine = _memory_engine()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestSessionLocal = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override get_db dependency
    async def override_get_db():
        async with TestSessionLocal() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    # Cleanup
    app.dependency_overrides.clear()
    await test_engine.dispose()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Authorization header carrying a valid admin session."""
    token, _ = create_admin_token()
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def suggestion_fields() -> dict[str, str]:
    """Valid requester-supplied fields."""
    return {
        "title": "Best Python tips",
        "description": "Short tips every Python developer should know",
        "requester_name": "Sam Doe",
        "requester_email": "sam@example.com",
        "channel": "cbb",
    }


@pytest.fixture
def make_suggestion(test_db: AsyncSession) -> Callable[..., Awaitable[Suggestion]]:
    """Insert a suggestion directly in any status."""

    async def _make(
        title: str = "Building a Chatbot from Scratch",
        status: SuggestionStatus = SuggestionStatus.OPEN_FOR_VOTING,
        votes_count: int = 0,
        video_url: str | None = None,
        channel: str = "cbb",
        description: str = "Step by step walkthrough",
    ) -> Suggestion:
        if status == SuggestionStatus.PUBLISHED and video_url is None:
            video_url = "https://www.youtube.com/watch?v=abc12345678"
        suggestion = Suggestion(
            title=title,
            description=description,
            requester_name="Requester",
            requester_email="requester@example.com",
            channel=channel,
            status=status.value,
            video_url=video_url,
            votes_count=votes_count,
        )
        test_db.add(suggestion)
        await test_db.commit()
        await test_db.refresh(suggestion)
        return suggestion

    return _make
