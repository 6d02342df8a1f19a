"""
Shared test fixtures and configuration for entire test suite.

Provides: SQLite async databases, fake extraction clients, stub text
extraction, auth headers, staged upload files
Dependencies: pytest, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

import asyncio
from pathlib import Path

import pytest

from ratecard_backend.boundary.llm.base_client import ExtractionClient
from ratecard_backend.core.exceptions import ExtractionProviderError
from ratecard_backend.core.ratecard.ratecard_schema import ExtractionProvider, RawExtraction
from ratecard_backend.core.ratecard.text_extractor import TextExtractor

AUTH_TOKEN = "data_engineer_test_token"

REASONING_COMPLETION = (
    "Here is the extracted data:\n"
    '[{"mediaType":"Print","mediaFormat":"Full Page","baseRate":"$5,000","confidence":"high"}]'
)

STRUCTURED_COMPLETION = (
    '{"mediaTypes":[{"type":"Digital","placements":'
    '[{"name":"Banner","size":"300x250","baseRate":100,"currency":"$"}]}]}'
)


class FakeExtractionClient(ExtractionClient):
    """Extraction client returning a canned completion."""

    def __init__(
        self,
        provider: ExtractionProvider,
        content: str = "",
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.provider = provider
        self.display_name = f"Fake {provider.value}"
        self.description = "Canned completions for tests"
        self.content = content
        self.error = error
        self.delay = delay
        self.calls: list[str] = []
        self.started = asyncio.Event()

    async def extract(self, text: str) -> RawExtraction:
        self.calls.append(text)
        self.started.set()
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return RawExtraction(provider=self.provider, content=self.content)


class StubTextExtractor(TextExtractor):
    """Text extractor that returns fixed text without reading the file."""

    def __init__(self, text: str = "Rate card text") -> None:
        self.text = text
        self.calls: list[tuple[str, str | None]] = []

    def extract(self, file_path: str, extension: str | None = None) -> str:
        self.calls.append((file_path, extension))
        return self.text


@pytest.fixture
def auth_headers() -> dict:
    """Authorization header accepted by the data engineer endpoints."""
    return {"Authorization": f"Bearer {AUTH_TOKEN}"}


@pytest.fixture
def make_fake_client():
    """Factory for fake extraction clients with custom behaviour."""
    return FakeExtractionClient


@pytest.fixture
def reasoning_client() -> FakeExtractionClient:
    return FakeExtractionClient(ExtractionProvider.ANTHROPIC, content=REASONING_COMPLETION)


@pytest.fixture
def structured_client() -> FakeExtractionClient:
    return FakeExtractionClient(ExtractionProvider.OPENAI, content=STRUCTURED_COMPLETION)


@pytest.fixture
def failing_client() -> FakeExtractionClient:
    return FakeExtractionClient(
        ExtractionProvider.ANTHROPIC,
        error=ExtractionProviderError(
            "Failed to extract rate card data using Anthropic: upstream 529",
            provider="anthropic",
        ),
    )


@pytest.fixture
def stub_text_extractor() -> StubTextExtractor:
    return StubTextExtractor()


@pytest.fixture
def staged_pdf(tmp_path: Path) -> Path:
    """A staged upload as the upload endpoint would leave it."""
    path = tmp_path / "staged_cardA.pdf"
    path.write_bytes(b"%PDF-1.4 rate card")
    return path


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from ratecard_backend.boundary.db import models  # noqa: F401
    from ratecard_backend.boundary.db.base import Base

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def sqlite_session_factory(tmp_path: Path):
    """
    File-backed SQLite session factory for tests that go through TestClient.

    NullPool opens a fresh connection per session, so sessions work from the
    TestClient's own event loop.

    Yields:
        async_sessionmaker: Factory bound to a freshly created schema
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import NullPool

    from ratecard_backend.boundary.db.create_tables import create_all_tables

    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'ratecards.db'}",
        poolclass=NullPool,
    )
    asyncio.run(create_all_tables(engine))

    yield async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    asyncio.run(engine.dispose())


@pytest.fixture
def test_settings(tmp_path: Path):
    """Settings with a known token and a throwaway upload directory."""
    from ratecard_backend.configs.auth import AuthSettings
    from ratecard_backend.configs.settings import Settings
    from ratecard_backend.configs.uploads import UploadSettings

    return Settings(
        auth=AuthSettings(api_token=AUTH_TOKEN),
        uploads=UploadSettings(dir=str(tmp_path / "uploads"), max_file_size_mb=1),
    )


@pytest.fixture
def client(test_settings):
    """TestClient over a fresh app; lifespan is not run, so no database is touched."""
    from fastapi.testclient import TestClient

    from ratecard_backend.api.deps import get_settings_dependency
    from ratecard_backend.main import create_app

    app = create_app()
    app.dependency_overrides[get_settings_dependency] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()
