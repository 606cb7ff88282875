"""Pytest configuration and shared fixtures."""

import os
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from compass.core.constants import ACCESS_LEVEL_CUSTOMER
from compass.core.database import Base, get_db
from compass.main import create_app

# Import all models to ensure they're registered with Base.metadata
from compass.modules.cards.models import Card  # noqa: F401
from compass.modules.themes.models import Theme  # noqa: F401
from tests.factories.identity import MEMBER_USER_ID, make_auth_headers


# Defaults to a private in-memory SQLite database per test
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")


@pytest.fixture(scope="function")
async def engine():
    """Create test database engine."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_async_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
    else:
        engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db(engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a transactional database session for tests.

    Each test runs in its own transaction that is rolled back
    after the test completes, ensuring test isolation.
    """
    session_factory = async_sessionmaker(
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with engine.connect() as conn:
        await conn.begin()

        async with session_factory(bind=conn) as session:
            yield session

        await conn.rollback()


@pytest.fixture
async def app(db: AsyncSession):
    """Create test application instance."""
    application = create_app()

    # Override database dependency
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide an unauthenticated async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Identity Fixtures
# ============================================================


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Headers for an admin of ``TENANT_ID``."""
    return make_auth_headers()


@pytest.fixture
def member_headers() -> dict[str, str]:
    """Headers for a regular member of ``TENANT_ID``."""
    return make_auth_headers(user_id=MEMBER_USER_ID, access_level=ACCESS_LEVEL_CUSTOMER)


@pytest.fixture
async def admin_client(
    app, admin_headers: dict[str, str]
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client authenticated as a tenant admin."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=admin_headers,
    ) as client:
        yield client
