"""
Pytest fixtures for test database, client, and authentication.

Each test gets a freshly created schema. TEST_DATABASE_URL selects the
database; it defaults to an in-memory SQLite database so the suite runs
without a PostgreSQL server.
"""

import os
from typing import AsyncGenerator

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
# Must be set before app settings are first read
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)

import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import app  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.db.session import get_db  # noqa: E402
from app.models import User  # noqa: E402
from tests import factories  # noqa: E402


def _test_engine_options() -> dict:
    if TEST_DATABASE_URL.startswith("sqlite"):
        # One shared connection, otherwise every checkout sees an empty in-memory database
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {}


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield session, then drop tables for isolation."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, **_test_engine_options())
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    return await factories.create_user(db_session)


@pytest_asyncio.fixture
async def auth_headers(db_session: AsyncSession, test_user: User) -> dict:
    """Authorization headers with a Bearer token backed by a session."""
    token = await factories.generate_valid_token(db_session, test_user)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def paid_ticket(db_session: AsyncSession, test_user: User):
    """Enrollment plus a paid, in-person ticket for the test user."""
    enrollment = await factories.create_enrollment_with_address(db_session, test_user)
    ticket_type = await factories.create_ticket_type(db_session, includes_hotel=True)
    return await factories.create_ticket(db_session, enrollment.id, ticket_type.id)


@pytest_asyncio.fixture
async def hotel(db_session: AsyncSession):
    return await factories.create_hotel(db_session)
