"""Pytest configuration and fixtures."""

import os

# Settings are read at import time by ghkeep.db / ghkeep.main
os.environ.setdefault("APP_SECRET_KEY", "test-secret-key-for-ghkeep-suite-0123456789")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from ghkeep.db.database import get_db  # noqa: E402
from ghkeep.db.repositories import InMemoryUserRepository, SqlAlchemyUserRepository  # noqa: E402
from ghkeep.main import app  # noqa: E402
from ghkeep.models.base import Base  # noqa: E402
from ghkeep.models.user import User  # noqa: E402

# Test database URL (uses SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def _create_test_engine() -> AsyncEngine:
    return create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with the schema created."""
    engine = _create_test_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def broken_session() -> AsyncGenerator[AsyncSession, None]:
    """Session on a database without the users table."""
    engine = _create_test_engine()
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session
    await engine.dispose()


@pytest.fixture
def memory_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def sql_repository(db_session: AsyncSession) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(db_session)


@pytest_asyncio.fixture
async def test_user(sql_repository: SqlAlchemyUserRepository, db_session: AsyncSession) -> User:
    """Create a registered account."""
    user = await sql_repository.save(
        User(
            username="bob",
            email="bob@x.com",
            password="secret1",
            github_key="ghkey1234567",
        )
    )
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client bound to the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
