"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so readiness checks see the test engine
    - Tokens are minted with the same secret the app verifies with

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so rows seeded
      through test_db are visible to requests made through client
    - Env defaults set before any blog_api import (Settings is lru_cached)
"""

import os

# Ensure tests never read a developer's real database or secret
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import blog_api.infrastructure.database as db_module  # noqa: E402
from blog_api.db.base import Base  # noqa: E402
from blog_api.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
from blog_api.infrastructure.security import build_access_token  # noqa: E402
from blog_api.main import app  # noqa: E402
from blog_api.models.blog_post import BlogPost  # noqa: E402
from blog_api.models.user import User  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


async def _create_user(db: AsyncSession, username: str) -> User:
    user = User(username=username)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest.fixture
async def alice(test_db):
    return await _create_user(test_db, "alice")


@pytest.fixture
async def bob(test_db):
    return await _create_user(test_db, "bob")


@pytest.fixture
def auth_headers():
    """Build an Authorization header for a user."""
    def _headers(user: User) -> dict[str, str]:
        token = build_access_token(user_id=user.id, username=user.username)
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def make_blog(test_db):
    """Insert a blog post directly. age_minutes orders posts: larger is older."""
    base = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    async def _make(
        author: User,
        title: str = "Title",
        description: str = "Description",
        content: str = "Content",
        theme: str = "light",
        share: int = 0,
        age_minutes: int = 0,
    ) -> BlogPost:
        created = base - timedelta(minutes=age_minutes)
        blog = BlogPost(
            title=title, description=description, content=content,
            theme=theme, author_id=author.id, share=share,
            created_at=created, updated_at=created,
        )
        test_db.add(blog)
        await test_db.commit()
        return blog

    return _make
