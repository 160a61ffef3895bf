"""Root conftest: test configuration, async SQLite database and API client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys ON
    - get_db dependency overridden to use the test database
    - Seed factories write through their own short-lived session, so objects
      they return are detached and never expired by a later rollback

Design Decisions:
    - SQLite in-memory: fast, no external dependency; constraint behavior
      (FK RESTRICT, unique pair) matches PostgreSQL for what is exercised
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import func, select  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from mediahub.db.base import Base  # noqa: E402
from mediahub.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
import mediahub.infrastructure.database as db_module  # noqa: E402
from mediahub.main import app  # noqa: E402
from mediahub.models import Media, Post, Publication  # noqa: E402

# Fixed "now" for service-level tests that inject a clock.
NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
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

    # Readiness probe reads db_manager directly
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


@pytest.fixture
def fixed_now():
    return NOW


@pytest.fixture
def make_media(test_session_factory):
    """Insert a Media directly; returns the detached row."""
    counter = {"n": 0}

    async def _make(title: str | None = None, username: str | None = None):
        counter["n"] += 1
        media = Media(
            title=title or f"Outlet {counter['n']}",
            username=username or f"outlet_{counter['n']}",
        )
        async with test_session_factory() as session:
            session.add(media)
            await session.commit()
        return media

    return _make


@pytest.fixture
def make_post(test_session_factory):
    """Insert a Post directly; returns the detached row."""
    counter = {"n": 0}

    async def _make(
        title: str | None = None, text: str = "Body text", image: str | None = None,
    ):
        counter["n"] += 1
        post = Post(title=title or f"Post {counter['n']}", text=text, image=image)
        async with test_session_factory() as session:
            session.add(post)
            await session.commit()
        return post

    return _make


@pytest.fixture
def make_publication(test_session_factory, make_media, make_post):
    """Insert a Publication (creating its Media/Post unless given)."""

    async def _make(
        date: datetime, media_id: int | None = None, post_id: int | None = None,
    ):
        if media_id is None:
            media_id = (await make_media()).id
        if post_id is None:
            post_id = (await make_post()).id
        publication = Publication(media_id=media_id, post_id=post_id, date=date)
        async with test_session_factory() as session:
            session.add(publication)
            await session.commit()
        return publication

    return _make


@pytest.fixture
def count_rows(test_session_factory):
    """Count rows of a model in a fresh session (bypasses identity maps)."""

    async def _count(model) -> int:
        async with test_session_factory() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()

    return _count


@pytest.fixture
def load_row(test_session_factory):
    """Load one row by id in a fresh session, or None."""

    async def _load(model, row_id: int):
        async with test_session_factory() as session:
            return await session.get(model, row_id)

    return _load
