"""Pytest configuration and fixtures for the checklist gate service.

Uses app.main:app for HTTP tests with the database dependencies overridden
by an in-memory SQLite engine (sqlite+aiosqlite, one shared connection).
ASGITransport does not run the lifespan, so the checklist registry is put on
app.state here.
"""

import os
from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

os.environ["DATABASE_URL"] = ""
os.environ["TELEMETRY_ENABLED"] = "false"

from app.application.dtos.document import StoredDocument  # noqa: E402
from app.application.dtos.entity import EntityRecord  # noqa: E402
from app.core.checklists import build_default_registry  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from app.infrastructure.persistence import models  # noqa: E402, F401
from app.infrastructure.persistence.database import (  # noqa: E402
    Base,
    get_db,
    get_db_transactional,
)
from app.infrastructure.persistence.repositories import (  # noqa: E402
    DocumentRepository,
    EntityRepository,
)
from app.main import app  # noqa: E402
from app.shared.utils import utc_now  # noqa: E402

get_settings.cache_clear()

SeedEntity = Callable[..., Awaitable[EntityRecord]]


@pytest.fixture
async def engine() -> AsyncEngine:
    """In-memory SQLite engine with the schema created from the ORM models."""
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncSession:
    """Database session for repository tests. Rolls back after test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def seed_entity(session_factory: async_sessionmaker[AsyncSession]) -> SeedEntity:
    """Return an async helper that commits an entity and its documents.

    Documents are (document_type, was_reviewed) or (document_type, was_reviewed,
    version) tuples, stored oldest first in the given order.
    """

    async def _seed(
        entity_type: str,
        status: str,
        attributes: dict[str, Any] | None = None,
        documents: list[tuple] | None = None,
        *,
        entity_id: str | None = None,
    ) -> EntityRecord:
        docs = documents or []
        async with session_factory() as session:
            async with session.begin():
                entity = await EntityRepository(session).create(
                    entity_type, status, attributes, entity_id=entity_id
                )
                document_repo = DocumentRepository(session)
                base_time = utc_now() - timedelta(minutes=len(docs) + 1)
                for i, doc in enumerate(docs):
                    document_type, was_reviewed, *rest = doc
                    await document_repo.add(
                        StoredDocument(
                            entity_type=entity_type,
                            entity_id=entity.id,
                            document_type=document_type,
                            version=rest[0] if rest else 1,
                            was_reviewed=was_reviewed,
                            created_at=base_time + timedelta(minutes=i),
                        )
                    )
        return entity

    return _seed


@pytest.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) backed by the SQLite engine."""

    async def _get_db():
        async with session_factory() as session:
            yield session

    async def _get_db_transactional():
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    app.state.checklist_registry = build_default_registry()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    app.state.checklist_registry = None
