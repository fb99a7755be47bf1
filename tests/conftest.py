"""
Shared test fixtures for portfolio.

Uses an in-memory SQLite database (aiosqlite) with per-test table
create/drop, and an httpx client bound to the real app.
"""

import os
from datetime import datetime
from typing import Any

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-tests")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("BOOTSTRAP_ADMIN_ON_STARTUP", "false")

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from portfolio.db.base import Base  # noqa: E402
import portfolio.models  # noqa: E402,F401
from portfolio.main import app  # noqa: E402

ADMIN_EMAIL = "owner@portfolio.dev"
ADMIN_PASSWORD = "correct-horse-battery"


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine):
    """Fresh tables per test: create → yield session → drop."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
    async with factory() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# ---------------------------------------------------------------------------
# Test client
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture(scope="function")
async def test_client(db_session):
    from portfolio.db.session import get_db

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Seed data helpers
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture(scope="function")
async def seed_admin(db_session):
    """The single owner account. Returns the AdminUser row."""
    from portfolio.api.v1.helpers.authentication import hash_password
    from portfolio.models.admin_users import AdminUser

    admin = AdminUser(
        email=ADMIN_EMAIL,
        password_hash=hash_password(ADMIN_PASSWORD),
        role="owner",
    )
    db_session.add(admin)
    await db_session.commit()
    return admin


@pytest_asyncio.fixture(scope="function")
async def auth_headers(seed_admin, test_client):
    """JWT auth headers for the seeded owner."""
    resp = await test_client.post(
        "/api/admin/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert resp.status_code == 200, resp.text
    token = resp.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture(scope="function")
async def project_factory(db_session):
    from portfolio.models.projects import Project

    async def _create(
        title: str = "Test Project",
        slug: str | None = None,
        display_order: int = 0,
        is_featured: bool = False,
        **extra: Any,
    ) -> Project:
        project = Project(
            title=title,
            slug=slug or title.lower().replace(" ", "-"),
            short_description=extra.pop("short_description", "A test project"),
            tech_stack=extra.pop("tech_stack", ["Python"]),
            display_order=display_order,
            is_featured=is_featured,
            **extra,
        )
        db_session.add(project)
        await db_session.commit()
        return project

    return _create


@pytest_asyncio.fixture(scope="function")
async def message_factory(db_session):
    from portfolio.models.messages import Message

    async def _create(
        name: str = "Jane Visitor",
        email: str = "jane@example.com",
        subject: str | None = "Hello",
        message: str = "I like your work",
        created_at: datetime | None = None,
    ) -> Message:
        msg = Message(name=name, email=email, subject=subject, message=message)
        if created_at is not None:
            msg.created_at = created_at
        db_session.add(msg)
        await db_session.commit()
        return msg

    return _create
