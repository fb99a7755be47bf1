"""
Engine and session factory for the entity store.

Both are built on first use so that importing the app (tests, the seed
script, alembic) never opens a connection by itself.
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from portfolio.config import settings
import logging

logger = logging.getLogger(__name__)

_engine = None
_AsyncSessionLocal = None


def get_engine():
    global _engine
    if _engine is None:
        logger.info("Connecting entity store engine")
        _engine = create_async_engine(
            settings.database_url,
            pool_pre_ping=True,
            pool_recycle=300,
            echo=settings.debug,
        )
    return _engine


def get_session_local():
    global _AsyncSessionLocal
    if _AsyncSessionLocal is None:
        _AsyncSessionLocal = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )
    return _AsyncSessionLocal


async def get_db():
    """Request-scoped session; uncommitted work is rolled back on close."""
    AsyncSessionLocal = get_session_local()
    async with AsyncSessionLocal() as session:
        yield session


async def dispose_engine():
    global _engine, _AsyncSessionLocal
    if _engine is not None:
        await _engine.dispose()
        logger.info("Entity store engine disposed")
        _engine = None
        _AsyncSessionLocal = None
