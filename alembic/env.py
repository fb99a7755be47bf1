"""
Alembic environment for the portfolio tables.

Reuses the application's async engine, so ``DATABASE_URL`` drives both the
service and its migrations.
"""

from logging.config import fileConfig
import asyncio
import os
import sys

from alembic import context
from sqlalchemy.engine import Connection

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from portfolio.db.base import Base  # noqa: E402
import portfolio.models  # noqa: E402,F401 — populate Base.metadata
from portfolio.db.session import get_engine  # noqa: E402

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _configure_and_run(**options) -> None:
    context.configure(target_metadata=Base.metadata, **options)
    with context.begin_transaction():
        context.run_migrations()


def _run_sync(connection: Connection) -> None:
    _configure_and_run(connection=connection)


async def _run_online() -> None:
    engine = get_engine()
    async with engine.connect() as connection:
        await connection.run_sync(_run_sync)
    await engine.dispose()


if context.is_offline_mode():
    _configure_and_run(
        url=str(get_engine().url),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
else:
    asyncio.run(_run_online())
