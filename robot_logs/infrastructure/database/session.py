"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from robot_logs.core.config import DatabaseSettings
from robot_logs.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


def _build_engine(settings: DatabaseSettings, debug: bool = False) -> AsyncEngine:
    engine_kwargs: dict[str, Any] = {
        "echo": settings.echo or debug,
        "connect_args": settings.connect_args(),
    }
    if settings.pool_size is not None:
        engine_kwargs["pool_size"] = settings.pool_size
    if settings.max_overflow is not None:
        engine_kwargs["max_overflow"] = settings.max_overflow
    if settings.ssl and settings.ssl_no_verify:
        logger.warning("Database TLS certificate verification is disabled (DB_SSL_NO_VERIFY)")

    return create_async_engine(settings.build_url(), **engine_kwargs)


class Database:
    """Connection pool handle shared by all requests of one application."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: DatabaseSettings, *, debug: bool = False) -> "Database":
        return cls(_build_engine(settings, debug=debug))

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session

    async def create_all(self) -> None:
        """Create missing tables; existing ones are left untouched."""
        # Register the ORM models on Base.metadata.
        from robot_logs.db import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
