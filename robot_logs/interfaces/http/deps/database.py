"""Database dependency providers."""

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from robot_logs.infrastructure.database import Database


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db_session(database: Database = Depends(get_database)) -> AsyncIterator[AsyncSession]:
    async with database.session() as session:
        yield session


__all__ = [
    "get_database",
    "get_db_session",
]
