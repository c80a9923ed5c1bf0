"""SQLAlchemy repository for robot logs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from sqlalchemy import Float, literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from robot_logs.db.models import LogRecord

if TYPE_CHECKING:
    from robot_logs.modules.logs.models import LogFilters


class SqlLogRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add_many(self, records: Sequence[LogRecord]) -> None:
        # Commits on exit, rolls back the whole batch on any error.
        async with self._session.begin():
            self._session.add_all(records)

    async def list_logs(self, filters: LogFilters) -> list[LogRecord]:
        stmt = select(LogRecord)
        if filters.min_duration is not None:
            stmt = stmt.where(LogRecord.duration >= literal(filters.min_duration, Float))
        if filters.device_generation is not None:
            stmt = stmt.where(LogRecord.device_generation == filters.device_generation)
        if filters.start_from is not None:
            stmt = stmt.where(LogRecord.start_time >= filters.start_from)
        if filters.end_to is not None:
            stmt = stmt.where(LogRecord.end_time <= filters.end_to)

        stmt = stmt.order_by(LogRecord.id).limit(filters.limit)
        if filters.offset:
            stmt = stmt.offset(filters.offset)

        result = await self._session.execute(stmt)
        return list(result.scalars().all())
