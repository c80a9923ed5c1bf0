"""Domain service for robot log operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from robot_logs.db.models import LogRecord
from robot_logs.infrastructure.database.repositories.log_repository import SqlLogRepository

from .exceptions import LogPersistenceError
from .models import LogEntry, LogEntryInput, LogFilters, as_utc
from .repository import LogRepository

logger = logging.getLogger(__name__)

# Connection failures surface from the driver as OSError subclasses.
_DATABASE_ERRORS = (SQLAlchemyError, OSError)


@dataclass(slots=True)
class LogService:
    repository: LogRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "LogService":
        return cls(SqlLogRepository(session))

    async def create_logs(self, entries: Sequence[LogEntryInput]) -> int:
        """Store the whole batch atomically and return the number of rows written."""
        records = [self._to_record(entry) for entry in entries]
        try:
            await self.repository.add_many(records)
        except _DATABASE_ERRORS as exc:
            raise LogPersistenceError(f"failed to store {len(records)} log entries") from exc
        logger.info("Stored %d log entries", len(records))
        return len(records)

    async def list_logs(self, filters: LogFilters) -> list[LogEntry]:
        try:
            models = await self.repository.list_logs(filters)
        except _DATABASE_ERRORS as exc:
            raise LogPersistenceError("failed to query log entries") from exc
        return [self._to_domain(model) for model in models]

    @staticmethod
    def _to_record(entry: LogEntryInput) -> LogRecord:
        return LogRecord(
            robot=entry.robot,
            device_generation=entry.device_generation,
            start_time=as_utc(entry.start_time),
            end_time=as_utc(entry.end_time),
            duration=entry.duration,
            lat=entry.lat,
            lng=entry.lng,
        )

    @staticmethod
    def _to_domain(model: LogRecord) -> LogEntry:
        return LogEntry.from_orm(model)
