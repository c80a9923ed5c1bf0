"""Repository protocol for persisting robot logs."""

from __future__ import annotations

from typing import Protocol, Sequence

from robot_logs.db.models import LogRecord

from .models import LogFilters


class LogRepository(Protocol):
    async def add_many(self, records: Sequence[LogRecord]) -> None:
        ...

    async def list_logs(self, filters: LogFilters) -> list[LogRecord]:
        ...
