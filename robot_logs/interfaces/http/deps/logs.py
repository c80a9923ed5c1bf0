"""Log related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from robot_logs.modules.logs import LogService

from .database import get_db_session


def get_log_service(db: AsyncSession = Depends(get_db_session)) -> LogService:
    return LogService.with_session(db)


__all__ = [
    "get_log_service",
]
