"""SQLAlchemy-backed repository implementations."""

from .log_repository import SqlLogRepository

__all__ = ["SqlLogRepository"]
