"""Reusable FastAPI dependencies."""

from .database import get_database, get_db_session
from .logs import get_log_service

__all__ = [
    "get_database",
    "get_db_session",
    "get_log_service",
]
