"""Domain helpers for robot logs."""

from .exceptions import LogError, LogPersistenceError
from .models import LogEntry, LogEntryInput, LogFilters, compute_duration
from .service import LogService
from .validation import Invalid, Valid, validate_log_batch, validate_log_query

__all__ = [
    "LogEntry",
    "LogEntryInput",
    "LogError",
    "LogFilters",
    "LogPersistenceError",
    "LogService",
    "Invalid",
    "Valid",
    "compute_duration",
    "validate_log_batch",
    "validate_log_query",
]
