"""Log domain specific exceptions."""


class LogError(Exception):
    """Base class for log related domain errors."""


class LogPersistenceError(LogError):
    """Raised when the database could not store or return log entries."""
