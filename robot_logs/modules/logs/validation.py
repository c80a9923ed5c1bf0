"""Request validation for the log endpoints.

Each validator returns either ``Valid(value)`` carrying the parsed value or
``Invalid(field, message)`` describing the first violated field. Nothing here
touches the database.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from robot_logs.schemas import LogBatch, LogCreate, LogQuery

from .models import LogEntryInput, LogFilters, as_utc

T = TypeVar("T")

_batch_adapter: TypeAdapter[list[LogCreate]] = TypeAdapter(LogBatch)


@dataclass(frozen=True, slots=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Invalid:
    field: str
    message: str
    index: Optional[int] = None

    def as_detail(self) -> dict[str, Any]:
        detail: dict[str, Any] = {"field": self.field, "message": self.message}
        if self.index is not None:
            detail["index"] = self.index
        return detail


ValidationResult = Union[Valid[T], Invalid]


def validate_log_batch(payload: Any) -> ValidationResult[list[LogEntryInput]]:
    """Validate a decoded ``POST /logs`` body."""
    try:
        items = _batch_adapter.validate_python(payload)
    except ValidationError as exc:
        return _first_error(exc, root_field="logs")
    return Valid([_to_input(item) for item in items])


def validate_log_query(params: Mapping[str, str]) -> ValidationResult[LogFilters]:
    """Validate ``GET /logs`` query parameters."""
    try:
        query = LogQuery.model_validate(dict(params))
    except ValidationError as exc:
        return _first_error(exc, root_field="query")
    return Valid(
        LogFilters(
            min_duration=query.min_duration,
            device_generation=query.device_generation or None,
            start_from=_utc_or_none(query.start_from),
            end_to=_utc_or_none(query.end_to),
            limit=query.limit,
            offset=query.offset,
        )
    )


def _utc_or_none(value: Optional[datetime]) -> Optional[datetime]:
    return as_utc(value) if value is not None else None


def _to_input(item: LogCreate) -> LogEntryInput:
    return LogEntryInput(
        robot=item.robot,
        device_generation=item.device_generation,
        start_time=item.start_time,
        end_time=item.end_time,
        lat=item.lat,
        lng=item.lng,
    )


def _first_error(exc: ValidationError, *, root_field: str) -> Invalid:
    error = exc.errors()[0]
    loc = error.get("loc", ())
    index = loc[0] if loc and isinstance(loc[0], int) else None
    names = [str(part) for part in loc if not isinstance(part, int)]
    field = names[0] if names else root_field
    error_type = error.get("type")

    if not names:
        if error_type == "too_short":
            message = "No logs provided"
        elif error_type == "list_type":
            message = "Expected a JSON array of logs"
        else:
            message = f"Invalid {root_field}: {error['msg']}"
    elif error_type == "missing":
        message = f"No {field} provided"
    else:
        message = f"Invalid {field}: {error['msg']}"
    return Invalid(field=field, message=message, index=index)
