"""Robot log domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from robot_logs.db import models as orm
from robot_logs.schemas import DEFAULT_LIMIT

_MILLISECOND = timedelta(milliseconds=1)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps, convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def compute_duration(start_time: datetime, end_time: datetime) -> int:
    """Milliseconds from start to end. Negative when end precedes start."""
    return (as_utc(end_time) - as_utc(start_time)) // _MILLISECOND


@dataclass(slots=True)
class LogEntryInput:
    robot: str
    device_generation: str
    start_time: datetime
    end_time: datetime
    lat: float
    lng: float

    @property
    def duration(self) -> int:
        return compute_duration(self.start_time, self.end_time)


@dataclass(slots=True)
class LogEntry:
    id: int
    robot: str
    device_generation: str
    start_time: datetime
    end_time: datetime
    duration: int
    lat: float
    lng: float

    @classmethod
    def from_orm(cls, instance: orm.LogRecord) -> "LogEntry":
        return cls(
            id=int(instance.id),
            robot=instance.robot,
            device_generation=instance.device_generation,
            start_time=as_utc(instance.start_time),
            end_time=as_utc(instance.end_time),
            duration=int(instance.duration),
            lat=float(instance.lat),
            lng=float(instance.lng),
        )


@dataclass(slots=True)
class LogFilters:
    """Optional predicates (AND-combined) plus the result window."""

    min_duration: Optional[float] = None
    device_generation: Optional[str] = None
    start_from: Optional[datetime] = None
    end_to: Optional[datetime] = None
    limit: int = DEFAULT_LIMIT
    offset: int = 0
