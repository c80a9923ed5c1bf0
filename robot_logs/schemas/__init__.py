"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LIMIT = 100
MAX_LIMIT = 500


class LogCreate(BaseModel):
    """One inbound log entry. ``duration`` is computed server side."""

    model_config = ConfigDict(extra="ignore")

    robot: str = Field(..., min_length=1)
    device_generation: str = Field(..., alias="deviceGeneration", min_length=1)
    start_time: datetime = Field(..., alias="startTime")
    end_time: datetime = Field(..., alias="endTime")
    lat: float = Field(..., allow_inf_nan=False)
    lng: float = Field(..., allow_inf_nan=False)

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def reject_booleans(cls, value):
        # JSON true/false are not coordinates.
        if isinstance(value, bool):
            raise ValueError("Input should be a valid number")
        return value


LogBatch = Annotated[list[LogCreate], Field(min_length=1)]


class LogQuery(BaseModel):
    model_config = ConfigDict(extra="ignore")

    min_duration: Optional[float] = Field(None, alias="minDuration", allow_inf_nan=False)
    device_generation: Optional[str] = Field(None, alias="deviceGeneration")
    start_from: Optional[datetime] = Field(None, alias="from")
    end_to: Optional[datetime] = Field(None, alias="to")
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    offset: int = Field(0, ge=0)


class LogResponse(BaseModel):
    id: int
    robot: str
    device_generation: str = Field(..., serialization_alias="deviceGeneration")
    start_time: datetime = Field(..., serialization_alias="startTime")
    end_time: datetime = Field(..., serialization_alias="endTime")
    duration: int
    lat: float
    lng: float

    model_config = ConfigDict(from_attributes=True)


class ValidationErrorDetail(BaseModel):
    field: str
    message: str
    index: Optional[int] = None


class ValidationErrorResponse(BaseModel):
    detail: ValidationErrorDetail
