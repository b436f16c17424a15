"""Pydantic DTOs and the input validator for the time record feature."""

import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from app.domain.entities import MAX_DURATION_SECONDS, format_duration
from app.domain.exceptions import ValidationError


class TimeRecordCreate(BaseModel):
    """Validated input for a new time record."""

    model_config = ConfigDict(frozen=True)

    description: str
    duration_in_seconds: int | float

    @field_validator("description", mode="before")
    @classmethod
    def _check_description(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise PydanticCustomError("description_type", "Description must be text")
        value = value.strip()
        if not value:
            raise PydanticCustomError("description_required", "Description is required")
        return value

    @field_validator("duration_in_seconds", mode="before")
    @classmethod
    def _check_duration(cls, value: Any) -> int | float:
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or (isinstance(value, float) and not math.isfinite(value))
        ):
            raise PydanticCustomError("duration_type", "Duration must be a number")
        if value <= 0:
            raise PydanticCustomError("duration_positive", "Duration must be greater than 0")
        if value > MAX_DURATION_SECONDS:
            raise PydanticCustomError("duration_too_large", "Duration is too large")
        return value


def validate_time_record_input(raw: Mapping[str, Any]) -> TimeRecordCreate:
    """Check raw ``{description, duration_in_seconds}`` input.

    ``durationInSeconds`` is accepted as an alias for the duration key.

    Raises:
        ValidationError: With one message per failing field.
    """
    duration = raw.get("duration_in_seconds")
    if duration is None:
        duration = raw.get("durationInSeconds")
    payload = {
        "description": raw.get("description"),
        "duration_in_seconds": duration,
    }
    try:
        return TimeRecordCreate.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError([error["msg"] for error in exc.errors()]) from exc


class TimeRecordSubmit(BaseModel):
    """Request body for submitting a record.

    Fields are untyped here; type and value checks run in the service and
    come back as a failure result.
    """

    description: Any = None
    duration_in_seconds: Any = Field(
        None,
        validation_alias=AliasChoices("duration_in_seconds", "durationInSeconds"),
        examples=[125],
    )


class TimeRecordResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    description: str
    duration_in_seconds: int | float
    created_at: datetime
    user_id: str | None

    model_config = {"from_attributes": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def duration_display(self) -> str:
        return format_duration(self.duration_in_seconds)
