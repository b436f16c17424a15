"""Domain entity for a completed, timed task."""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from app.domain.exceptions import ValidationError

# Largest duration a double column holds exactly.
MAX_DURATION_SECONDS = 2**53


@dataclass(frozen=True)
class TimeRecord:
    """Core domain entity for one finished timer run.

    ``id`` and ``created_at`` are assigned once by :meth:`create`; storage
    adapters hand them back unchanged.
    """

    description: str
    duration_in_seconds: int | float
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None

    def __post_init__(self) -> None:
        messages = []
        if not isinstance(self.description, str) or not self.description.strip():
            messages.append("Description is required")
        duration = self.duration_in_seconds
        if (
            isinstance(duration, bool)
            or not isinstance(duration, (int, float))
            or (isinstance(duration, float) and not math.isfinite(duration))
            or duration <= 0
        ):
            messages.append("Duration must be greater than 0")
        elif duration > MAX_DURATION_SECONDS:
            messages.append("Duration is too large")
        if messages:
            raise ValidationError(messages)

    @classmethod
    def create(
        cls,
        description: str,
        duration_in_seconds: int | float,
        user_id: str | None = None,
    ) -> "TimeRecord":
        """Build a new record with a fresh id and the current UTC timestamp."""
        if isinstance(description, str):
            description = description.strip()
        return cls(
            description=description,
            duration_in_seconds=duration_in_seconds,
            user_id=user_id,
        )


def format_duration(seconds: int | float) -> str:
    """Render a duration as ``HH:MM:SS``, truncating sub-second precision."""
    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
