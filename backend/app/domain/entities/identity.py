"""Domain entity for the user identity supplied by the auth collaborator."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True)
class Identity:
    """Read-only view of the current user; anonymous unless they signed up."""

    id: str
    is_anonymous: bool = True
    email: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def is_session_likely_valid(
        self,
        max_age: timedelta = timedelta(hours=1),
        now: datetime | None = None,
    ) -> bool:
        """Rough client-side check; the auth service is the real authority."""
        now = now or datetime.now(timezone.utc)
        created = self.created_at
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        return now - created < max_age
