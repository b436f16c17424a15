"""Pydantic DTOs for the auth endpoints."""

from datetime import datetime, timedelta

from pydantic import BaseModel

from app.domain.entities import Identity


class IdentityResponse(BaseModel):
    """Current identity as exposed to the client."""

    id: str
    is_anonymous: bool
    email: str | None
    created_at: datetime
    session_likely_valid: bool

    @classmethod
    def from_entity(cls, identity: Identity, max_age: timedelta) -> "IdentityResponse":
        return cls(
            id=identity.id,
            is_anonymous=identity.is_anonymous,
            email=identity.email,
            created_at=identity.created_at,
            session_likely_valid=identity.is_session_likely_valid(max_age),
        )
