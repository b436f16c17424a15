"""Application service (use case) for saving and listing time records."""

import logging
from collections.abc import Mapping
from typing import Any

from app.application.interfaces import TimeRecordRepository
from app.application.schemas.time_record import validate_time_record_input
from app.application.services.auth_service import AuthService
from app.domain.entities import Result, TimeRecord
from app.domain.exceptions import (
    AuthenticationError,
    ErrorKind,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class TimeRecordService:
    """Orchestrates the save/list use cases. Depends on the repository port (DI).

    When ``user_scoped`` is set, records are stamped with the resolved
    identity on save and listing is limited to that identity. Both operations
    create an anonymous identity when the session has none.
    """

    def __init__(
        self,
        repository: TimeRecordRepository,
        auth_service: AuthService | None = None,
        *,
        user_scoped: bool = True,
    ):
        if user_scoped and auth_service is None:
            raise ValueError("A user-scoped TimeRecordService needs an AuthService")
        self._repository = repository
        self._auth_service = auth_service
        self._user_scoped = user_scoped

    async def save_time_record(self, raw: Mapping[str, Any]) -> Result[TimeRecord]:
        """Validate ``raw`` and persist it as a new record owned by the caller."""
        try:
            owner_id = await self._resolve_owner_id()
            data = validate_time_record_input(raw)
            record = TimeRecord.create(
                description=data.description,
                duration_in_seconds=data.duration_in_seconds,
                user_id=owner_id,
            )
            stored = await self._repository.save(record)
        except Exception as exc:
            return self._failure("save time record", exc)

        logger.info(
            "Saved time record %s (%ss) for user %s",
            stored.id,
            stored.duration_in_seconds,
            stored.user_id,
        )
        return Result.ok(stored)

    async def list_time_records(self) -> Result[list[TimeRecord]]:
        """Return the caller's records, most recent first."""
        try:
            owner_id = await self._resolve_owner_id()
            records = await self._repository.list_all(user_id=owner_id)
        except Exception as exc:
            return self._failure("list time records", exc)

        logger.debug("Listed %d time records for user %s", len(records), owner_id)
        return Result.ok(records)

    async def _resolve_owner_id(self) -> str | None:
        if not self._user_scoped:
            return None
        identity = await self._auth_service.resolve_identity()
        return identity.id

    @staticmethod
    def _failure(action: str, exc: Exception) -> Result:
        """Map an exception raised inside a use case onto a failure Result."""
        if isinstance(exc, AuthenticationError):
            logger.warning("Could not %s: authentication failed (%s)", action, exc.code.value)
            return Result.fail(
                f"Authentication failed: {exc.message}", ErrorKind.AUTHENTICATION
            )
        if isinstance(exc, ValidationError):
            logger.info("Rejected input while trying to %s: %s", action, exc)
            return Result.fail(str(exc), ErrorKind.VALIDATION)
        if isinstance(exc, StorageError):
            logger.error("Could not %s: %s", action, exc)
            return Result.fail(str(exc), ErrorKind.STORAGE)

        logger.exception("Unexpected error while trying to %s", action)
        return Result.fail(str(exc) or "Unknown error occurred", ErrorKind.UNKNOWN)
