"""Concrete repository implementation for TimeRecord backed by SQLAlchemy."""

import logging
from datetime import timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.interfaces import TimeRecordRepository
from app.domain.entities import TimeRecord
from app.domain.exceptions import StorageError
from app.infrastructure.database.models import TimeRecordModel

logger = logging.getLogger(__name__)


class SQLAlchemyTimeRecordRepository(TimeRecordRepository):
    """Implements the TimeRecordRepository port against the ``time_records`` table.

    Built once per process from a session factory; every call runs in its
    own session and commits before returning.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: TimeRecordModel) -> TimeRecord:
        """Map ORM model → domain entity."""
        duration = model.duration_in_seconds
        if isinstance(duration, float) and duration.is_integer():
            duration = int(duration)
        created_at = model.created_at
        # SQLite drops the offset on the way back
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return TimeRecord(
            id=model.id,
            description=model.description,
            duration_in_seconds=duration,
            created_at=created_at,
            user_id=model.user_id,
        )

    def _to_model(self, entity: TimeRecord) -> TimeRecordModel:
        """Map domain entity → ORM model (for creation)."""
        return TimeRecordModel(
            id=entity.id,
            description=entity.description,
            duration_in_seconds=float(entity.duration_in_seconds),
            created_at=entity.created_at,
            user_id=entity.user_id,
        )

    async def save(self, record: TimeRecord) -> TimeRecord:
        try:
            async with self._session_factory() as session:
                model = self._to_model(record)
                session.add(model)
                await session.commit()
                await session.refresh(model)
                return self._to_entity(model)
        except SQLAlchemyError as exc:
            logger.error("Insert into time_records failed: %s", exc)
            raise StorageError("save time record", str(exc)) from exc

    async def list_all(self, user_id: str | None = None) -> list[TimeRecord]:
        stmt = select(TimeRecordModel)
        if user_id is not None:
            stmt = stmt.where(TimeRecordModel.user_id == user_id)
        stmt = stmt.order_by(TimeRecordModel.created_at.desc())

        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                rows = result.scalars().all()
        except SQLAlchemyError as exc:
            logger.error("Select from time_records failed: %s", exc)
            raise StorageError("fetch time records", str(exc)) from exc

        return [self._to_entity(row) for row in rows]
