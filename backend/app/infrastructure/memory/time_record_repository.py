"""In-process TimeRecord repository for development and tests.

Records live in a plain list and are lost when the process exits.
"""

import logging
import threading

from app.application.interfaces import TimeRecordRepository
from app.domain.entities import TimeRecord

logger = logging.getLogger(__name__)


class InMemoryTimeRecordRepository(TimeRecordRepository):
    """Implements the TimeRecordRepository port with an append-only list."""

    def __init__(self) -> None:
        self._records: list[TimeRecord] = []
        self._lock = threading.Lock()

    async def save(self, record: TimeRecord) -> TimeRecord:
        with self._lock:
            self._records.append(record)
            size = len(self._records)
        logger.debug("Stored time record %s in memory (%d total)", record.id, size)
        return record

    async def list_all(self, user_id: str | None = None) -> list[TimeRecord]:
        with self._lock:
            snapshot = list(self._records)
        if user_id is not None:
            snapshot = [r for r in snapshot if r.user_id == user_id]
        # Newest insert wins on equal timestamps
        snapshot.reverse()
        return sorted(snapshot, key=lambda r: r.created_at, reverse=True)

    def count(self) -> int:
        with self._lock:
            return len(self._records)
