"""Abstract repository interface (port) for TimeRecord persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import TimeRecord


class TimeRecordRepository(ABC):
    """Port for time record persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def save(self, record: TimeRecord) -> TimeRecord:
        """Persist a new record and return its stored representation.

        Raises:
            StorageError: If the backing store fails the write.
        """
        ...

    @abstractmethod
    async def list_all(self, user_id: str | None = None) -> list[TimeRecord]:
        """Return records, most recent first, optionally scoped to one owner.

        Returns an empty list when nothing is stored.

        Raises:
            StorageError: If the backing store fails the read.
        """
        ...
