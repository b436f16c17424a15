from .time_record_repository import InMemoryTimeRecordRepository

__all__ = ["InMemoryTimeRecordRepository"]
