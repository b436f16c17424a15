from .time_record_repository import SQLAlchemyTimeRecordRepository

__all__ = [
    "SQLAlchemyTimeRecordRepository",
]
