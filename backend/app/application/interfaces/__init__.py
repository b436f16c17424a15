from .auth_provider import AuthProvider
from .time_record_repository import TimeRecordRepository

__all__ = [
    "AuthProvider",
    "TimeRecordRepository",
]
