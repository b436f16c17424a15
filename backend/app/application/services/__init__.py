from .auth_service import AuthService
from .time_record_service import TimeRecordService

__all__ = [
    "AuthService",
    "TimeRecordService",
]
