from .base import Base
from .session import build_engine, build_session_factory
from .models import TimeRecordModel

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "TimeRecordModel",
]
