from .identity import Identity
from .result import Result
from .time_record import MAX_DURATION_SECONDS, TimeRecord, format_duration

__all__ = [
    "MAX_DURATION_SECONDS",
    "Identity",
    "Result",
    "TimeRecord",
    "format_duration",
]
