from .time_record import TimeRecordModel

__all__ = [
    "TimeRecordModel",
]
