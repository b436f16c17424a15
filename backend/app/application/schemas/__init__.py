from .auth import IdentityResponse
from .result import ResultResponse
from .time_record import (
    TimeRecordCreate,
    TimeRecordResponse,
    TimeRecordSubmit,
    validate_time_record_input,
)

__all__ = [
    "IdentityResponse",
    "ResultResponse",
    "TimeRecordCreate",
    "TimeRecordResponse",
    "TimeRecordSubmit",
    "validate_time_record_input",
]
