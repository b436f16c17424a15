"""Domain-specific exceptions — framework-independent."""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories reported back to callers inside a Result."""

    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    STORAGE = "storage"
    UNKNOWN = "unknown"


class AuthErrorCode(str, Enum):
    """Structured reasons an identity could not be resolved or created."""

    NETWORK_ERROR = "network_error"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    SERVICE_UNAVAILABLE = "service_unavailable"
    INVALID_REQUEST = "invalid_request"
    UNKNOWN_ERROR = "unknown_error"


AUTH_ERROR_MESSAGES: dict[AuthErrorCode, str] = {
    AuthErrorCode.NETWORK_ERROR: (
        "Network connection failed. Please check your internet connection."
    ),
    AuthErrorCode.RATE_LIMIT_EXCEEDED: "Too many sign-in attempts. Please try again later.",
    AuthErrorCode.SERVICE_UNAVAILABLE: "Authentication service is temporarily unavailable.",
    AuthErrorCode.INVALID_REQUEST: "Invalid authentication request.",
    AuthErrorCode.UNKNOWN_ERROR: "An unexpected error occurred. Please try again.",
}


class TimeRecordError(Exception):
    """Base class for every recoverable error raised below the service layer."""

    kind: ErrorKind = ErrorKind.UNKNOWN


class ValidationError(TimeRecordError):
    """Raised when time record input fails validation.

    Carries one message per failed field so callers can report them all.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__(", ".join(self.messages))


class AuthenticationError(TimeRecordError):
    """Raised when the current identity cannot be resolved or created."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, code: AuthErrorCode, message: str | None = None):
        self.code = code
        self.message = message or AUTH_ERROR_MESSAGES[code]
        super().__init__(self.message)


class StorageError(TimeRecordError):
    """Raised when the backing store fails a read or write."""

    kind = ErrorKind.STORAGE

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"Failed to {operation}: {message}")
