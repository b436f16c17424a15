"""Tagged success/error value returned by every service operation."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from app.domain.exceptions import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either ``success=True`` with ``data`` or ``success=False`` with ``error``."""

    success: bool
    data: T | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def ok(cls, data: T | None = None) -> "Result[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, kind: ErrorKind = ErrorKind.UNKNOWN) -> "Result[T]":
        return cls(success=False, error=error, error_kind=kind)
