"""Tagged union response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from app.domain.exceptions import ErrorKind

T = TypeVar("T")


class ResultResponse(BaseModel, Generic[T]):
    """``{success: true, data}`` or ``{success: false, error, error_kind}``."""

    success: bool
    data: T | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None
