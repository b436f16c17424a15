"""Helpers shared by the endpoints: Result → HTTP response, session cookie sync, request errors."""

import logging
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.application.schemas import ResultResponse
from app.config import Settings
from app.domain.entities import Result
from app.domain.exceptions import ErrorKind
from app.infrastructure.auth import AuthSession

logger = logging.getLogger(__name__)

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.AUTHENTICATION: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.STORAGE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def render_result(
    result: Result,
    response: Response,
    schema: type[ResultResponse],
    convert: Callable[[Any], Any] | None = None,
    success_status: int = status.HTTP_200_OK,
) -> ResultResponse:
    """Build the tagged union body and set the matching status code."""
    if result.success:
        response.status_code = success_status
        data = result.data
        if convert is not None and data is not None:
            data = convert(data)
        return schema(success=True, data=data)

    kind = result.error_kind or ErrorKind.UNKNOWN
    response.status_code = _STATUS_BY_KIND[kind]
    return schema(success=False, error=result.error, error_kind=kind)


def write_session_cookie(response: Response, session: AuthSession, settings: Settings) -> None:
    """Persist a token the auth provider issued or cleared during this request."""
    if not session.changed:
        return
    if session.access_token is None:
        response.delete_cookie(settings.session_cookie_name)
        return
    response.set_cookie(
        settings.session_cookie_name,
        session.access_token,
        max_age=settings.session_cookie_max_age,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def _describe_request_errors(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        return "Request body is not valid JSON"
    if any(tuple(error.get("loc", ()))[:1] == ("body",) for error in errors):
        return "Request body must be a JSON object"
    return ", ".join(str(error.get("msg", "")) for error in errors) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Render request parsing failures in the same tagged union as the endpoints."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _describe_request_errors(exc)
        logger.info("Rejected request to %s: %s", request.url.path, message)
        body = ResultResponse(success=False, error=message, error_kind=ErrorKind.VALIDATION)
        return JSONResponse(
            status_code=_STATUS_BY_KIND[ErrorKind.VALIDATION],
            content=body.model_dump(mode="json"),
        )
