"""Supabase Auth client implementing the AuthProvider interface.

Talks to the Supabase Auth (GoTrue) REST API with httpx:

    GET  /auth/v1/user     current user for a bearer token
    POST /auth/v1/signup   empty body → anonymous sign-in
    POST /auth/v1/logout   revoke the bearer token

Failures are classified into AuthErrorCode from the HTTP status and the
transport exception type.
"""

import logging
from datetime import datetime
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.application.interfaces import AuthProvider
from app.domain.entities import Identity
from app.domain.exceptions import AuthErrorCode, AuthenticationError
from app.infrastructure.auth.session import AuthSession

logger = logging.getLogger(__name__)

_DATETIME = TypeAdapter(datetime)

# Statuses meaning "this token no longer identifies anyone"
_NO_SESSION_STATUSES = frozenset({401, 403})
_SIGNED_OUT_STATUSES = frozenset({200, 204, 404}) | _NO_SESSION_STATUSES


class SupabaseAuthProvider(AuthProvider):
    """Infrastructure adapter for a Supabase project's auth API.

    An injected ``http_client`` is shared and left open; otherwise a client
    is created and closed per call.
    """

    def __init__(
        self,
        base_url: str,
        anon_key: str,
        session: AuthSession,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        if not base_url or not anon_key:
            raise ValueError("SupabaseAuthProvider needs a project URL and anon key")
        self._base_url = base_url.rstrip("/")
        self._anon_key = anon_key
        self._session = session
        self._http_client = http_client
        self._timeout = timeout

    def _get_headers(self, token: str | None = None) -> dict[str, str]:
        return {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {token or self._anon_key}",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        client = self._http_client or httpx.AsyncClient(timeout=self._timeout)
        should_close = self._http_client is None
        url = f"{self._base_url}/auth/v1{path}"

        try:
            return await client.request(
                method, url, headers=self._get_headers(token), json=payload
            )
        except httpx.TransportError as exc:
            logger.warning("Supabase auth %s %s failed: %s", method, path, exc)
            raise AuthenticationError(AuthErrorCode.NETWORK_ERROR) from exc
        finally:
            if should_close:
                await client.aclose()

    async def get_current_identity(self) -> Identity | None:
        token = self._session.access_token
        if not token:
            return None

        response = await self._request("GET", "/user", token=token)
        if response.status_code in _NO_SESSION_STATUSES:
            logger.debug("Session token rejected (%d); treating as signed out", response.status_code)
            self._session.clear()
            return None
        if response.status_code != 200:
            self._raise_auth_error(response)

        return self._to_identity(response.json())

    async def create_anonymous_identity(self) -> Identity:
        response = await self._request("POST", "/signup", payload={"data": {}})
        if response.status_code != 200:
            self._raise_auth_error(response)

        data = response.json()
        token = data.get("access_token")
        user = data.get("user")
        if not token or not user:
            logger.error("Anonymous sign-in returned no session: keys=%s", sorted(data))
            raise AuthenticationError(AuthErrorCode.UNKNOWN_ERROR)

        self._session.set_token(token)
        return self._to_identity(user)

    async def sign_out(self) -> None:
        token = self._session.access_token
        if not token:
            return

        response = await self._request("POST", "/logout", token=token)
        if response.status_code not in _SIGNED_OUT_STATUSES:
            self._raise_auth_error(response)
        self._session.clear()

    @staticmethod
    def _to_identity(data: dict[str, Any]) -> Identity:
        """Map a GoTrue user object → domain Identity."""
        try:
            user_id = str(data["id"])
        except KeyError as exc:
            raise AuthenticationError(AuthErrorCode.UNKNOWN_ERROR) from exc

        kwargs: dict[str, Any] = {
            "id": user_id,
            "is_anonymous": bool(data.get("is_anonymous", True)),
            "email": data.get("email") or None,
        }
        raw_created = data.get("created_at")
        if raw_created:
            try:
                kwargs["created_at"] = _DATETIME.validate_python(raw_created)
            except PydanticValidationError:
                logger.debug("Unparseable created_at %r for user %s", raw_created, user_id)
        return Identity(**kwargs)

    @staticmethod
    def _raise_auth_error(response: httpx.Response) -> None:
        """Raise AuthenticationError from a failed httpx Response."""
        status = response.status_code
        if status == 429:
            code = AuthErrorCode.RATE_LIMIT_EXCEEDED
        elif status >= 500:
            code = AuthErrorCode.SERVICE_UNAVAILABLE
        elif 400 <= status < 500:
            code = AuthErrorCode.INVALID_REQUEST
        else:
            code = AuthErrorCode.UNKNOWN_ERROR

        try:
            body = response.json()
            detail = body.get("msg") or body.get("error_description") or body.get("message")
        except Exception:
            detail = response.text
        logger.warning("Supabase auth returned %d (%s): %s", status, code.value, detail)
        raise AuthenticationError(code)
