"""Unit tests for the SupabaseAuthProvider."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from app.domain.exceptions import AuthErrorCode, AuthenticationError
from app.infrastructure.auth import AuthSession, SupabaseAuthProvider


# ── Helpers ──


_USER = {
    "id": "8d0fd2b3-9ca7-4c2e-8c53-12e4d2a0b5f1",
    "is_anonymous": True,
    "email": "",
    "created_at": "2025-03-01T09:30:00.123456Z",
}


def _make_mock_transport(
    status_code: int = 200,
    response_data: dict | None = None,
    seen: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Create a mock transport that returns a fixed response and records requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if response_data is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=response_data)

    return httpx.MockTransport(handler)


def _provider(transport: httpx.MockTransport, session: AuthSession) -> SupabaseAuthProvider:
    return SupabaseAuthProvider(
        base_url="https://project.supabase.co/",
        anon_key="anon-key",
        session=session,
        http_client=httpx.AsyncClient(transport=transport),
    )


# ── Tests ──


@pytest.mark.asyncio
async def test_no_token_means_no_identity_without_a_request():
    seen: list[httpx.Request] = []
    provider = _provider(_make_mock_transport(seen=seen), AuthSession())

    assert await provider.get_current_identity() is None
    assert seen == []


@pytest.mark.asyncio
async def test_get_current_identity_parses_user():
    seen: list[httpx.Request] = []
    session = AuthSession(access_token="jwt-1")
    provider = _provider(_make_mock_transport(response_data=_USER, seen=seen), session)

    identity = await provider.get_current_identity()

    assert identity.id == _USER["id"]
    assert identity.is_anonymous is True
    assert identity.email is None
    assert identity.created_at == datetime(2025, 3, 1, 9, 30, 0, 123456, tzinfo=timezone.utc)

    request = seen[0]
    assert request.method == "GET"
    assert str(request.url) == "https://project.supabase.co/auth/v1/user"
    assert request.headers["Authorization"] == "Bearer jwt-1"
    assert request.headers["apikey"] == "anon-key"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [401, 403])
async def test_rejected_token_means_signed_out(status_code):
    session = AuthSession(access_token="expired")
    provider = _provider(
        _make_mock_transport(status_code, {"msg": "Auth session missing!"}), session
    )

    assert await provider.get_current_identity() is None
    assert session.access_token is None
    assert session.changed is True


@pytest.mark.asyncio
async def test_anonymous_sign_in_stores_token():
    seen: list[httpx.Request] = []
    session = AuthSession()
    transport = _make_mock_transport(
        response_data={"access_token": "jwt-new", "refresh_token": "r", "user": _USER},
        seen=seen,
    )

    identity = await _provider(transport, session).create_anonymous_identity()

    assert identity.id == _USER["id"]
    assert session.access_token == "jwt-new"
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/auth/v1/signup"
    assert json.loads(seen[0].content) == {"data": {}}


@pytest.mark.asyncio
async def test_anonymous_sign_in_without_session_is_an_error():
    transport = _make_mock_transport(response_data={"user": _USER})

    with pytest.raises(AuthenticationError) as exc_info:
        await _provider(transport, AuthSession()).create_anonymous_identity()

    assert exc_info.value.code is AuthErrorCode.UNKNOWN_ERROR


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (429, AuthErrorCode.RATE_LIMIT_EXCEEDED),
        (503, AuthErrorCode.SERVICE_UNAVAILABLE),
        (422, AuthErrorCode.INVALID_REQUEST),
    ],
)
async def test_failed_sign_in_is_classified_by_status(status_code, expected):
    transport = _make_mock_transport(status_code, {"msg": "whatever the server says"})

    with pytest.raises(AuthenticationError) as exc_info:
        await _provider(transport, AuthSession()).create_anonymous_identity()

    assert exc_info.value.code is expected


@pytest.mark.asyncio
async def test_transport_failure_is_a_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    provider = _provider(httpx.MockTransport(handler), AuthSession(access_token="jwt"))

    with pytest.raises(AuthenticationError) as exc_info:
        await provider.get_current_identity()

    assert exc_info.value.code is AuthErrorCode.NETWORK_ERROR


@pytest.mark.asyncio
async def test_sign_out_clears_session():
    seen: list[httpx.Request] = []
    session = AuthSession(access_token="jwt")

    await _provider(_make_mock_transport(204, seen=seen), session).sign_out()

    assert seen[0].url.path == "/auth/v1/logout"
    assert session.access_token is None


@pytest.mark.asyncio
async def test_sign_out_server_error_keeps_session():
    session = AuthSession(access_token="jwt")

    with pytest.raises(AuthenticationError):
        await _provider(_make_mock_transport(500, {"msg": "down"}), session).sign_out()

    assert session.access_token == "jwt"


def test_requires_url_and_key():
    with pytest.raises(ValueError):
        SupabaseAuthProvider(base_url="", anon_key="", session=AuthSession())
