"""FastAPI dependency injection — wires infrastructure to application layer.

Process-wide collaborators (repository, identity store, HTTP client) are
built once by ``create_app`` and kept on ``app.state``; everything here is
request-scoped.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from app.application.interfaces import AuthProvider, TimeRecordRepository
from app.application.services import AuthService, TimeRecordService
from app.config import Settings
from app.infrastructure.auth import (
    AuthSession,
    LocalAuthProvider,
    SupabaseAuthProvider,
)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_session(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> AuthSession:
    """Session token read from the request cookie; shared within one request."""
    return AuthSession(access_token=request.cookies.get(settings.session_cookie_name))


def get_auth_provider(
    request: Request,
    session: AuthSession = Depends(get_auth_session),
    settings: Settings = Depends(get_app_settings),
) -> AuthProvider:
    """Provides the configured AuthProvider bound to this request's session."""
    if settings.auth_backend == "supabase":
        return SupabaseAuthProvider(
            base_url=settings.supabase_url,
            anon_key=settings.supabase_anon_key,
            session=session,
            http_client=request.app.state.http_client,
            timeout=settings.auth_timeout_seconds,
        )
    return LocalAuthProvider(request.app.state.identity_store, session)


async def get_auth_service(
    provider: AuthProvider = Depends(get_auth_provider),
) -> AsyncGenerator[AuthService, None]:
    yield AuthService(provider)


def get_time_record_repository(request: Request) -> TimeRecordRepository:
    return request.app.state.time_record_repository


async def get_time_record_service(
    repository: TimeRecordRepository = Depends(get_time_record_repository),
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[TimeRecordService, None]:
    """Provides a TimeRecordService with its repository and auth wired up."""
    yield TimeRecordService(
        repository,
        auth_service,
        user_scoped=settings.scope_records_by_user,
    )
