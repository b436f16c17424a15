"""Anonymous session endpoints."""

from datetime import timedelta

from fastapi import APIRouter, Depends, Response

from app.application.schemas import IdentityResponse, ResultResponse
from app.application.services import AuthService
from app.config import Settings
from app.infrastructure.auth import AuthSession
from app.infrastructure.dependencies import (
    get_app_settings,
    get_auth_service,
    get_auth_session,
)
from app.presentation.api.responses import render_result, write_session_cookie

router = APIRouter(prefix="/auth", tags=["Auth"])


def _identity_converter(settings: Settings):
    max_age = timedelta(minutes=settings.anonymous_session_max_age_minutes)
    return lambda identity: IdentityResponse.from_entity(identity, max_age)


@router.get("/me", response_model=ResultResponse[IdentityResponse])
async def get_current_user(
    response: Response,
    service: AuthService = Depends(get_auth_service),
    session: AuthSession = Depends(get_auth_session),
    settings: Settings = Depends(get_app_settings),
) -> ResultResponse[IdentityResponse]:
    """Current identity, or ``data: null`` when there is no session. Never creates one."""
    result = await service.current_identity()
    write_session_cookie(response, session, settings)
    return render_result(
        result, response, ResultResponse[IdentityResponse], convert=_identity_converter(settings)
    )


@router.post("/anonymous", response_model=ResultResponse[IdentityResponse])
async def ensure_anonymous_user(
    response: Response,
    service: AuthService = Depends(get_auth_service),
    session: AuthSession = Depends(get_auth_session),
    settings: Settings = Depends(get_app_settings),
) -> ResultResponse[IdentityResponse]:
    """Return the current identity, signing in anonymously if there is none."""
    result = await service.ensure_identity()
    write_session_cookie(response, session, settings)
    return render_result(
        result, response, ResultResponse[IdentityResponse], convert=_identity_converter(settings)
    )


@router.post("/sign-out", response_model=ResultResponse[None])
async def sign_out(
    response: Response,
    service: AuthService = Depends(get_auth_service),
    session: AuthSession = Depends(get_auth_session),
    settings: Settings = Depends(get_app_settings),
) -> ResultResponse[None]:
    result = await service.sign_out()
    write_session_cookie(response, session, settings)
    return render_result(result, response, ResultResponse[None])
