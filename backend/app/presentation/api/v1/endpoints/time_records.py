"""Time record endpoints: submit a finished timer run, list past runs."""

from fastapi import APIRouter, Depends, Response, status

from app.application.schemas import ResultResponse, TimeRecordResponse, TimeRecordSubmit
from app.application.services import TimeRecordService
from app.config import Settings
from app.infrastructure.auth import AuthSession
from app.infrastructure.dependencies import (
    get_app_settings,
    get_auth_session,
    get_time_record_service,
)
from app.presentation.api.responses import render_result, write_session_cookie

router = APIRouter(prefix="/time-records", tags=["Time Records"])


def _to_response(record) -> TimeRecordResponse:
    return TimeRecordResponse.model_validate(record, from_attributes=True)


@router.post("", response_model=ResultResponse[TimeRecordResponse])
async def submit_time_record(
    response: Response,
    body: TimeRecordSubmit | None = None,
    service: TimeRecordService = Depends(get_time_record_service),
    session: AuthSession = Depends(get_auth_session),
    settings: Settings = Depends(get_app_settings),
) -> ResultResponse[TimeRecordResponse]:
    """Save a description + duration for the current (possibly new) user."""
    raw = body.model_dump() if body is not None else {}
    result = await service.save_time_record(raw)
    write_session_cookie(response, session, settings)
    return render_result(
        result,
        response,
        ResultResponse[TimeRecordResponse],
        convert=_to_response,
        success_status=status.HTTP_201_CREATED,
    )


@router.get("", response_model=ResultResponse[list[TimeRecordResponse]])
async def fetch_all_time_records(
    response: Response,
    service: TimeRecordService = Depends(get_time_record_service),
    session: AuthSession = Depends(get_auth_session),
    settings: Settings = Depends(get_app_settings),
) -> ResultResponse[list[TimeRecordResponse]]:
    """List the current user's records, most recent first."""
    result = await service.list_time_records()
    write_session_cookie(response, session, settings)
    return render_result(
        result,
        response,
        ResultResponse[list[TimeRecordResponse]],
        convert=lambda records: [_to_response(r) for r in records],
    )
