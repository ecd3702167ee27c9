"""Time tracking routes."""

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user, get_db
from app.api.schemas.common import APIResponse
from app.api.schemas.time_entry import TimeEntryResponse, TimerStart, TimerStop
from app.db.models.user import User
from app.services.time_entry import TimeEntryService

router = APIRouter(prefix="/time", tags=["Time Tracking"])


def get_time_entry_service(db: AsyncSession = Depends(get_db)) -> TimeEntryService:
    return TimeEntryService(db)


@router.post("/start", response_model=APIResponse[TimeEntryResponse], status_code=status.HTTP_201_CREATED)
async def start_timer(
    data: TimerStart,
    current_user: User = Depends(get_current_user),
    service: TimeEntryService = Depends(get_time_entry_service),
) -> APIResponse[TimeEntryResponse]:
    """Start a timer on an assigned project."""
    entry = await service.start_timer(current_user, data.project_id, data.description)
    return APIResponse.ok(TimeEntryResponse.model_validate(entry))


@router.post("/stop", response_model=APIResponse[TimeEntryResponse])
async def stop_timer(
    data: TimerStop,
    current_user: User = Depends(get_current_user),
    service: TimeEntryService = Depends(get_time_entry_service),
) -> APIResponse[TimeEntryResponse]:
    """Stop the caller's running timer."""
    entry = await service.stop_timer(current_user, data.time_entry_id)
    return APIResponse.ok(TimeEntryResponse.model_validate(entry))


@router.get("", response_model=APIResponse[list[TimeEntryResponse]])
async def list_time_entries(
    project_id: uuid.UUID | None = Query(default=None),
    current_user: User = Depends(get_current_user),
    service: TimeEntryService = Depends(get_time_entry_service),
) -> APIResponse[list[TimeEntryResponse]]:
    """The caller's time entries, newest first."""
    entries = await service.list_entries(current_user, project_id)
    return APIResponse.ok([TimeEntryResponse.model_validate(e) for e in entries])
