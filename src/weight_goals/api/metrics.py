"""Weight history endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from weight_goals.api.auth import current_user_id, require_token
from weight_goals.api.models import WeightLogRequest  # noqa: TC001
from weight_goals.api.serializers import entry_to_dict

if TYPE_CHECKING:
    from weight_goals.containers import AppContainer

router = APIRouter(
    prefix="/metrics", tags=["metrics"], dependencies=[Depends(require_token)]
)


@router.get("")
async def list_metrics(
    request: Request,
    start: date | None = None,
    end: date | None = None,
    user_id: UUID = Depends(current_user_id),
) -> list[dict[str, object]]:
    """Return weigh-ins newest first."""
    if start and end and start > end:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid date range"
        )
    container: AppContainer = request.app.state.container
    unit = container.user_settings_service.get_weight_unit(user_id)
    history = container.weight_service.list_history(user_id, unit, start, end)
    return [entry_to_dict(entry) for entry in history]


@router.post("")
async def log_metric(
    payload: WeightLogRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Store a weigh-in, replacing any entry for the same day."""
    container: AppContainer = request.app.state.container
    unit = container.user_settings_service.get_weight_unit(user_id)
    try:
        entry = container.weight_service.log_weight(
            user_id, unit, payload.day, payload.weight
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return entry_to_dict(entry)


@router.delete("/{day}")
async def delete_metric(
    day: date, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, str]:
    """Remove the weigh-in for a day."""
    container: AppContainer = request.app.state.container
    container.weight_service.delete_entry(user_id, day)
    return {"status": "ok"}
