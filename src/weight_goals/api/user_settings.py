"""User settings endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from weight_goals.api.auth import current_user_id, require_token
from weight_goals.api.models import SettingsUpdateRequest  # noqa: TC001

if TYPE_CHECKING:
    from weight_goals.containers import AppContainer

router = APIRouter(
    prefix="/settings", tags=["settings"], dependencies=[Depends(require_token)]
)


@router.get("")
async def get_settings(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, str]:
    """Return the user's weight unit and timezone."""
    container: AppContainer = request.app.state.container
    service = container.user_settings_service
    return {
        "weight_unit": service.get_weight_unit(user_id),
        "timezone": service.get_timezone(user_id),
    }


@router.put("")
async def update_settings(
    payload: SettingsUpdateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, str]:
    """Update the user's weight unit and timezone."""
    container: AppContainer = request.app.state.container
    try:
        container.user_settings_service.update(
            user_id, payload.weight_unit, payload.timezone
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return {"weight_unit": payload.weight_unit, "timezone": payload.timezone}
