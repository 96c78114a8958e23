"""Goal endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from weight_goals.api.auth import current_user_id, require_token
from weight_goals.api.models import GoalCreateRequest  # noqa: TC001
from weight_goals.api.serializers import goal_to_dict, summary_to_dict
from weight_goals.services.goals import GoalValidationError

if TYPE_CHECKING:
    from weight_goals.containers import AppContainer

router = APIRouter(
    prefix="/goals", tags=["goals"], dependencies=[Depends(require_token)]
)


@router.get("")
async def get_goal(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object] | None:
    """Return the user's current goal."""
    container: AppContainer = request.app.state.container
    unit = container.user_settings_service.get_weight_unit(user_id)
    goal = container.goal_service.get_goal(user_id, unit)
    return goal_to_dict(goal) if goal else None


@router.post("")
async def create_goal(
    payload: GoalCreateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Store a new goal that replaces the current one."""
    container: AppContainer = request.app.state.container
    unit = container.user_settings_service.get_weight_unit(user_id)
    try:
        goal = container.goal_service.create_goal(
            user_id,
            unit,
            start_weight=payload.start_weight,
            target_weight=payload.target_weight,
            daily_calorie_delta=payload.daily_calorie_delta,
        )
    except GoalValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return goal_to_dict(goal)


@router.get("/summary")
async def goal_summary(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object] | None:
    """Return progress and projection for the current goal."""
    container: AppContainer = request.app.state.container
    summary = container.goal_service.summarize(user_id)
    return summary_to_dict(summary) if summary else None


@router.get("/editor-defaults")
async def editor_defaults(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return initial values for the goal editor."""
    container: AppContainer = request.app.state.container
    return asdict(container.goal_service.editor_defaults(user_id))
