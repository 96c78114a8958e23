"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from weight_goals.adapters.supabase_goal_repository import SupabaseGoalRepository
from weight_goals.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from weight_goals.adapters.supabase_weight_repository import SupabaseWeightRepository
from weight_goals.config import Settings
from weight_goals.services.goals import GoalService
from weight_goals.services.user_settings import UserSettingsService
from weight_goals.services.weights import WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_settings_service: UserSettingsService
    weight_service: WeightService
    goal_service: GoalService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_settings_service = UserSettingsService(
        SupabaseUserSettingsRepository(supabase_client),
        default_weight_unit=resolved_settings.default_weight_unit,
        default_timezone=resolved_settings.default_timezone,
    )
    weight_service = WeightService(SupabaseWeightRepository(supabase_client))
    goal_service = GoalService(
        repository=SupabaseGoalRepository(supabase_client),
        weight_service=weight_service,
        user_settings_service=user_settings_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        user_settings_service=user_settings_service,
        weight_service=weight_service,
        goal_service=goal_service,
        close_resources=close_resources,
    )
