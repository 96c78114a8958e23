"""Supabase repository for user settings."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from weight_goals.domain.units import WeightUnit
from weight_goals.services.user_settings import UserSettingsRepository


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for user settings."""

    client: Client

    def get_settings(self, user_id: UUID) -> dict[str, object] | None:
        """Return the stored settings for a user."""
        response = (
            self.client.table("user_settings")
            .select("weight_unit, timezone")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0]

    def save_settings(
        self, user_id: UUID, weight_unit: WeightUnit, timezone: str
    ) -> None:
        """Upsert the user's weight unit and timezone."""
        self.client.table("user_settings").upsert(
            {
                "user_id": str(user_id),
                "weight_unit": weight_unit,
                "timezone": timezone,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
