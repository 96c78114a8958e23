"""Supabase repository for goals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from weight_goals.domain.goals import GoalRecord
from weight_goals.services.goals import GoalRepository

_GOAL_COLUMNS = (
    "id, user_id, start_weight_grams, target_weight_grams, daily_deficit, created_at"
)


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for goal persistence."""

    client: Client

    def create_goal(
        self,
        user_id: UUID,
        start_weight_grams: int,
        target_weight_grams: int,
        daily_calorie_delta: int,
    ) -> GoalRecord:
        """Insert a new goal row."""
        response = (
            self.client.table("goals")
            .insert(
                {
                    "user_id": str(user_id),
                    "start_weight_grams": start_weight_grams,
                    "target_weight_grams": target_weight_grams,
                    "daily_deficit": daily_calorie_delta,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create goal")
        return _parse_row(response.data[0])

    def get_latest_goal(self, user_id: UUID) -> GoalRecord | None:
        """Return the newest goal for a user."""
        response = (
            self.client.table("goals")
            .select(_GOAL_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> GoalRecord:
    created_at_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_at_raw)
        if isinstance(created_at_raw, str) and created_at_raw
        else None
    )
    return GoalRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        start_weight_grams=int(row.get("start_weight_grams", 0)),
        target_weight_grams=int(row.get("target_weight_grams", 0)),
        daily_calorie_delta=int(row.get("daily_deficit", 0)),
        created_at=created_at,
    )
