"""User settings service."""

from dataclasses import dataclass
from typing import Protocol, cast
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from weight_goals.domain.units import WeightUnit, is_weight_unit


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_settings(self, user_id: UUID) -> dict[str, object] | None:
        """Return the stored settings row for a user, if any."""

    def save_settings(
        self, user_id: UUID, weight_unit: WeightUnit, timezone: str
    ) -> None:
        """Create or update the user's settings."""


@dataclass
class UserSettingsService:
    """Service for the per-user weight unit and timezone."""

    repository: UserSettingsRepository
    default_weight_unit: WeightUnit = "kg"
    default_timezone: str = "UTC"

    def get_weight_unit(self, user_id: UUID) -> WeightUnit:
        """Return the user's weight unit, or the default when unset."""
        row = self.repository.get_settings(user_id) or {}
        unit = row.get("weight_unit")
        if is_weight_unit(unit):
            return cast(WeightUnit, unit)
        return self.default_weight_unit

    def get_timezone(self, user_id: UUID) -> str:
        """Return the user's timezone, or the default when unset or unknown."""
        row = self.repository.get_settings(user_id) or {}
        timezone = row.get("timezone")
        if isinstance(timezone, str) and timezone and is_valid_timezone(timezone):
            return timezone
        return self.default_timezone

    def update(self, user_id: UUID, weight_unit: str, timezone: str) -> None:
        """Validate and persist a user's settings."""
        if not is_weight_unit(weight_unit):
            raise ValueError(f"Unsupported weight unit: {weight_unit}")
        if not is_valid_timezone(timezone):
            raise ValueError(f"Unknown timezone: {timezone}")
        self.repository.save_settings(user_id, cast(WeightUnit, weight_unit), timezone)


def is_valid_timezone(value: str) -> bool:
    """Return True when the value names a known IANA timezone."""
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True
