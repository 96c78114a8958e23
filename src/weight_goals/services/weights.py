"""Weight history service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from weight_goals.domain.units import WeightUnit, grams_to_weight, parse_weight_to_grams
from weight_goals.domain.weights import WeightEntry, WeightRecord

_logger = logging.getLogger(__name__)


class WeightRepository(Protocol):
    """Persistence interface for weigh-ins."""

    def upsert_entry(self, user_id: UUID, day: date, weight_grams: int) -> WeightRecord:
        """Create or overwrite the weigh-in for a day."""

    def list_entries(
        self, user_id: UUID, start: date | None, end: date | None, limit: int | None
    ) -> list[WeightRecord]:
        """Return weigh-ins newest first, bounded inclusively by date.

        `limit` counts usable weigh-ins, not raw rows.
        """

    def delete_entry(self, user_id: UUID, day: date) -> None:
        """Remove the weigh-in for a day."""


@dataclass
class WeightService:
    """Service for logging and reading weigh-ins in the user's unit."""

    repository: WeightRepository

    def log_weight(
        self, user_id: UUID, unit: WeightUnit, day: date, weight: object
    ) -> WeightEntry:
        """Store a weigh-in, replacing any existing entry for the same day."""
        grams = parse_weight_to_grams(weight, unit)
        record = self.repository.upsert_entry(user_id, day, grams)
        _logger.info("Weight logged: user_id=%s day=%s", user_id, day)
        return _to_entry(record, unit)

    def list_history(
        self,
        user_id: UUID,
        unit: WeightUnit,
        start: date | None = None,
        end: date | None = None,
    ) -> list[WeightEntry]:
        """Return weigh-ins sorted newest first."""
        records = self.repository.list_entries(user_id, start, end, None)
        entries = [_to_entry(record, unit) for record in records]
        return sorted(entries, key=lambda entry: entry.day, reverse=True)

    def latest(self, user_id: UUID, unit: WeightUnit) -> WeightEntry | None:
        """Return the most recent weigh-in, if any."""
        records = self.repository.list_entries(user_id, None, None, 1)
        if not records:
            return None
        return _to_entry(records[0], unit)

    def delete_entry(self, user_id: UUID, day: date) -> None:
        """Remove one day's weigh-in."""
        self.repository.delete_entry(user_id, day)


def _to_entry(record: WeightRecord, unit: WeightUnit) -> WeightEntry:
    return WeightEntry(
        day=record.day, weight=grams_to_weight(record.weight_grams, unit)
    )
