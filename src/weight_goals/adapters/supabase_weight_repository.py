"""Supabase repository for weigh-ins."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from weight_goals.domain.dates import parse_date_only
from weight_goals.domain.weights import WeightRecord
from weight_goals.services.weights import WeightRepository

@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for the body_metrics table."""

    client: Client

    def upsert_entry(self, user_id: UUID, day: date, weight_grams: int) -> WeightRecord:
        """Insert or overwrite the weigh-in for a user and day."""
        response = (
            self.client.table("body_metrics")
            .upsert(
                {
                    "user_id": str(user_id),
                    "date": day.isoformat(),
                    "weight_grams": weight_grams,
                },
                on_conflict="user_id,date",
            )
            .execute()
        )
        record = _parse_row(response.data[0]) if response.data else None
        if record is None:
            raise RuntimeError("Failed to save weight entry")
        return record

    def list_entries(
        self, user_id: UUID, start: date | None, end: date | None, limit: int | None
    ) -> list[WeightRecord]:
        """Return weigh-ins newest first.

        Rows without a parseable date are skipped. With a limit, pages are
        fetched until `limit` valid rows are found or the table runs out.
        """
        if limit is None:
            response = self._select(user_id, start, end).execute()
            return _parse_rows(response.data)

        records: list[WeightRecord] = []
        offset = 0
        while len(records) < limit:
            response = (
                self._select(user_id, start, end)
                .range(offset, offset + limit - 1)
                .execute()
            )
            rows = response.data or []
            records.extend(_parse_rows(rows))
            if len(rows) < limit:
                break
            offset += limit
        return records[:limit]

    def delete_entry(self, user_id: UUID, day: date) -> None:
        """Delete the weigh-in for a day."""
        self.client.table("body_metrics").delete().eq("user_id", str(user_id)).eq(
            "date", day.isoformat()
        ).execute()

    def _select(  # type: ignore[no-untyped-def]
        self, user_id: UUID, start: date | None, end: date | None
    ):
        query = (
            self.client.table("body_metrics")
            .select("date, weight_grams")
            .eq("user_id", str(user_id))
        )
        if start is not None:
            query = query.gte("date", start.isoformat())
        if end is not None:
            query = query.lte("date", end.isoformat())
        return query.order("date", desc=True)

def _parse_rows(rows: list[dict[str, object]] | None) -> list[WeightRecord]:
    records = [_parse_row(row) for row in rows or []]
    return [record for record in records if record is not None]

def _parse_row(row: dict[str, object]) -> WeightRecord | None:
    raw_date = row.get("date")
    day = parse_date_only(raw_date if isinstance(raw_date, str) else None)
    if day is None:
        return None
    return WeightRecord(
        day=day,
        weight_grams=int(row.get("weight_grams", 0)),
    )
