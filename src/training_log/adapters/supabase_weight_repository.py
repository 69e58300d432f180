"""Supabase repository for body-weight entries."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from training_log.domain.weights import WeightRecord
from training_log.services.bucketing import parse_calendar_date
from training_log.services.weights import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for the weights table."""

    client: Client

    def list_weights(self) -> list[WeightRecord]:
        """Return all weight entries, newest first."""
        response = (
            self.client.table("weights")
            .select("id, date, weight")
            .order("date", desc=True)
            .execute()
        )
        return [_parse_weight(row) for row in response.data or []]

    def upsert_weight(self, day: date, weight: float) -> WeightRecord:
        """Store the weight for a day, replacing any existing entry."""
        response = (
            self.client.table("weights")
            .upsert({"date": day.isoformat(), "weight": weight}, on_conflict="date")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to store weight entry")
        return _parse_weight(response.data[0])


def _parse_weight(row: dict[str, object]) -> WeightRecord:
    row_id = row.get("id")
    return WeightRecord(
        id=str(row_id) if row_id is not None else None,
        date=parse_calendar_date(str(row.get("date", ""))),
        weight=float(row.get("weight") or 0.0),
    )
