"""Supabase master data access."""

from dataclasses import dataclass

from supabase import Client

from training_log.domain.workouts import Exercise, Status
from training_log.services.master import MasterRepository


@dataclass
class SupabaseMasterRepository(MasterRepository):
    """Supabase implementation for exercise and status masters."""

    client: Client

    def list_exercises(self) -> list[Exercise]:
        """Return exercises ordered by id."""
        response = (
            self.client.table("exercises")
            .select("exercises_id, name, category")
            .order("exercises_id", desc=False)
            .execute()
        )
        return [
            Exercise(
                id=int(row["exercises_id"]),
                name=str(row.get("name", "")),
                category=str(row.get("category") or ""),
            )
            for row in response.data or []
        ]

    def list_statuses(self) -> list[Status]:
        """Return set statuses ordered by id."""
        response = (
            self.client.table("statuses")
            .select("statuses_id, name")
            .order("statuses_id", desc=False)
            .execute()
        )
        return [
            Status(id=str(row["statuses_id"]), name=str(row.get("name", "")))
            for row in response.data or []
        ]
