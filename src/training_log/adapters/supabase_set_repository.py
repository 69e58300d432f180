"""Supabase repository for logged sets."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from training_log.domain.workouts import WorkoutSet
from training_log.services.bucketing import parse_calendar_date
from training_log.services.workouts import SetRepository

_SETS_TABLE = "sets"


@dataclass
class SupabaseSetRepository(SetRepository):
    """Supabase implementation for set queries."""

    client: Client

    def list_sets(self) -> list[WorkoutSet]:
        """Return all sets, newest date first then by exercise order."""
        response = (
            self.client.table(_SETS_TABLE)
            .select("*")
            .order("date", desc=True)
            .order("exercise_order", desc=False)
            .order("set_number", desc=False)
            .execute()
        )
        return [_parse_set(row) for row in response.data or []]

    def list_chart_sets(
        self, exercises: list[str], statuses: list[str], since: date | None
    ) -> list[WorkoutSet]:
        """Return counted sets for the given exercises in ascending date order."""
        query = (
            self.client.table(_SETS_TABLE)
            .select("*")
            .in_("exercise", exercises)
            .in_("status", statuses)
        )
        if since is not None:
            query = query.gte("date", since.isoformat())
        response = query.order("date", desc=False).execute()
        return [_parse_set(row) for row in response.data or []]

    def list_sets_for_day(
        self, day: date, exercise: str | None = None, status: str | None = None
    ) -> list[WorkoutSet]:
        """Return sets logged on a day."""
        query = self.client.table(_SETS_TABLE).select("*").eq("date", day.isoformat())
        if exercise is not None:
            query = query.eq("exercise", exercise)
        if status is not None:
            query = query.eq("status", status)
        response = query.execute()
        return [_parse_set(row) for row in response.data or []]

    def latest_set(self, exercise: str, status: str) -> WorkoutSet | None:
        """Return the most recent set for an exercise and status."""
        response = (
            self.client.table(_SETS_TABLE)
            .select("*")
            .eq("exercise", exercise)
            .eq("status", status)
            .order("date", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_set(response.data[0])

    def list_exercise_sets(self, exercise: str) -> list[WorkoutSet]:
        """Return every set of an exercise, newest first."""
        response = (
            self.client.table(_SETS_TABLE)
            .select("*")
            .eq("exercise", exercise)
            .order("date", desc=True)
            .order("set_number", desc=False)
            .execute()
        )
        return [_parse_set(row) for row in response.data or []]

    def get_set(self, set_id: str) -> WorkoutSet | None:
        """Return a set by id, if present."""
        response = (
            self.client.table(_SETS_TABLE)
            .select("*")
            .eq("id", set_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_set(response.data[0])

    def create_set(self, payload: dict[str, object]) -> WorkoutSet:
        """Create a set and return it."""
        response = self.client.table(_SETS_TABLE).insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create set")
        return _parse_set(response.data[0])

    def update_set(self, set_id: str, changes: dict[str, object]) -> WorkoutSet:
        """Update a set and return it."""
        response = (
            self.client.table(_SETS_TABLE).update(changes).eq("id", set_id).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update set")
        return _parse_set(response.data[0])

    def delete_set(self, set_id: str) -> None:
        """Delete a set."""
        self.client.table(_SETS_TABLE).delete().eq("id", set_id).execute()


def _parse_set(row: dict[str, object]) -> WorkoutSet:
    """Parse a sets row into a domain model."""
    set_number = row.get("set_number")
    return WorkoutSet(
        id=str(row["id"]),
        date=parse_calendar_date(str(row.get("date", ""))),
        exercise=str(row.get("exercise", "")),
        weight=float(row.get("weight") or 0.0),
        reps=int(row.get("reps") or 0),
        set_number=int(set_number) if set_number is not None else None,
        status=str(row.get("status", "")),
        note=str(row.get("note") or ""),
        exercise_order=int(row.get("exercise_order") or 0),
    )
