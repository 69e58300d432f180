"""Workout set logging service."""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from training_log.domain.workouts import WorkoutDefaults, WorkoutForm, WorkoutSet

_logger = logging.getLogger(__name__)


class SetRepository(Protocol):
    """Persistence interface for logged sets."""

    def list_sets(self) -> list[WorkoutSet]:
        """Return all sets, newest date first then by exercise order."""

    def list_chart_sets(
        self, exercises: list[str], statuses: list[str], since: date | None
    ) -> list[WorkoutSet]:
        """Return sets for chart aggregation in ascending date order."""

    def list_sets_for_day(
        self, day: date, exercise: str | None = None, status: str | None = None
    ) -> list[WorkoutSet]:
        """Return sets logged on a day, optionally narrowed."""

    def latest_set(self, exercise: str, status: str) -> WorkoutSet | None:
        """Return the most recent set for an exercise and status."""

    def list_exercise_sets(self, exercise: str) -> list[WorkoutSet]:
        """Return every set of an exercise, newest first."""

    def get_set(self, set_id: str) -> WorkoutSet | None:
        """Return a set by id, if present."""

    def create_set(self, payload: dict[str, object]) -> WorkoutSet:
        """Create a set and return it."""

    def update_set(self, set_id: str, changes: dict[str, object]) -> WorkoutSet:
        """Update a set and return it."""

    def delete_set(self, set_id: str) -> None:
        """Delete a set."""


class WorkoutValidationError(ValueError):
    """Raised when a workout form is incomplete or malformed."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = problems


@dataclass
class WorkoutService:
    """Validates, records and pre-fills workout sets."""

    repository: SetRepository
    main_status: str

    def validate(self, form: WorkoutForm) -> list[str]:
        """Return validation problems for a form; empty when valid."""
        problems = []
        for field_name in ("exercise", "status", "weight", "reps", "exercise_order"):
            if not getattr(form, field_name).strip():
                problems.append(f"{field_name} is required")
        if form.status == self.main_status and not form.set_number.strip():
            problems.append("set_number is required for main sets")
        if problems:
            return problems

        if _parse_float(form.weight) is None:
            problems.append("weight must be a number")
        if _parse_int(form.reps) is None:
            problems.append("reps must be a whole number")
        if _parse_int(form.exercise_order) is None:
            problems.append("exercise_order must be a whole number")
        if form.status == self.main_status and _parse_int(form.set_number) is None:
            problems.append("set_number must be a whole number")
        return problems

    def record_set(self, form: WorkoutForm, day: date) -> WorkoutSet:
        """Persist a validated form as a set logged on ``day``."""
        problems = self.validate(form)
        if problems:
            raise WorkoutValidationError(problems)
        is_main = form.status == self.main_status
        created = self.repository.create_set(
            {
                "date": day.isoformat(),
                "exercise": form.exercise.strip(),
                "status": form.status,
                "weight": _parse_float(form.weight),
                "reps": _parse_int(form.reps),
                "note": form.note,
                "set_number": _parse_int(form.set_number) if is_main else None,
                "exercise_order": _parse_int(form.exercise_order),
            }
        )
        _logger.info(
            "Recorded set: exercise=%s status=%s date=%s",
            created.exercise,
            created.status,
            created.date,
        )
        return created

    def suggest_defaults(
        self, exercise: str | None, status: str | None, day: date
    ) -> WorkoutDefaults:
        """Return the next exercise order and, for main sets, weight and set number."""
        exercise_order = len(self.repository.list_sets_for_day(day)) + 1
        if status != self.main_status or not exercise:
            return WorkoutDefaults(
                exercise_order=exercise_order, set_number=None, previous_weight=None
            )
        previous = self.repository.latest_set(exercise, self.main_status)
        todays_main = self.repository.list_sets_for_day(
            day, exercise=exercise, status=self.main_status
        )
        return WorkoutDefaults(
            exercise_order=exercise_order,
            set_number=len(todays_main) + 1,
            previous_weight=previous.weight if previous else None,
        )

    def exercise_history(self, exercise: str) -> list[WorkoutSet]:
        """Return every logged set of an exercise, newest first."""
        if not exercise:
            return []
        return self.repository.list_exercise_sets(exercise)


def _parse_float(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None
