"""Domain models for workout logging."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Exercise:
    """Exercise master entry."""

    id: int
    name: str
    category: str


@dataclass(frozen=True)
class Status:
    """Set status master entry, e.g. main or warm-up."""

    id: str
    name: str


@dataclass(frozen=True)
class TimedRecord:
    """Single dated measurement consumed by the aggregation engine.

    ``day`` may be a ``date`` or any string accepted by
    ``parse_calendar_date``; parsing happens when the record is bucketed.
    """

    day: date | str
    weight: float
    reps: int = 1
    group_key: str | None = None


@dataclass(frozen=True)
class WorkoutSet:
    """Logged training set."""

    id: str
    date: date
    exercise: str
    weight: float
    reps: int
    set_number: int | None
    status: str
    note: str
    exercise_order: int

    def to_record(self) -> TimedRecord:
        """Return the aggregation view of this set."""
        return TimedRecord(
            day=self.date,
            weight=self.weight,
            reps=self.reps,
            group_key=self.exercise,
        )


@dataclass(frozen=True)
class WorkoutForm:
    """Raw workout form input before validation."""

    exercise: str
    status: str
    weight: str
    reps: str
    exercise_order: str
    set_number: str = ""
    note: str = ""


@dataclass(frozen=True)
class WorkoutDefaults:
    """Values pre-filled on the workout form."""

    exercise_order: int
    set_number: int | None
    previous_weight: float | None


@dataclass(frozen=True)
class HistoryFilter:
    """Optional filters for the set history view."""

    exercise: str | None = None
    status: str | None = None
    start_date: date | None = None
    end_date: date | None = None
