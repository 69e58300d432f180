"""Domain models for body-weight tracking."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class WeightRecord:
    """Body-weight entry for one calendar date."""

    date: date
    weight: float
    id: str | None = None


@dataclass(frozen=True)
class WeightHistoryEntry:
    """Weight entry with signed deltas against the prior week and month."""

    date: date
    weight: float
    diff_from_last_week: str | None
    diff_from_last_month: str | None
    id: str | None = None


@dataclass(frozen=True)
class MonthlyAverage:
    """Mean body weight for a calendar month."""

    month: str
    average: float


@dataclass(frozen=True)
class WeightOverview:
    """Everything the weight page shows."""

    history: list[WeightHistoryEntry]
    monthly_averages: list[MonthlyAverage]
    last_weight: float | None
