"""Domain models for chart aggregation."""

from dataclasses import dataclass
from enum import StrEnum


class ChartMode(StrEnum):
    """Bucket size for chart points."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class MetricKind(StrEnum):
    """Metric reduced over each bucket."""

    VOLUME = "volume"
    MAX_WEIGHT = "maxWeight"
    ESTIMATED_MAX = "estimatedMax"
    SET_COUNT = "setCount"


class ChartPeriod(StrEnum):
    """How far back a chart looks."""

    ONE_MONTH = "1m"
    THREE_MONTHS = "3m"
    SIX_MONTHS = "6m"
    ONE_YEAR = "1y"
    ALL = "all"


@dataclass(frozen=True)
class AggregatedPoint:
    """One chart point per bucket."""

    label: str
    value: float


@dataclass(frozen=True)
class ChartQuery:
    """Chart selection made by the caller."""

    exercise: str | None = None
    category: str | None = None
    mode: ChartMode = ChartMode.DAILY
    metric: MetricKind = MetricKind.VOLUME
    period: ChartPeriod = ChartPeriod.ALL
