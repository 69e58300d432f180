"""Body-weight trend calculations."""

import calendar
from collections.abc import Sequence
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from training_log.domain.charts import ChartMode
from training_log.domain.weights import (
    MonthlyAverage,
    WeightHistoryEntry,
    WeightRecord,
)
from training_log.services.bucketing import bucket_key, parse_calendar_date

WEEK_WINDOW_DAYS = 7
ONE_DECIMAL = Decimal("0.1")


def round_half_up(value: float) -> Decimal:
    """Round to one decimal place, sending exact ties away from zero."""
    return Decimal(value).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


def format_delta(value: float) -> str:
    """Format a delta with one decimal place and an explicit plus sign."""
    rounded = round_half_up(value)
    if rounded == 0:
        return "0.0"
    return f"{rounded:+.1f}"


def previous_month_range(day: date) -> tuple[date, date]:
    """Return the first and last day of the month before ``day``."""
    last = day.replace(day=1) - timedelta(days=1)
    return last.replace(day=1), last


def shift_months(day: date, months: int) -> date:
    """Move ``day`` by whole months, clamping to the target month's length."""
    index = day.year * 12 + day.month - 1 + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def _window_delta(
    value: float, records: Sequence[WeightRecord], start: date, end: date
) -> str | None:
    window = [
        record.weight
        for record in records
        if start <= parse_calendar_date(record.date) <= end
    ]
    if not window:
        return None
    return format_delta(value - sum(window) / len(window))


def diff_from_last_week(
    day: date, weight: float, records: Sequence[WeightRecord]
) -> str | None:
    """Compare ``weight`` with the mean of the seven days before ``day``."""
    start = day - timedelta(days=WEEK_WINDOW_DAYS)
    end = day - timedelta(days=1)
    return _window_delta(weight, records, start, end)


def diff_from_last_month(
    day: date, weight: float, records: Sequence[WeightRecord]
) -> str | None:
    """Compare ``weight`` with the mean of the previous calendar month."""
    start, end = previous_month_range(day)
    return _window_delta(weight, records, start, end)


def enrich(records: Sequence[WeightRecord]) -> list[WeightHistoryEntry]:
    """Attach prior-week and prior-month deltas to every record.

    Each record rescans the whole snapshot, which is fine for a single
    user's history.
    """
    entries = []
    for record in records:
        day = parse_calendar_date(record.date)
        entries.append(
            WeightHistoryEntry(
                id=record.id,
                date=day,
                weight=record.weight,
                diff_from_last_week=diff_from_last_week(day, record.weight, records),
                diff_from_last_month=diff_from_last_month(
                    day, record.weight, records
                ),
            )
        )
    return entries


def filter_recent(
    entries: Sequence[WeightHistoryEntry], today: date
) -> list[WeightHistoryEntry]:
    """Keep entries dated within the last calendar month of ``today``.

    The cutoff is one calendar month before ``today`` with the day clamped,
    and entries dated exactly on the cutoff are kept.
    """
    cutoff = shift_months(today, -1)
    return [entry for entry in entries if entry.date >= cutoff]


def monthly_averages(records: Sequence[WeightRecord]) -> list[MonthlyAverage]:
    """Return the mean weight per month, newest month first."""
    totals: dict[str, tuple[float, int]] = {}
    for record in records:
        month = bucket_key(record.date, ChartMode.MONTHLY)
        total, count = totals.get(month, (0.0, 0))
        totals[month] = (total + record.weight, count + 1)
    return [
        MonthlyAverage(month=month, average=float(round_half_up(total / count)))
        for month, (total, count) in sorted(totals.items(), reverse=True)
    ]
