"""Calendar bucketing for chart aggregation."""

from datetime import date, datetime

from training_log.domain.charts import ChartMode


class InvalidDateError(ValueError):
    """Raised when a value cannot be read as a calendar date."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid calendar date: {value!r}")
        self.value = value


def parse_calendar_date(value: date | datetime | str) -> date:
    """Return the calendar date for a date, datetime or ISO string.

    Full ISO timestamps keep only their date part; no timezone conversion
    is applied.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(value)
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as exc:
        raise InvalidDateError(value) from exc


def bucket_key(value: date | datetime | str, mode: ChartMode | str) -> str:
    """Return the bucket label for a date under the given mode.

    Weekly labels use the ISO week-numbering year, so 2024-12-30 is
    ``2025-W01`` and 2021-01-01 is ``2020-W53``.
    """
    day = parse_calendar_date(value)
    resolved = ChartMode(mode)
    if resolved is ChartMode.WEEKLY:
        iso_year, iso_week, _ = day.isocalendar()
        return f"{iso_year}-W{iso_week:02d}"
    if resolved is ChartMode.MONTHLY:
        return f"{day.year:04d}-{day.month:02d}"
    return day.isoformat()


def bucket_sort_key(key: str, mode: ChartMode | str) -> tuple[int, int] | str:
    """Return a key that orders bucket labels chronologically."""
    if ChartMode(mode) is ChartMode.WEEKLY:
        year, _, week = key.partition("-W")
        return int(year), int(week)
    return key
