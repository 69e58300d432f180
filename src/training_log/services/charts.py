"""Chart data service."""

import logging
from dataclasses import dataclass
from datetime import date

from training_log.domain.charts import AggregatedPoint, ChartPeriod, ChartQuery
from training_log.services.aggregation import aggregate, select_group
from training_log.services.master import MasterDataService
from training_log.services.trends import shift_months
from training_log.services.workouts import SetRepository

_logger = logging.getLogger(__name__)

_PERIOD_MONTHS = {
    ChartPeriod.ONE_MONTH: 1,
    ChartPeriod.THREE_MONTHS: 3,
    ChartPeriod.SIX_MONTHS: 6,
    ChartPeriod.ONE_YEAR: 12,
}


def period_start(period: ChartPeriod | str, today: date) -> date | None:
    """Return the earliest date a period covers, or None for all time."""
    months = _PERIOD_MONTHS.get(ChartPeriod(period))
    if months is None:
        return None
    return shift_months(today, -months)


@dataclass
class ChartService:
    """Fetches counted sets and aggregates them into chart points."""

    set_repository: SetRepository
    master_service: MasterDataService
    statuses: list[str]

    def get_chart(self, query: ChartQuery, today: date) -> list[AggregatedPoint]:
        """Return chart points for an exercise or a whole category."""
        exercises = self.resolve_exercises(query)
        if not exercises:
            return []
        since = period_start(query.period, today)
        sets = self.set_repository.list_chart_sets(exercises, self.statuses, since)
        records = select_group((item.to_record() for item in sets), exercises)
        points = aggregate(records, query.mode, query.metric)
        _logger.info(
            "Chart built: exercises=%s mode=%s metric=%s since=%s points=%s",
            len(exercises),
            query.mode,
            query.metric,
            since,
            len(points),
        )
        return points

    def resolve_exercises(self, query: ChartQuery) -> list[str]:
        """Return the exercise names a query covers."""
        if query.category:
            return self.master_service.exercises_in_category(query.category)
        if query.exercise:
            return [query.exercise]
        raise ValueError("Either exercise or category is required")
