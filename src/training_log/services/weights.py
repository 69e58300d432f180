"""Body-weight logging and trend service."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from training_log.domain.weights import WeightOverview, WeightRecord
from training_log.services.trends import enrich, filter_recent, monthly_averages

_logger = logging.getLogger(__name__)


class WeightRepository(Protocol):
    """Persistence interface for body-weight entries."""

    def list_weights(self) -> list[WeightRecord]:
        """Return all weight entries, newest first."""

    def upsert_weight(self, day: date, weight: float) -> WeightRecord:
        """Store the weight for a day, replacing any existing entry."""


@dataclass
class WeightService:
    """Service for body-weight entries and their trends."""

    repository: WeightRepository

    def log_weight(self, day: date, weight: float) -> WeightRecord:
        """Record the body weight for a day."""
        record = self.repository.upsert_weight(day, weight)
        _logger.info("Logged body weight: date=%s weight=%s", record.date, weight)
        return record

    def get_overview(self, today: date) -> WeightOverview:
        """Return last month's history with deltas, monthly means and last weight."""
        records = self.repository.list_weights()
        history = filter_recent(enrich(records), today)
        previous = next((record for record in records if record.date != today), None)
        return WeightOverview(
            history=history,
            monthly_averages=monthly_averages(records),
            last_weight=previous.weight if previous else None,
        )

    def body_weights(self) -> dict[date, float]:
        """Return body weight keyed by date."""
        return body_weight_map(self.repository.list_weights())


def body_weight_map(records: Iterable[WeightRecord]) -> dict[date, float]:
    """Index weight entries by date; later entries win."""
    return {record.date: record.weight for record in records}
