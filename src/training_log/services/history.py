"""Set history browsing and editing."""

import logging
from dataclasses import dataclass
from datetime import date

from training_log.domain.workouts import HistoryFilter, WorkoutSet
from training_log.services.weights import WeightRepository, body_weight_map
from training_log.services.workouts import SetRepository

_logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset(
    {
        "date",
        "exercise",
        "weight",
        "reps",
        "set_number",
        "status",
        "note",
        "exercise_order",
    }
)


class SetNotFoundError(LookupError):
    """Raised when a set id does not exist."""


@dataclass
class HistoryService:
    """Service behind the history table."""

    set_repository: SetRepository
    weight_repository: WeightRepository

    def filter_sets(self, history_filter: HistoryFilter) -> list[WorkoutSet]:
        """Return sets matching every filter that is set."""
        return [
            item
            for item in self.set_repository.list_sets()
            if _matches(item, history_filter)
        ]

    def body_weights(self) -> dict[date, float]:
        """Return body weight keyed by date for the history table."""
        return body_weight_map(self.weight_repository.list_weights())

    def update_set(self, set_id: str, changes: dict[str, object]) -> WorkoutSet:
        """Apply edits to a set."""
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")
        if self.set_repository.get_set(set_id) is None:
            raise SetNotFoundError(set_id)
        payload = {
            key: value.isoformat() if isinstance(value, date) else value
            for key, value in changes.items()
        }
        updated = self.set_repository.update_set(set_id, payload)
        _logger.info("Updated set: id=%s fields=%s", set_id, sorted(changes))
        return updated

    def delete_set(self, set_id: str) -> None:
        """Delete a set."""
        if self.set_repository.get_set(set_id) is None:
            raise SetNotFoundError(set_id)
        self.set_repository.delete_set(set_id)
        _logger.info("Deleted set: id=%s", set_id)


def _matches(item: WorkoutSet, history_filter: HistoryFilter) -> bool:
    if history_filter.exercise and item.exercise != history_filter.exercise:
        return False
    if history_filter.status and item.status != history_filter.status:
        return False
    if history_filter.start_date and item.date < history_filter.start_date:
        return False
    return not (history_filter.end_date and item.date > history_filter.end_date)
