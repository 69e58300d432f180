"""CSV export of training data."""

import csv
import io
from dataclasses import dataclass
from datetime import date

from training_log.domain.workouts import WorkoutSet
from training_log.services.weights import WeightRepository, body_weight_map
from training_log.services.workouts import SetRepository

CSV_HEADER = (
    "date",
    "body_weight",
    "exercise",
    "set_number",
    "weight",
    "reps",
    "status",
    "note",
    "exercise_order",
)
MISSING_BODY_WEIGHT = "-"


@dataclass
class ExportService:
    """Builds the training CSV joined with body weight."""

    set_repository: SetRepository
    weight_repository: WeightRepository

    def generate_training_csv(self) -> str:
        """Return every set as quoted CSV, newest date first."""
        weights = body_weight_map(self.weight_repository.list_weights())
        return render_training_csv(self.set_repository.list_sets(), weights)


def render_training_csv(sets: list[WorkoutSet], weights: dict[date, float]) -> str:
    """Render sets as CSV with every cell quoted."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for item in sets:
        writer.writerow(
            (
                item.date.isoformat(),
                weights.get(item.date, MISSING_BODY_WEIGHT),
                item.exercise,
                "" if item.set_number is None else item.set_number,
                item.weight,
                item.reps,
                item.status,
                item.note or "",
                item.exercise_order,
            )
        )
    return buffer.getvalue()


def export_filename(prefix: str, today: date) -> str:
    """Return the download name for an export made on ``today``."""
    return f"{prefix}_{today.isoformat()}.csv"
