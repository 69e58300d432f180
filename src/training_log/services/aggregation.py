"""Grouping and metric reduction over timed records."""

from collections.abc import Callable, Collection, Iterable, Sequence

from training_log.domain.charts import AggregatedPoint, ChartMode, MetricKind
from training_log.domain.workouts import TimedRecord
from training_log.services.bucketing import bucket_key, bucket_sort_key

EPLEY_DIVISOR = 30


def epley(weight: float, reps: int) -> float:
    """Estimate a one-rep max with the Epley formula."""
    if reps == 1:
        return weight
    return weight * (1 + reps / EPLEY_DIVISOR)


def _volume(group: Sequence[TimedRecord]) -> float:
    return sum(record.weight * record.reps for record in group)


def _max_weight(group: Sequence[TimedRecord]) -> float:
    return max(record.weight for record in group)


def _estimated_max(group: Sequence[TimedRecord]) -> float:
    return max(epley(record.weight, record.reps) for record in group)


def _set_count(group: Sequence[TimedRecord]) -> float:
    return len(group)


_REDUCERS: dict[MetricKind, Callable[[Sequence[TimedRecord]], float]] = {
    MetricKind.VOLUME: _volume,
    MetricKind.MAX_WEIGHT: _max_weight,
    MetricKind.ESTIMATED_MAX: _estimated_max,
    MetricKind.SET_COUNT: _set_count,
}


def group_by_bucket(
    records: Iterable[TimedRecord], mode: ChartMode | str
) -> dict[str, list[TimedRecord]]:
    """Partition records by bucket key, keeping input order within a group."""
    groups: dict[str, list[TimedRecord]] = {}
    for record in records:
        groups.setdefault(bucket_key(record.day, mode), []).append(record)
    return groups


def aggregate(
    records: Iterable[TimedRecord],
    mode: ChartMode | str,
    metric: MetricKind | str,
) -> list[AggregatedPoint]:
    """Reduce records to one point per bucket in chronological order."""
    reducer = _REDUCERS[MetricKind(metric)]
    groups = group_by_bucket(records, mode)
    labels = sorted(groups, key=lambda label: bucket_sort_key(label, mode))
    return [
        AggregatedPoint(label=label, value=reducer(groups[label])) for label in labels
    ]


def select_group(
    records: Iterable[TimedRecord], keys: Collection[str]
) -> list[TimedRecord]:
    """Keep records whose group key is one of ``keys``."""
    return [record for record in records if record.group_key in keys]
