"""Tests for weight service."""

from datetime import date

from training_log.services.weights import WeightService
from tests.conftest import TODAY, InMemoryWeightRepository


def test_log_weight_replaces_same_day(
    weight_repository: InMemoryWeightRepository,
) -> None:
    service = WeightService(weight_repository)

    service.log_weight(TODAY, 70.4)
    service.log_weight(TODAY, 70.1)

    assert [record.weight for record in weight_repository.list_weights()] == [70.1]


def test_overview_combines_history_averages_and_last_weight(
    weight_repository: InMemoryWeightRepository,
) -> None:
    weight_repository.add(TODAY, 70.0)
    weight_repository.add(date(2024, 3, 10), 71.0)
    weight_repository.add(date(2024, 2, 20), 72.0)
    weight_repository.add(date(2024, 1, 5), 74.0)

    overview = WeightService(weight_repository).get_overview(TODAY)

    assert [entry.date for entry in overview.history] == [
        TODAY,
        date(2024, 3, 10),
        date(2024, 2, 20),
    ]
    assert overview.history[0].diff_from_last_week == "-1.0"
    assert overview.history[0].diff_from_last_month == "-2.0"
    assert [average.month for average in overview.monthly_averages] == [
        "2024-03",
        "2024-02",
        "2024-01",
    ]
    assert overview.last_weight == 71.0


def test_overview_without_entries(weight_repository: InMemoryWeightRepository) -> None:
    overview = WeightService(weight_repository).get_overview(TODAY)

    assert overview.history == []
    assert overview.monthly_averages == []
    assert overview.last_weight is None


def test_body_weights_keyed_by_date(
    weight_repository: InMemoryWeightRepository,
) -> None:
    weight_repository.add(date(2024, 3, 1), 70.5)

    assert WeightService(weight_repository).body_weights() == {date(2024, 3, 1): 70.5}
