"""Tests for CSV export."""

from datetime import date

from training_log.services.export import ExportService, export_filename
from tests.conftest import InMemorySetRepository, InMemoryWeightRepository


def test_generate_training_csv_joins_body_weight(
    set_repository: InMemorySetRepository,
    weight_repository: InMemoryWeightRepository,
) -> None:
    set_repository.add(date(2024, 3, 1), "ベンチプレス", 100, 5, note='felt "easy"')
    set_repository.add(
        date(2024, 3, 2),
        "スクワット",
        60,
        10,
        status="ウォームアップ",
        set_number=None,
        exercise_order=1,
    )
    weight_repository.add(date(2024, 3, 1), 70.5)
    service = ExportService(
        set_repository=set_repository, weight_repository=weight_repository
    )

    lines = service.generate_training_csv().splitlines()

    assert lines[0] == (
        '"date","body_weight","exercise","set_number","weight","reps",'
        '"status","note","exercise_order"'
    )
    assert lines[1] == (
        '"2024-03-02","-","スクワット","","60","10","ウォームアップ","","1"'
    )
    assert lines[2] == (
        '"2024-03-01","70.5","ベンチプレス","1","100","5","メイン",'
        '"felt ""easy""","1"'
    )


def test_generate_training_csv_without_sets(
    set_repository: InMemorySetRepository,
    weight_repository: InMemoryWeightRepository,
) -> None:
    service = ExportService(
        set_repository=set_repository, weight_repository=weight_repository
    )

    assert service.generate_training_csv().splitlines() == [
        '"date","body_weight","exercise","set_number","weight","reps",'
        '"status","note","exercise_order"'
    ]


def test_export_filename() -> None:
    assert export_filename("training_log", date(2024, 3, 15)) == (
        "training_log_2024-03-15.csv"
    )
