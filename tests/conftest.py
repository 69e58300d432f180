"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date
from uuid import uuid4

import pytest

from training_log.config import MAIN_STATUS, REST_PAUSE_STATUS, Settings
from training_log.containers import AppContainer
from training_log.domain.weights import WeightRecord
from training_log.domain.workouts import Exercise, Status, WorkoutSet
from training_log.services.charts import ChartService
from training_log.services.export import ExportService
from training_log.services.history import HistoryService
from training_log.services.master import MasterDataService, MasterRepository
from training_log.services.weights import WeightRepository, WeightService
from training_log.services.workouts import SetRepository, WorkoutService

TODAY = date(2024, 3, 15)


def _coerce_payload(payload: dict[str, object]) -> dict[str, object]:
    values = dict(payload)
    if isinstance(values.get("date"), str):
        values["date"] = date.fromisoformat(str(values["date"]))
    return values


@dataclass
class InMemorySetRepository(SetRepository):
    """In-memory set repository for tests."""

    sets: dict[str, WorkoutSet] = field(default_factory=dict)

    def add(  # noqa: PLR0913
        self,
        day: date,
        exercise: str,
        weight: float,
        reps: int,
        status: str = MAIN_STATUS,
        set_number: int | None = 1,
        exercise_order: int = 1,
        note: str = "",
    ) -> WorkoutSet:
        item = WorkoutSet(
            id=str(uuid4()),
            date=day,
            exercise=exercise,
            weight=weight,
            reps=reps,
            set_number=set_number,
            status=status,
            note=note,
            exercise_order=exercise_order,
        )
        self.sets[item.id] = item
        return item

    def list_sets(self) -> list[WorkoutSet]:
        ordered = sorted(
            self.sets.values(),
            key=lambda item: (item.exercise_order, item.set_number or 0),
        )
        return sorted(ordered, key=lambda item: item.date, reverse=True)

    def list_chart_sets(
        self, exercises: list[str], statuses: list[str], since: date | None
    ) -> list[WorkoutSet]:
        return sorted(
            (
                item
                for item in self.sets.values()
                if item.exercise in exercises
                and item.status in statuses
                and (since is None or item.date >= since)
            ),
            key=lambda item: item.date,
        )

    def list_sets_for_day(
        self, day: date, exercise: str | None = None, status: str | None = None
    ) -> list[WorkoutSet]:
        return [
            item
            for item in self.sets.values()
            if item.date == day
            and (exercise is None or item.exercise == exercise)
            and (status is None or item.status == status)
        ]

    def latest_set(self, exercise: str, status: str) -> WorkoutSet | None:
        matches = [
            item
            for item in self.sets.values()
            if item.exercise == exercise and item.status == status
        ]
        if not matches:
            return None
        return max(matches, key=lambda item: item.date)

    def list_exercise_sets(self, exercise: str) -> list[WorkoutSet]:
        return [item for item in self.list_sets() if item.exercise == exercise]

    def get_set(self, set_id: str) -> WorkoutSet | None:
        return self.sets.get(set_id)

    def create_set(self, payload: dict[str, object]) -> WorkoutSet:
        item = WorkoutSet(id=str(uuid4()), **_coerce_payload(payload))
        self.sets[item.id] = item
        return item

    def update_set(self, set_id: str, changes: dict[str, object]) -> WorkoutSet:
        updated = replace(self.sets[set_id], **_coerce_payload(changes))
        self.sets[set_id] = updated
        return updated

    def delete_set(self, set_id: str) -> None:
        self.sets.pop(set_id, None)


@dataclass
class InMemoryWeightRepository(WeightRepository):
    """In-memory weight repository for tests."""

    weights: dict[date, WeightRecord] = field(default_factory=dict)

    def add(self, day: date, weight: float) -> WeightRecord:
        record = WeightRecord(id=str(uuid4()), date=day, weight=weight)
        self.weights[day] = record
        return record

    def list_weights(self) -> list[WeightRecord]:
        return sorted(
            self.weights.values(), key=lambda record: record.date, reverse=True
        )

    def upsert_weight(self, day: date, weight: float) -> WeightRecord:
        return self.add(day, weight)


@dataclass
class InMemoryMasterRepository(MasterRepository):
    """In-memory master repository for tests."""

    exercises: list[Exercise] = field(
        default_factory=lambda: [
            Exercise(id=1, name="ベンチプレス", category="胸"),
            Exercise(id=2, name="スクワット", category="脚"),
            Exercise(id=3, name="デッドリフト", category="背中"),
            Exercise(id=4, name="ダンベルフライ", category="胸"),
        ]
    )
    statuses: list[Status] = field(
        default_factory=lambda: [
            Status(id="1", name=MAIN_STATUS),
            Status(id="2", name="ウォームアップ"),
            Status(id="3", name=REST_PAUSE_STATUS),
        ]
    )

    def list_exercises(self) -> list[Exercise]:
        return self.exercises

    def list_statuses(self) -> list[Status]:
        return self.statuses


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def set_repository() -> InMemorySetRepository:
    return InMemorySetRepository()


@pytest.fixture
def weight_repository() -> InMemoryWeightRepository:
    return InMemoryWeightRepository()


@pytest.fixture
def master_service() -> MasterDataService:
    return MasterDataService(InMemoryMasterRepository())


@pytest.fixture
def container(
    settings: Settings,
    set_repository: InMemorySetRepository,
    weight_repository: InMemoryWeightRepository,
    master_service: MasterDataService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        master_service=master_service,
        workout_service=WorkoutService(
            repository=set_repository, main_status=settings.main_status
        ),
        weight_service=WeightService(weight_repository),
        history_service=HistoryService(
            set_repository=set_repository, weight_repository=weight_repository
        ),
        chart_service=ChartService(
            set_repository=set_repository,
            master_service=master_service,
            statuses=[MAIN_STATUS, REST_PAUSE_STATUS],
        ),
        export_service=ExportService(
            set_repository=set_repository, weight_repository=weight_repository
        ),
        today=lambda: TODAY,
    )
