"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from supabase import create_client

from training_log.adapters.supabase_master_repository import (
    SupabaseMasterRepository,
)
from training_log.adapters.supabase_set_repository import SupabaseSetRepository
from training_log.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from training_log.config import Settings, resolve_chart_statuses
from training_log.services.charts import ChartService
from training_log.services.export import ExportService
from training_log.services.history import HistoryService
from training_log.services.master import MasterDataService
from training_log.services.weights import WeightService
from training_log.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    master_service: MasterDataService
    workout_service: WorkoutService
    weight_service: WeightService
    history_service: HistoryService
    chart_service: ChartService
    export_service: ExportService
    today: Callable[[], date]


def local_today(timezone_name: str) -> Callable[[], date]:
    """Return a provider for the current date in a timezone."""
    tz = ZoneInfo(timezone_name)

    def today() -> date:
        return datetime.now(tz=tz).date()

    return today


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    set_repository = SupabaseSetRepository(supabase_client)
    weight_repository = SupabaseWeightRepository(supabase_client)
    master_repository = SupabaseMasterRepository(supabase_client)
    master_service = MasterDataService(master_repository)
    workout_service = WorkoutService(
        repository=set_repository,
        main_status=resolved_settings.main_status,
    )
    weight_service = WeightService(weight_repository)
    history_service = HistoryService(
        set_repository=set_repository,
        weight_repository=weight_repository,
    )
    chart_service = ChartService(
        set_repository=set_repository,
        master_service=master_service,
        statuses=resolve_chart_statuses(resolved_settings.chart_statuses),
    )
    export_service = ExportService(
        set_repository=set_repository,
        weight_repository=weight_repository,
    )

    return AppContainer(
        settings=resolved_settings,
        master_service=master_service,
        workout_service=workout_service,
        weight_service=weight_service,
        history_service=history_service,
        chart_service=chart_service,
        export_service=export_service,
        today=local_today(resolved_settings.timezone),
    )
