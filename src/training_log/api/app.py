"""FastAPI application factory."""

import logging
from datetime import date

from fastapi import FastAPI, Query, Request, Response, status
from fastapi.responses import JSONResponse

from training_log.api.schemas import SetUpdateIn, WeightIn, WorkoutFormIn
from training_log.app_logging import configure_logging
from training_log.containers import AppContainer
from training_log.domain.charts import (
    AggregatedPoint,
    ChartMode,
    ChartPeriod,
    ChartQuery,
    MetricKind,
)
from training_log.domain.weights import (
    MonthlyAverage,
    WeightHistoryEntry,
    WeightRecord,
)
from training_log.domain.workouts import HistoryFilter, WorkoutForm, WorkoutSet
from training_log.services.export import export_filename
from training_log.services.history import SetNotFoundError
from training_log.services.workouts import WorkoutValidationError


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Training Log")
    app.state.container = container

    @app.exception_handler(WorkoutValidationError)
    async def workout_validation_error(
        request: Request, exc: WorkoutValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.problems},
        )

    @app.exception_handler(SetNotFoundError)
    async def set_not_found(request: Request, exc: SetNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": f"Set not found: {exc.args[0]}"},
        )

    @app.exception_handler(ValueError)
    async def invalid_value(request: Request, exc: ValueError) -> JSONResponse:
        logger.warning("Rejected request %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/master/exercises")
    async def list_exercises(request: Request) -> dict[str, object]:
        """Return the exercise master."""
        state_container: AppContainer = request.app.state.container
        exercises = state_container.master_service.list_exercises()
        return {
            "exercises": [
                {"id": item.id, "name": item.name, "category": item.category}
                for item in exercises
            ]
        }

    @app.get("/master/statuses")
    async def list_statuses(request: Request) -> dict[str, object]:
        """Return the set status master."""
        state_container: AppContainer = request.app.state.container
        statuses = state_container.master_service.list_statuses()
        return {"statuses": [{"id": item.id, "name": item.name} for item in statuses]}

    @app.get("/master/categories")
    async def list_categories(request: Request) -> dict[str, object]:
        """Return distinct exercise categories."""
        state_container: AppContainer = request.app.state.container
        return {"categories": state_container.master_service.list_categories()}

    @app.get("/charts")
    async def chart(  # noqa: PLR0913
        request: Request,
        exercise: str | None = None,
        category: str | None = None,
        mode: ChartMode = ChartMode.DAILY,
        metric: MetricKind = MetricKind.VOLUME,
        period: ChartPeriod = ChartPeriod.ALL,
    ) -> dict[str, object]:
        """Return aggregated chart points for an exercise or category."""
        state_container: AppContainer = request.app.state.container
        query = ChartQuery(
            exercise=exercise,
            category=category,
            mode=mode,
            metric=metric,
            period=period,
        )
        points = state_container.chart_service.get_chart(
            query, state_container.today()
        )
        return {
            "mode": str(mode),
            "metric": str(metric),
            "period": str(period),
            "points": [_serialize_point(point) for point in points],
        }

    @app.get("/weights")
    async def weight_overview(request: Request) -> dict[str, object]:
        """Return recent weight history with deltas and monthly averages."""
        state_container: AppContainer = request.app.state.container
        overview = state_container.weight_service.get_overview(
            state_container.today()
        )
        return {
            "history": [_serialize_history_entry(entry) for entry in overview.history],
            "monthly_averages": [
                _serialize_average(average) for average in overview.monthly_averages
            ],
            "last_weight": overview.last_weight,
        }

    @app.post("/weights", status_code=status.HTTP_201_CREATED)
    async def log_weight(payload: WeightIn, request: Request) -> dict[str, object]:
        """Record today's (or the given day's) body weight."""
        state_container: AppContainer = request.app.state.container
        day = payload.date or state_container.today()
        record = state_container.weight_service.log_weight(day, payload.weight)
        return _serialize_weight(record)

    @app.get("/history")
    async def history(
        request: Request,
        exercise: str | None = None,
        set_status: str | None = Query(default=None, alias="status"),
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> dict[str, object]:
        """Return filtered sets and the body-weight lookup."""
        state_container: AppContainer = request.app.state.container
        history_service = state_container.history_service
        sets = history_service.filter_sets(
            HistoryFilter(
                exercise=exercise,
                status=set_status,
                start_date=start_date,
                end_date=end_date,
            )
        )
        return {
            "sets": [_serialize_set(item) for item in sets],
            "body_weights": {
                day.isoformat(): weight
                for day, weight in history_service.body_weights().items()
            },
        }

    @app.patch("/history/sets/{set_id}")
    async def update_set(
        set_id: str, payload: SetUpdateIn, request: Request
    ) -> dict[str, object]:
        """Edit a logged set."""
        state_container: AppContainer = request.app.state.container
        updated = state_container.history_service.update_set(
            set_id, payload.model_dump(exclude_unset=True)
        )
        return _serialize_set(updated)

    @app.delete("/history/sets/{set_id}")
    async def delete_set(set_id: str, request: Request) -> dict[str, str]:
        """Delete a logged set."""
        state_container: AppContainer = request.app.state.container
        state_container.history_service.delete_set(set_id)
        return {"status": "ok"}

    @app.get("/workouts/defaults")
    async def workout_defaults(
        request: Request,
        exercise: str | None = None,
        set_status: str | None = Query(default=None, alias="status"),
    ) -> dict[str, object]:
        """Return pre-filled values for the workout form."""
        state_container: AppContainer = request.app.state.container
        defaults = state_container.workout_service.suggest_defaults(
            exercise, set_status, state_container.today()
        )
        return {
            "exercise_order": defaults.exercise_order,
            "set_number": defaults.set_number,
            "previous_weight": defaults.previous_weight,
        }

    @app.post("/workouts/sets", status_code=status.HTTP_201_CREATED)
    async def record_set(payload: WorkoutFormIn, request: Request) -> dict[str, object]:
        """Validate and store a workout set logged today."""
        state_container: AppContainer = request.app.state.container
        created = state_container.workout_service.record_set(
            WorkoutForm(**payload.model_dump()), state_container.today()
        )
        return _serialize_set(created)

    @app.get("/workouts/history")
    async def exercise_history(request: Request, exercise: str) -> dict[str, object]:
        """Return every logged set of an exercise."""
        state_container: AppContainer = request.app.state.container
        sets = state_container.workout_service.exercise_history(exercise)
        return {"sets": [_serialize_set(item) for item in sets]}

    @app.get("/export/training.csv")
    async def export_training(request: Request) -> Response:
        """Download all sets joined with body weight as CSV."""
        state_container: AppContainer = request.app.state.container
        try:
            content = state_container.export_service.generate_training_csv()
        except Exception:
            logger.exception("Failed to export training data")
            raise
        filename = export_filename(
            state_container.settings.export_prefix, state_container.today()
        )
        return Response(
            content=content,
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app


def _serialize_point(point: AggregatedPoint) -> dict[str, object]:
    return {"label": point.label, "value": point.value}


def _serialize_set(item: WorkoutSet) -> dict[str, object]:
    return {
        "id": item.id,
        "date": item.date.isoformat(),
        "exercise": item.exercise,
        "weight": item.weight,
        "reps": item.reps,
        "set_number": item.set_number,
        "status": item.status,
        "note": item.note,
        "exercise_order": item.exercise_order,
    }


def _serialize_weight(record: WeightRecord) -> dict[str, object]:
    return {"id": record.id, "date": record.date.isoformat(), "weight": record.weight}


def _serialize_history_entry(entry: WeightHistoryEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "date": entry.date.isoformat(),
        "weight": entry.weight,
        "diff_from_last_week": entry.diff_from_last_week,
        "diff_from_last_month": entry.diff_from_last_month,
    }


def _serialize_average(average: MonthlyAverage) -> dict[str, object]:
    return {"month": average.month, "average": average.average}
