"""Pydantic models for API request payloads."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class WeightIn(BaseModel):
    """Body-weight entry payload; date defaults to today."""

    date: dt.date | None = None
    weight: float = Field(gt=0, lt=1000)


class WorkoutFormIn(BaseModel):
    """Workout form payload, validated by the workout service."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    exercise: str = ""
    status: str = ""
    weight: str = ""
    reps: str = ""
    exercise_order: str = ""
    set_number: str = ""
    note: str = ""


class SetUpdateIn(BaseModel):
    """Partial update for a logged set."""

    date: dt.date | None = None
    exercise: str | None = None
    weight: float | None = Field(default=None, ge=0)
    reps: int | None = Field(default=None, ge=0)
    set_number: int | None = None
    status: str | None = None
    note: str | None = None
    exercise_order: int | None = Field(default=None, ge=1)
