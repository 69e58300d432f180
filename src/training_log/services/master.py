"""Master data lookups for exercises and set statuses."""

from dataclasses import dataclass
from typing import Protocol

from training_log.domain.workouts import Exercise, Status


class MasterRepository(Protocol):
    """Persistence interface for master data."""

    def list_exercises(self) -> list[Exercise]:
        """Return exercises ordered by id."""

    def list_statuses(self) -> list[Status]:
        """Return set statuses ordered by id."""


@dataclass
class MasterDataService:
    """Read access to exercises, categories and statuses."""

    repository: MasterRepository

    def list_exercises(self) -> list[Exercise]:
        """Return all exercises."""
        return self.repository.list_exercises()

    def list_statuses(self) -> list[Status]:
        """Return all set statuses."""
        return self.repository.list_statuses()

    def list_categories(self) -> list[str]:
        """Return distinct exercise categories in master order."""
        categories: list[str] = []
        for exercise in self.repository.list_exercises():
            if exercise.category and exercise.category not in categories:
                categories.append(exercise.category)
        return categories

    def exercises_in_category(self, category: str) -> list[str]:
        """Return the names of every exercise in a category."""
        return [
            exercise.name
            for exercise in self.repository.list_exercises()
            if exercise.category == category
        ]
