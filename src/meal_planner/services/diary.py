"""Food diary service."""

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Protocol

from meal_planner.domain.diary import FoodDiaryEntry
from meal_planner.domain.nutrition import BodyMetrics, DailyNutrition, MacroTotals
from meal_planner.services.errors import NotFoundError
from meal_planner.services.nutrition import daily_nutrition

if TYPE_CHECKING:
    from meal_planner.services.recipes import RecipeService


class FoodDiaryRepository(Protocol):
    """Persistence interface for food diary entries."""

    def list_entries(self, user_id: int, day: date | None) -> list[FoodDiaryEntry]:
        """Return the user's entries, optionally for one day, ordered by date."""

    def get_entry(self, user_id: int, entry_id: int) -> FoodDiaryEntry | None:
        """Return one of the user's entries, if present."""

    def create_entry(self, user_id: int, payload: dict[str, object]) -> FoodDiaryEntry:
        """Create an entry and return it."""

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        """Delete one of the user's entries."""


@dataclass
class FoodDiaryService:
    """Application service for logging eaten meals."""

    repository: FoodDiaryRepository
    recipe_service: "RecipeService"

    def list_entries(
        self, user_id: int, day: date | None = None
    ) -> list[FoodDiaryEntry]:
        return self.repository.list_entries(user_id, day)

    def log_meal(  # noqa: PLR0913
        self,
        user_id: int,
        recipe_id: int,
        day: date,
        meal_type: str,
        serving_size: float,
    ) -> FoodDiaryEntry:
        """Log a recipe, storing its nutrition scaled by the serving size."""
        recipe = self.recipe_service.get_recipe(user_id, recipe_id)
        return self.repository.create_entry(
            user_id,
            {
                "recipe_id": recipe_id,
                "date": day.isoformat(),
                "meal_type": meal_type,
                "serving_size": serving_size,
                "calories": recipe.calories * serving_size,
                "proteins": recipe.proteins * serving_size,
                "fats": recipe.fats * serving_size,
                "carbohydrates": recipe.carbohydrates * serving_size,
            },
        )

    def remove_entry(self, user_id: int, entry_id: int) -> None:
        if self.repository.get_entry(user_id, entry_id) is None:
            raise NotFoundError("Diary entry not found")
        self.repository.delete_entry(user_id, entry_id)

    def daily_summary(
        self, user_id: int, day: date, metrics: BodyMetrics
    ) -> DailyNutrition:
        """Totals for a day compared with the recommended calories."""
        entries = self.repository.list_entries(user_id, day)
        return daily_nutrition(
            day,
            [
                MacroTotals(
                    calories=entry.calories,
                    proteins=entry.proteins,
                    fats=entry.fats,
                    carbohydrates=entry.carbohydrates,
                )
                for entry in entries
            ],
            metrics,
        )
