"""Calendar planning service."""

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Protocol

from meal_planner.domain.nutrition import BodyMetrics, DailyNutrition, MacroTotals
from meal_planner.domain.planning import CalendarItem
from meal_planner.services.errors import ConflictError, NotFoundError
from meal_planner.services.nutrition import daily_nutrition

if TYPE_CHECKING:
    from meal_planner.services.recipes import RecipeService

DUPLICATE_MESSAGE = "This recipe is already planned for that meal on that date"


class CalendarRepository(Protocol):
    """Persistence interface for calendar entries."""

    def list_items(self, user_id: int) -> list[CalendarItem]:
        """Return the user's entries ordered by date."""

    def list_items_for_day(self, user_id: int, day: date) -> list[CalendarItem]:
        """Return the user's entries for one calendar day."""

    def get_item(self, user_id: int, item_id: int) -> CalendarItem | None:
        """Return one of the user's entries, if present."""

    def find_item(
        self,
        user_id: int,
        day: date,
        recipe_id: int,
        meal_type: str,
    ) -> CalendarItem | None:
        """Return the entry matching the uniqueness key, if present."""

    def create_item(
        self, user_id: int, recipe_id: int, day: date, meal_type: str
    ) -> CalendarItem:
        """Create an entry and return it."""

    def update_item(self, item_id: int, day: date, meal_type: str) -> CalendarItem:
        """Move an entry to another day or meal."""

    def delete_item(self, user_id: int, item_id: int) -> None:
        """Delete one of the user's entries."""

    def delete_for_recipe(self, recipe_id: int) -> None:
        """Delete every entry planning the recipe."""


@dataclass
class CalendarService:
    """Application service for the meal calendar."""

    repository: CalendarRepository
    recipe_service: "RecipeService"

    def list_items(self, user_id: int) -> list[CalendarItem]:
        return self.repository.list_items(user_id)

    def add_item(
        self, user_id: int, recipe_id: int, day: date, meal_type: str
    ) -> CalendarItem:
        """Plan a recipe; each (day, recipe, meal) appears at most once."""
        self.recipe_service.get_recipe(user_id, recipe_id)
        if self.repository.find_item(user_id, day, recipe_id, meal_type):
            raise ConflictError(DUPLICATE_MESSAGE)
        return self.repository.create_item(user_id, recipe_id, day, meal_type)

    def move_item(
        self, user_id: int, item_id: int, day: date, meal_type: str | None = None
    ) -> CalendarItem:
        """Move an entry, keeping its meal type unless a new one is given."""
        existing = self.repository.get_item(user_id, item_id)
        if existing is None:
            raise NotFoundError("Calendar item not found")
        target_meal = meal_type or existing.meal_type
        conflict = self.repository.find_item(
            user_id, day, existing.recipe_id, target_meal
        )
        if conflict and conflict.id != item_id:
            raise ConflictError(DUPLICATE_MESSAGE)
        return self.repository.update_item(item_id, day, target_meal)

    def remove_item(self, user_id: int, item_id: int) -> None:
        if self.repository.get_item(user_id, item_id) is None:
            raise NotFoundError("Calendar item not found")
        self.repository.delete_item(user_id, item_id)

    def planned_nutrition(
        self, user_id: int, day: date, metrics: BodyMetrics
    ) -> DailyNutrition:
        """Planned calories for a day compared with the recommendation."""
        items = self.repository.list_items_for_day(user_id, day)
        return daily_nutrition(
            day,
            [
                MacroTotals(
                    calories=item.recipe.calories,
                    proteins=item.recipe.proteins,
                    fats=item.recipe.fats,
                    carbohydrates=item.recipe.carbohydrates,
                )
                for item in items
            ],
            metrics,
        )
