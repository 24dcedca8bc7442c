"""Domain models for the food diary."""

from dataclasses import dataclass
from datetime import date

from meal_planner.domain.recipes import Recipe


@dataclass(frozen=True)
class FoodDiaryEntry:
    """A logged meal with nutrition scaled by serving size."""

    id: int
    user_id: int
    recipe_id: int
    day: date
    meal_type: str
    serving_size: float
    calories: float
    proteins: float
    fats: float
    carbohydrates: float
    recipe: Recipe
