"""Domain models for calendar planning, cart and pantry stock."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from meal_planner.domain.recipes import Ingredient, Recipe


class MealType(StrEnum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class CalendarItem:
    """A recipe planned for one meal of a calendar day."""

    id: int
    user_id: int
    recipe_id: int
    day: date
    meal_type: str
    recipe: Recipe


@dataclass(frozen=True)
class CartItem:
    """A recipe in the user's cart with a serving count."""

    id: int
    user_id: int
    recipe_id: int
    quantity: int
    recipe: Recipe


@dataclass(frozen=True)
class StockItem:
    """Pantry quantity of a single ingredient."""

    id: int
    user_id: int
    ingredient: Ingredient
    amount: float
