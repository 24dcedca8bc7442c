"""Domain models for shopping lists."""

from dataclasses import dataclass, field
from datetime import date

from meal_planner.domain.recipes import RecipeIngredient


@dataclass(frozen=True)
class PlannedMeal:
    """A recipe contributing its ingredients to a shopping list."""

    recipe_id: int
    recipe_name: str
    ingredients: list[RecipeIngredient]
    meal_type: str | None = None
    servings: int = 1


@dataclass
class ShoppingListItem:
    """Quantity of an ingredient still to be bought."""

    name: str
    amount: float
    amount_type: str


@dataclass(frozen=True)
class ShoppingList:
    """Shortfall items plus the meals they were computed from."""

    items: list[ShoppingListItem]
    meals: list[PlannedMeal] = field(default_factory=list)
    day: date | None = None
