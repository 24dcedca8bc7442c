"""Pantry stock service."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from meal_planner.domain.planning import StockItem
from meal_planner.services.errors import NotFoundError

if TYPE_CHECKING:
    from meal_planner.services.ingredients import IngredientRepository


class StockRepository(Protocol):
    """Persistence interface for pantry stock."""

    def list_stock(self, user_id: int) -> list[StockItem]:
        """Return every stock row of the user."""

    def upsert_stock(
        self, user_id: int, ingredient_id: int, amount: float
    ) -> StockItem:
        """Create or replace the stock amount for an ingredient."""

    def delete_stock(self, user_id: int, ingredient_id: int) -> None:
        """Remove the user's stock row for an ingredient."""

    def delete_for_ingredient(self, ingredient_id: int) -> None:
        """Remove stock rows of an ingredient for every user."""


@dataclass
class StockService:
    """Application service for pantry stock."""

    repository: StockRepository
    ingredient_repository: "IngredientRepository"

    def list_stock(self, user_id: int) -> list[StockItem]:
        """Stock rows for ingredients appearing in the user's recipes."""
        used = {
            ingredient.id
            for ingredient in self.ingredient_repository.list_used_by(user_id)
        }
        return [
            item
            for item in self.repository.list_stock(user_id)
            if item.ingredient.id in used
        ]

    def set_amount(
        self, user_id: int, ingredient_id: int, amount: float
    ) -> StockItem | None:
        """Set the pantry amount; zero or less removes the row and returns None."""
        if not self.ingredient_repository.is_used_by(ingredient_id, user_id):
            raise NotFoundError("Ingredient not found in your recipes")
        if amount <= 0:
            self.repository.delete_stock(user_id, ingredient_id)
            return None
        return self.repository.upsert_stock(user_id, ingredient_id, amount)
