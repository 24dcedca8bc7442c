"""Services for shared ingredients."""

from dataclasses import dataclass
from typing import Protocol

from meal_planner.domain.recipes import Ingredient, RecipeIngredient
from meal_planner.services.errors import ConflictError, NotFoundError
from meal_planner.services.stock import StockRepository


class IngredientRepository(Protocol):
    """Persistence interface for ingredients."""

    def get_ingredient(self, ingredient_id: int) -> Ingredient | None:
        """Return an ingredient by id, if present."""

    def get_by_name(self, name: str) -> Ingredient | None:
        """Return an ingredient by exact name, if present."""

    def create_ingredient(self, name: str, amount_type: str) -> Ingredient:
        """Create an ingredient and return it."""

    def update_amount_type(self, ingredient_id: int, amount_type: str) -> Ingredient:
        """Change the unit of an ingredient."""

    def list_used_by(self, user_id: int) -> list[Ingredient]:
        """Return distinct ingredients used in recipes authored by the user."""

    def is_used_by(self, ingredient_id: int, user_id: int) -> bool:
        """Return True when one of the user's recipes uses the ingredient."""

    def delete_ingredient(self, ingredient_id: int) -> None:
        """Delete an ingredient row."""


def resolve_ingredient(
    repository: IngredientRepository,
    line: RecipeIngredient,
    *,
    refresh_amount_type: bool,
) -> Ingredient:
    """Find an ingredient by name or create it from the recipe line."""
    existing = repository.get_by_name(line.name)
    if existing is None:
        return repository.create_ingredient(line.name, line.amount_type)
    if refresh_amount_type and existing.amount_type != line.amount_type:
        return repository.update_amount_type(existing.id, line.amount_type)
    return existing


@dataclass
class IngredientService:
    """Application service for ingredient operations."""

    repository: IngredientRepository
    stock_repository: StockRepository

    def list_ingredients(self, user_id: int) -> list[Ingredient]:
        return self.repository.list_used_by(user_id)

    def create_ingredient(self, name: str, amount_type: str) -> Ingredient:
        if self.repository.get_by_name(name) is not None:
            raise ConflictError(f"Ingredient {name!r} already exists")
        return self.repository.create_ingredient(name, amount_type)

    def delete_ingredient(self, user_id: int, ingredient_id: int) -> None:
        """Delete an ingredient that none of the user's recipes use."""
        if self.repository.get_ingredient(ingredient_id) is None:
            raise NotFoundError("Ingredient not found")
        if self.repository.is_used_by(ingredient_id, user_id):
            raise ConflictError("Ingredient is used in your recipes")
        self.stock_repository.delete_for_ingredient(ingredient_id)
        self.repository.delete_ingredient(ingredient_id)
