"""Services for personal recipes and the public recipe catalogue."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_planner.domain.models import UserRecord
from meal_planner.domain.recipes import (
    IngredientLink,
    Recipe,
    RecipeDraft,
    RecipeFilters,
)
from meal_planner.services.calendar import CalendarRepository
from meal_planner.services.errors import NotFoundError, PermissionDeniedError
from meal_planner.services.ingredients import IngredientRepository, resolve_ingredient
from meal_planner.services.users import UserRepository

LOW_CATEGORY_MAX = 300
HIGH_CATEGORY_MIN = 600

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes and their ingredient links."""

    def list_for_user(self, user_id: int) -> list[Recipe]:
        """Return the user's recipes and public recipes."""

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        """Return a recipe with ingredients, if present."""

    def create_recipe(self, author_id: int | None, fields: dict[str, object]) -> int:
        """Create a recipe row and return its id."""

    def update_recipe(self, recipe_id: int, fields: dict[str, object]) -> None:
        """Update recipe columns."""

    def delete_recipe(self, recipe_id: int) -> None:
        """Delete a recipe and its ingredient links."""

    def list_links(self, recipe_id: int) -> list[IngredientLink]:
        """Return the ingredient links of a recipe."""

    def create_link(self, recipe_id: int, ingredient_id: int, amount: float) -> None:
        """Link an ingredient to a recipe."""

    def update_link(self, link_id: int, amount: float) -> None:
        """Change the amount of an ingredient link."""

    def delete_links(self, link_ids: list[int]) -> None:
        """Remove ingredient links."""

    def list_catalogue(
        self, editor_id: int | None, filters: RecipeFilters
    ) -> list[Recipe]:
        """Return public and editor-authored recipes matching the filters."""


@dataclass
class RecipeService:
    """Application service for recipe operations."""

    repository: RecipeRepository
    ingredient_repository: IngredientRepository
    calendar_repository: CalendarRepository
    user_repository: UserRepository
    catalogue_editor_email: str | None = None

    def list_recipes(self, user_id: int) -> list[Recipe]:
        return self.repository.list_for_user(user_id)

    def get_recipe(self, user_id: int, recipe_id: int) -> Recipe:
        """Return a recipe visible to the user.

        Visible recipes are the user's own, those without an author and
        those written by the catalogue editor.
        """
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None or not self.is_visible(recipe, user_id):
            raise NotFoundError("Recipe not found")
        return recipe

    def is_visible(self, recipe: Recipe, user_id: int) -> bool:
        if recipe.author_id in {None, user_id}:
            return True
        editor = self._catalogue_editor()
        return editor is not None and recipe.author_id == editor.id

    def create_recipe(self, author_id: int | None, draft: RecipeDraft) -> Recipe:
        """Create a recipe; unknown ingredients are created by name."""
        recipe_id = self.repository.create_recipe(author_id, draft.fields())
        for line in draft.ingredients:
            ingredient = resolve_ingredient(
                self.ingredient_repository, line, refresh_amount_type=False
            )
            self.repository.create_link(recipe_id, ingredient.id, line.amount)
        return self._reload(recipe_id)

    def update_recipe(self, user_id: int, recipe_id: int, draft: RecipeDraft) -> Recipe:
        """Replace an owned recipe and sync its ingredient links."""
        self._get_owned(user_id, recipe_id)
        self.repository.update_recipe(recipe_id, draft.fields())
        links = self.repository.list_links(recipe_id)
        links_by_name = {link.ingredient.name: link for link in links}
        for line in draft.ingredients:
            ingredient = resolve_ingredient(
                self.ingredient_repository, line, refresh_amount_type=True
            )
            existing = links_by_name.get(line.name)
            if existing:
                self.repository.update_link(existing.id, line.amount)
            else:
                self.repository.create_link(recipe_id, ingredient.id, line.amount)
        submitted = {line.name for line in draft.ingredients}
        stale = [link.id for link in links if link.ingredient.name not in submitted]
        if stale:
            self.repository.delete_links(stale)
        return self._reload(recipe_id)

    def delete_recipe(self, user_id: int, recipe_id: int) -> None:
        """Delete an owned recipe along with its calendar entries."""
        self._get_owned(user_id, recipe_id)
        self.calendar_repository.delete_for_recipe(recipe_id)
        self.repository.delete_recipe(recipe_id)

    def list_catalogue(self, filters: RecipeFilters) -> list[Recipe]:
        """Return the public catalogue, filtered and sorted."""
        editor = self._catalogue_editor()
        recipes = self.repository.list_catalogue(
            editor.id if editor else None, filters
        )
        if filters.category:
            recipes = [
                recipe
                for recipe in recipes
                if matches_calorie_category(recipe.calories, filters.category)
            ]
        return recipes

    def update_public_recipe(
        self, user: UserRecord, recipe_id: int, draft: RecipeDraft
    ) -> Recipe:
        """Edit a catalogue recipe; optional fields are kept when omitted."""
        self._require_editable_public(user, recipe_id)
        fields: dict[str, object] = {
            "name": draft.name,
            "calories": draft.calories,
            "proteins": draft.proteins,
            "fats": draft.fats,
            "carbohydrates": draft.carbohydrates,
        }
        if draft.instructions is not None:
            fields["instructions"] = draft.instructions
        if draft.cooking_time is not None:
            fields["cooking_time"] = draft.cooking_time
        if draft.difficulty is not None:
            fields["difficulty"] = draft.difficulty
        self.repository.update_recipe(recipe_id, fields)
        return self._reload(recipe_id)

    def delete_public_recipe(self, user: UserRecord, recipe_id: int) -> None:
        self._require_editable_public(user, recipe_id)
        self.calendar_repository.delete_for_recipe(recipe_id)
        self.repository.delete_recipe(recipe_id)
        _logger.info("Catalogue recipe deleted: recipe_id=%s", recipe_id)

    def is_catalogue_editor(self, user: UserRecord) -> bool:
        return bool(self.catalogue_editor_email) and (
            user.email == self.catalogue_editor_email
        )

    def _catalogue_editor(self) -> UserRecord | None:
        if not self.catalogue_editor_email:
            return None
        return self.user_repository.get_by_email(self.catalogue_editor_email)

    def _require_editable_public(self, user: UserRecord, recipe_id: int) -> Recipe:
        if not self.is_catalogue_editor(user):
            raise PermissionDeniedError(
                "Only the catalogue editor may change public recipes"
            )
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        if recipe.author_id is not None and recipe.author_id != user.id:
            raise PermissionDeniedError(
                "Only public or editor-authored recipes may be changed"
            )
        return recipe

    def _get_owned(self, user_id: int, recipe_id: int) -> Recipe:
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None or recipe.author_id != user_id:
            raise NotFoundError("Recipe not found")
        return recipe

    def _reload(self, recipe_id: int) -> Recipe:
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise RuntimeError(f"Recipe {recipe_id} disappeared after write")
        return recipe


def matches_calorie_category(calories: float, category: str) -> bool:
    """Catalogue categories: low < 300, medium 300-600, high > 600 kcal."""
    if category == "low":
        return calories < LOW_CATEGORY_MAX
    if category == "medium":
        return LOW_CATEGORY_MAX <= calories <= HIGH_CATEGORY_MIN
    if category == "high":
        return calories > HIGH_CATEGORY_MIN
    return True
