"""Supabase repository for ingredients."""

from dataclasses import dataclass

from supabase import Client

from meal_planner.adapters.supabase_recipe_repository import parse_ingredient
from meal_planner.domain.recipes import Ingredient
from meal_planner.services.ingredients import IngredientRepository

_COLUMNS = "id, name, amount_type"


@dataclass
class SupabaseIngredientRepository(IngredientRepository):
    """Supabase implementation for ingredients."""

    client: Client

    def get_ingredient(self, ingredient_id: int) -> Ingredient | None:
        response = (
            self.client.table("ingredients")
            .select(_COLUMNS)
            .eq("id", ingredient_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_ingredient(response.data[0])

    def get_by_name(self, name: str) -> Ingredient | None:
        response = (
            self.client.table("ingredients")
            .select(_COLUMNS)
            .eq("name", name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_ingredient(response.data[0])

    def create_ingredient(self, name: str, amount_type: str) -> Ingredient:
        response = (
            self.client.table("ingredients")
            .insert({"name": name, "amount_type": amount_type})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create ingredient")
        return parse_ingredient(response.data[0])

    def update_amount_type(self, ingredient_id: int, amount_type: str) -> Ingredient:
        response = (
            self.client.table("ingredients")
            .update({"amount_type": amount_type})
            .eq("id", ingredient_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update ingredient")
        return parse_ingredient(response.data[0])

    def list_used_by(self, user_id: int) -> list[Ingredient]:
        """Return distinct ingredients used in recipes authored by the user."""
        response = (
            self.client.table("recipe_ingredients")
            .select("ingredients(id, name, amount_type), recipes!inner(author_id)")
            .eq("recipes.author_id", user_id)
            .execute()
        )
        seen: dict[int, Ingredient] = {}
        for row in response.data or []:
            embedded = row.get("ingredients")
            if not embedded:
                continue
            ingredient = parse_ingredient(embedded)
            seen.setdefault(ingredient.id, ingredient)
        return sorted(seen.values(), key=lambda ingredient: ingredient.name)

    def is_used_by(self, ingredient_id: int, user_id: int) -> bool:
        response = (
            self.client.table("recipe_ingredients")
            .select("id, recipes!inner(author_id)")
            .eq("ingredient_id", ingredient_id)
            .eq("recipes.author_id", user_id)
            .limit(1)
            .execute()
        )
        return bool(response.data)

    def delete_ingredient(self, ingredient_id: int) -> None:
        self.client.table("ingredients").delete().eq("id", ingredient_id).execute()
