"""Supabase repository for recipes and their ingredient links."""

from dataclasses import dataclass

from supabase import Client

from meal_planner.domain.recipes import (
    AuthorSummary,
    Ingredient,
    IngredientLink,
    Recipe,
    RecipeFilters,
    RecipeIngredient,
)
from meal_planner.services.recipes import RecipeRepository

RECIPE_COLUMNS = (
    "id, name, calories, proteins, fats, carbohydrates, instructions, "
    "cooking_time, difficulty, author_id, "
    "recipe_ingredients(id, amount, ingredients(id, name, amount_type)), "
    "author:users(id, name, email)"
)

_SORT_COLUMNS = {
    "name": "name",
    "calories": "calories",
    "cookingTime": "cooking_time",
    "cooking_time": "cooking_time",
    "difficulty": "difficulty",
}


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipes."""

    client: Client

    def list_for_user(self, user_id: int) -> list[Recipe]:
        response = (
            self.client.table("recipes")
            .select(RECIPE_COLUMNS)
            .or_(f"author_id.is.null,author_id.eq.{user_id}")
            .order("id", desc=False)
            .execute()
        )
        return [parse_recipe(row) for row in response.data or []]

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        response = (
            self.client.table("recipes")
            .select(RECIPE_COLUMNS)
            .eq("id", recipe_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_recipe(response.data[0])

    def create_recipe(self, author_id: int | None, fields: dict[str, object]) -> int:
        """Create a recipe row and return its id."""
        response = (
            self.client.table("recipes")
            .insert({**fields, "author_id": author_id})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return int(response.data[0]["id"])

    def update_recipe(self, recipe_id: int, fields: dict[str, object]) -> None:
        self.client.table("recipes").update(fields).eq("id", recipe_id).execute()

    def delete_recipe(self, recipe_id: int) -> None:
        """Delete a recipe after its ingredient links."""
        self.client.table("recipe_ingredients").delete().eq(
            "recipe_id", recipe_id
        ).execute()
        self.client.table("recipes").delete().eq("id", recipe_id).execute()

    def list_links(self, recipe_id: int) -> list[IngredientLink]:
        response = (
            self.client.table("recipe_ingredients")
            .select("id, recipe_id, amount, ingredients(id, name, amount_type)")
            .eq("recipe_id", recipe_id)
            .order("id", desc=False)
            .execute()
        )
        return [
            IngredientLink(
                id=int(row["id"]),
                recipe_id=int(row["recipe_id"]),
                ingredient=parse_ingredient(row["ingredients"]),
                amount=float(row.get("amount", 0.0)),
            )
            for row in response.data or []
        ]

    def create_link(self, recipe_id: int, ingredient_id: int, amount: float) -> None:
        self.client.table("recipe_ingredients").insert(
            {"recipe_id": recipe_id, "ingredient_id": ingredient_id, "amount": amount}
        ).execute()

    def update_link(self, link_id: int, amount: float) -> None:
        self.client.table("recipe_ingredients").update({"amount": amount}).eq(
            "id", link_id
        ).execute()

    def delete_links(self, link_ids: list[int]) -> None:
        self.client.table("recipe_ingredients").delete().in_("id", link_ids).execute()

    def list_catalogue(
        self, editor_id: int | None, filters: RecipeFilters
    ) -> list[Recipe]:
        """Return public and editor-authored recipes matching the filters."""
        query = self.client.table("recipes").select(RECIPE_COLUMNS)
        if editor_id is None:
            query = query.is_("author_id", "null")
        else:
            query = query.or_(f"author_id.is.null,author_id.eq.{editor_id}")
        if filters.search:
            query = query.ilike("name", f"%{filters.search}%")
        if filters.min_calories is not None:
            query = query.gte("calories", filters.min_calories)
        if filters.max_calories is not None:
            query = query.lte("calories", filters.max_calories)
        if filters.difficulty:
            query = query.eq("difficulty", filters.difficulty)
        if filters.max_cooking_time is not None:
            query = query.lte("cooking_time", filters.max_cooking_time)
        sort_column = _SORT_COLUMNS.get(filters.sort_by, "name")
        response = query.order(sort_column, desc=filters.sort_order == "desc").execute()
        return [parse_recipe(row) for row in response.data or []]


def parse_ingredient(row: dict[str, object]) -> Ingredient:
    return Ingredient(
        id=int(row["id"]),
        name=str(row["name"]),
        amount_type=str(row.get("amount_type", "")),
    )


def parse_recipe(row: dict[str, object]) -> Recipe:
    """Build a recipe from a row with embedded ingredients and author."""
    ingredients = []
    for link in row.get("recipe_ingredients") or []:
        ingredient = link.get("ingredients")
        if not ingredient:
            continue
        ingredients.append(
            RecipeIngredient(
                name=str(ingredient["name"]),
                amount=float(link.get("amount", 0.0)),
                amount_type=str(ingredient.get("amount_type", "")),
            )
        )
    author = row.get("author")
    author_id = row.get("author_id")
    cooking_time = row.get("cooking_time")
    return Recipe(
        id=int(row["id"]),
        name=str(row["name"]),
        calories=float(row.get("calories") or 0.0),
        proteins=float(row.get("proteins") or 0.0),
        fats=float(row.get("fats") or 0.0),
        carbohydrates=float(row.get("carbohydrates") or 0.0),
        instructions=row.get("instructions"),
        cooking_time=int(cooking_time) if cooking_time is not None else None,
        difficulty=row.get("difficulty"),
        author_id=int(author_id) if author_id is not None else None,
        author=(
            AuthorSummary(
                id=int(author["id"]), name=author.get("name"), email=author.get("email")
            )
            if author
            else None
        ),
        ingredients=ingredients,
    )
