"""Domain models for recipes and ingredients."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Ingredient:
    """An ingredient shared by every recipe referencing its name."""

    id: int
    name: str
    amount_type: str


@dataclass(frozen=True)
class RecipeIngredient:
    """Ingredient line of a recipe, per one serving."""

    name: str
    amount: float
    amount_type: str


@dataclass(frozen=True)
class IngredientLink:
    """Stored link between a recipe and an ingredient."""

    id: int
    recipe_id: int
    ingredient: Ingredient
    amount: float


@dataclass(frozen=True)
class AuthorSummary:
    id: int
    name: str | None
    email: str | None


@dataclass(frozen=True)
class Recipe:
    """Recipe with nutrition per serving and its ingredient lines."""

    id: int
    name: str
    calories: float
    proteins: float
    fats: float
    carbohydrates: float
    instructions: str | None = None
    cooking_time: int | None = None
    difficulty: str | None = None
    author_id: int | None = None
    author: AuthorSummary | None = None
    ingredients: list[RecipeIngredient] = field(default_factory=list)

@dataclass(frozen=True)
class RecipeDraft:
    """Fields submitted when creating or replacing a recipe."""

    name: str
    calories: float
    proteins: float
    fats: float
    carbohydrates: float
    instructions: str | None = None
    cooking_time: int | None = None
    difficulty: str | None = None
    ingredients: list[RecipeIngredient] = field(default_factory=list)

    def fields(self) -> dict[str, object]:
        """Column values for the recipe row; empty optionals become null."""
        return {
            "name": self.name,
            "calories": self.calories,
            "proteins": self.proteins,
            "fats": self.fats,
            "carbohydrates": self.carbohydrates,
            "instructions": self.instructions or None,
            "cooking_time": self.cooking_time or None,
            "difficulty": self.difficulty or None,
        }


@dataclass(frozen=True)
class RecipeFilters:
    """Filters for the public recipe catalogue."""

    search: str | None = None
    category: str | None = None
    min_calories: float | None = None
    max_calories: float | None = None
    difficulty: str | None = None
    max_cooking_time: int | None = None
    sort_by: str = "name"
    sort_order: str = "asc"
