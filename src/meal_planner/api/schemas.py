"""Pydantic request bodies and query helpers for the JSON API."""

from datetime import UTC, date, datetime

from fastapi import HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from meal_planner.domain.planning import MealType
from meal_planner.domain.recipes import RecipeDraft, RecipeIngredient


class CamelModel(BaseModel):
    """Request body accepting camelCase keys or field names."""

    model_config = ConfigDict(populate_by_name=True)


class IngredientLinePayload(CamelModel):
    name: str = Field(min_length=1)
    amount: float
    amount_type: str = Field(alias="amountType")


class RecipePayload(CamelModel):
    """Recipe fields submitted by the editor."""

    name: str = Field(min_length=1)
    calories: float
    proteins: float
    fats: float
    carbohydrates: float
    instructions: str | None = None
    cooking_time: int | None = Field(default=None, alias="cookingTime")
    difficulty: str | None = None
    ingredients: list[IngredientLinePayload] = Field(default_factory=list)

    def to_draft(self) -> RecipeDraft:
        return RecipeDraft(
            name=self.name,
            calories=self.calories,
            proteins=self.proteins,
            fats=self.fats,
            carbohydrates=self.carbohydrates,
            instructions=self.instructions,
            cooking_time=self.cooking_time,
            difficulty=self.difficulty,
            ingredients=[
                RecipeIngredient(
                    name=line.name, amount=line.amount, amount_type=line.amount_type
                )
                for line in self.ingredients
            ],
        )


class IngredientPayload(CamelModel):
    name: str = Field(min_length=1)
    amount_type: str = Field(alias="amountType")


class StockPayload(CamelModel):
    amount: float


class CartAddPayload(CamelModel):
    recipe_id: int = Field(alias="recipeId")


class CartQuantityPayload(CamelModel):
    quantity: int


class CalendarPayload(CamelModel):
    day: str = Field(alias="date")
    recipe_id: int = Field(alias="recipeId")
    meal_type: MealType = Field(alias="mealType")


class CalendarMovePayload(CamelModel):
    day: str = Field(alias="date")
    meal_type: MealType | None = Field(default=None, alias="mealType")


class FoodDiaryPayload(CamelModel):
    day: str = Field(alias="date")
    recipe_id: int = Field(alias="recipeId")
    meal_type: MealType = Field(alias="mealType")
    serving_size: float = Field(default=1.0, alias="servingSize", gt=0)


class ProfilePayload(CamelModel):
    """Profile fields; omitted fields are left unchanged."""

    name: str | None = None
    height: float | None = None
    weight: float | None = None
    target_weight: float | None = Field(default=None, alias="targetWeight")
    daily_calories: float | None = Field(default=None, alias="dailyCalories")
    age: int | None = None
    gender: str | None = None
    activity_level: str | None = Field(default=None, alias="activityLevel")
    goal: str | None = None

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)


def parse_day(value: str | None) -> date:
    """Parse a calendar day from a date or ISO datetime string.

    Missing values default to today (UTC). Datetimes with an offset are
    converted to UTC before the time of day is dropped.
    """
    if not value:
        return datetime.now(tz=UTC).date()
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid date: {value}",
        ) from exc
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC)
    return parsed.date()
