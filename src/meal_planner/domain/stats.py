"""Domain models for planning statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeekdayStats:
    """Calendar entries falling on one weekday."""

    weekday: str
    count: int
    calories: float


@dataclass(frozen=True)
class CategoryStats:
    """Recipes within one calorie category."""

    count: int
    total_calories: float
    avg_calories: float


@dataclass(frozen=True)
class MealTypeStats:
    count: int
    total_calories: float


@dataclass(frozen=True)
class PopularRecipe:
    recipe_id: int
    name: str
    calories: float
    in_calendar_count: int


@dataclass(frozen=True)
class WeightStatus:
    """Current weight against the target weight."""

    current: float
    target: float
    difference: float
    progress: float


@dataclass(frozen=True)
class PersonalStats:
    """Planned calories against the user's recommendation."""

    recommended_calories: int | None
    current_calories: float
    progress: float
    bmi: float | None
    weight_status: WeightStatus | None = None


@dataclass(frozen=True)
class StatsOverview:
    """Aggregated statistics across recipes, calendar and stock."""

    recipes: int
    calendar_items: int
    ingredients: int
    stock_items: int
    calendar_calories: float
    avg_recipe_calories: float
    low_stock: int
    weekly: list[WeekdayStats]
    categories: dict[str, CategoryStats]
    meal_types: dict[str, MealTypeStats]
    popular: list[PopularRecipe]
    personal: PersonalStats
    recommendations: list[str]
