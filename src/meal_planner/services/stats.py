"""Statistics over recipes, the calendar and pantry stock."""

from collections import Counter
from dataclasses import dataclass

from meal_planner.domain.models import UserProfile
from meal_planner.domain.planning import CalendarItem
from meal_planner.domain.recipes import Recipe
from meal_planner.domain.stats import (
    CategoryStats,
    MealTypeStats,
    PersonalStats,
    PopularRecipe,
    StatsOverview,
    WeekdayStats,
    WeightStatus,
)
from meal_planner.services.calendar import CalendarRepository
from meal_planner.services.ingredients import IngredientRepository
from meal_planner.services.nutrition import body_mass_index, recommend_daily_calories
from meal_planner.services.recipes import RecipeRepository
from meal_planner.services.stock import StockService
from meal_planner.services.users import UserRepository

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
LOW_CALORIE_MAX = 300
MEDIUM_CALORIE_MAX = 600
LOW_STOCK_AMOUNT = 10
POPULAR_LIMIT = 5

OVER_TARGET_PROGRESS = 120
UNDER_TARGET_PROGRESS = 80
LOW_STOCK_ALERT = 5
FAVOURITE_OVERUSE = 10
MIN_RECIPES = 10

WEIGHT_PROGRESS_FLOOR = 50
WEIGHT_PROGRESS_CEILING = 100


@dataclass
class StatsService:
    """Service computing the statistics dashboard for a user."""

    recipe_repository: RecipeRepository
    calendar_repository: CalendarRepository
    ingredient_repository: IngredientRepository
    user_repository: UserRepository
    stock_service: StockService

    def overview(self, user_id: int) -> StatsOverview:
        """Return statistics for the user's recipes, plan and pantry."""
        recipes = self.recipe_repository.list_for_user(user_id)
        calendar = self.calendar_repository.list_items(user_id)
        ingredients = self.ingredient_repository.list_used_by(user_id)
        stock = self.stock_service.list_stock(user_id)
        profile = self.user_repository.get_profile(user_id)

        calendar_calories = sum(item.recipe.calories for item in calendar)
        avg_recipe_calories = (
            sum(recipe.calories for recipe in recipes) / len(recipes)
            if recipes
            else 0.0
        )
        low_stock = sum(1 for item in stock if item.amount < LOW_STOCK_AMOUNT)
        popular = _popular_recipes(recipes, calendar)
        personal = _personal_stats(profile, calendar_calories)
        return StatsOverview(
            recipes=len(recipes),
            calendar_items=len(calendar),
            ingredients=len(ingredients),
            stock_items=len(stock),
            calendar_calories=calendar_calories,
            avg_recipe_calories=avg_recipe_calories,
            low_stock=low_stock,
            weekly=_weekly_stats(calendar),
            categories=_category_stats(recipes),
            meal_types=_meal_type_stats(calendar),
            popular=popular,
            personal=personal,
            recommendations=_recommendations(
                personal, low_stock, popular, len(recipes)
            ),
        )


def calorie_category(calories: float) -> str:
    if calories < LOW_CALORIE_MAX:
        return "low_calorie"
    if calories < MEDIUM_CALORIE_MAX:
        return "medium_calorie"
    return "high_calorie"


def _weekly_stats(calendar: list[CalendarItem]) -> list[WeekdayStats]:
    counts = [0] * len(WEEKDAYS)
    calories = [0.0] * len(WEEKDAYS)
    for item in calendar:
        index = item.day.weekday()
        counts[index] += 1
        calories[index] += item.recipe.calories
    return [
        WeekdayStats(weekday=name, count=counts[index], calories=calories[index])
        for index, name in enumerate(WEEKDAYS)
    ]


def _category_stats(recipes: list[Recipe]) -> dict[str, CategoryStats]:
    grouped: dict[str, list[float]] = {}
    for recipe in recipes:
        grouped.setdefault(calorie_category(recipe.calories), []).append(
            recipe.calories
        )
    return {
        category: CategoryStats(
            count=len(values),
            total_calories=sum(values),
            avg_calories=sum(values) / len(values),
        )
        for category, values in grouped.items()
    }


def _meal_type_stats(calendar: list[CalendarItem]) -> dict[str, MealTypeStats]:
    stats: dict[str, MealTypeStats] = {}
    for item in calendar:
        current = stats.get(item.meal_type, MealTypeStats(count=0, total_calories=0))
        stats[item.meal_type] = MealTypeStats(
            count=current.count + 1,
            total_calories=current.total_calories + item.recipe.calories,
        )
    return stats


def _popular_recipes(
    recipes: list[Recipe], calendar: list[CalendarItem]
) -> list[PopularRecipe]:
    usage = Counter(item.recipe_id for item in calendar)
    ranked = sorted(recipes, key=lambda recipe: usage[recipe.id], reverse=True)
    return [
        PopularRecipe(
            recipe_id=recipe.id,
            name=recipe.name,
            calories=recipe.calories,
            in_calendar_count=usage[recipe.id],
        )
        for recipe in ranked[:POPULAR_LIMIT]
    ]


def _personal_stats(
    profile: UserProfile | None, calendar_calories: float
) -> PersonalStats:
    if profile is None:
        return PersonalStats(
            recommended_calories=None,
            current_calories=calendar_calories,
            progress=0.0,
            bmi=None,
        )
    recommended = recommend_daily_calories(profile.metrics)
    return PersonalStats(
        recommended_calories=recommended,
        current_calories=calendar_calories,
        progress=calendar_calories / recommended * 100 if recommended else 0.0,
        bmi=body_mass_index(profile.weight, profile.height),
        weight_status=_weight_status(profile.weight, profile.target_weight),
    )


def _weight_status(
    weight: float | None, target: float | None
) -> WeightStatus | None:
    """Progress towards the target weight on a fixed 50-100 kg scale."""
    if not weight or not target:
        return None
    if target > weight:
        numerator = weight - WEIGHT_PROGRESS_FLOOR
        denominator = target - WEIGHT_PROGRESS_FLOOR
    else:
        numerator = WEIGHT_PROGRESS_CEILING - weight
        denominator = WEIGHT_PROGRESS_CEILING - target
    return WeightStatus(
        current=weight,
        target=target,
        difference=weight - target,
        progress=numerator / denominator * 100 if denominator else 0.0,
    )


def _recommendations(
    personal: PersonalStats,
    low_stock: int,
    popular: list[PopularRecipe],
    recipe_count: int,
) -> list[str]:
    messages = []
    if personal.progress > OVER_TARGET_PROGRESS:
        messages.append(
            "You are planning more calories than recommended. "
            "Consider lighter recipes."
        )
    elif personal.progress < UNDER_TARGET_PROGRESS:
        messages.append(
            "You are planning fewer calories than recommended. "
            "Add more nourishing meals."
        )
    if low_stock > LOW_STOCK_ALERT:
        messages.append("Many ingredients are running low. Update your shopping list.")
    if popular and popular[0].in_calendar_count > FAVOURITE_OVERUSE:
        messages.append(
            "Try to vary your diet: a favourite recipe is planned very often."
        )
    if recipe_count < MIN_RECIPES:
        messages.append("Add more recipes for a more varied diet.")
    return messages
