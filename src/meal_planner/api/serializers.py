"""Conversion of domain objects into camelCase JSON payloads."""

from meal_planner.domain.diary import FoodDiaryEntry
from meal_planner.domain.models import UserProfile, UserRecord
from meal_planner.domain.nutrition import DailyNutrition
from meal_planner.domain.planning import CalendarItem, CartItem, StockItem
from meal_planner.domain.recipes import Ingredient, Recipe
from meal_planner.domain.shopping import ShoppingList
from meal_planner.domain.stats import StatsOverview, WeightStatus


def user_to_dict(user: UserRecord) -> dict[str, object]:
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "picture": user.picture,
    }


def profile_to_dict(
    profile: UserProfile, recommended_calories: int | None
) -> dict[str, object]:
    return {
        "id": profile.id,
        "email": profile.email,
        "name": profile.name,
        "picture": profile.picture,
        "height": profile.height,
        "weight": profile.weight,
        "targetWeight": profile.target_weight,
        "dailyCalories": profile.daily_calories,
        "age": profile.age,
        "gender": profile.gender,
        "activityLevel": profile.activity_level,
        "goal": profile.goal,
        "recommendedCalories": recommended_calories,
    }


def ingredient_to_dict(ingredient: Ingredient) -> dict[str, object]:
    return {
        "id": ingredient.id,
        "name": ingredient.name,
        "amountType": ingredient.amount_type,
    }


def recipe_to_dict(recipe: Recipe) -> dict[str, object]:
    """Recipe with its ingredient lines and author summary."""
    return {
        "id": recipe.id,
        "name": recipe.name,
        "calories": recipe.calories,
        "proteins": recipe.proteins,
        "fats": recipe.fats,
        "carbohydrates": recipe.carbohydrates,
        "instructions": recipe.instructions,
        "cookingTime": recipe.cooking_time,
        "difficulty": recipe.difficulty,
        "authorId": recipe.author_id,
        "author": (
            {
                "id": recipe.author.id,
                "name": recipe.author.name,
                "email": recipe.author.email,
            }
            if recipe.author
            else None
        ),
        "ingredients": [
            {"name": line.name, "amount": line.amount, "amountType": line.amount_type}
            for line in recipe.ingredients
        ],
    }


def stock_to_dict(item: StockItem) -> dict[str, object]:
    return {
        "id": item.id,
        "ingredientId": item.ingredient.id,
        "amount": item.amount,
        "ingredient": ingredient_to_dict(item.ingredient),
    }


def cart_item_to_dict(item: CartItem) -> dict[str, object]:
    return {
        "id": item.id,
        "recipeId": item.recipe_id,
        "quantity": item.quantity,
        "recipe": recipe_to_dict(item.recipe),
    }


def calendar_item_to_dict(item: CalendarItem) -> dict[str, object]:
    return {
        "id": item.id,
        "date": item.day.isoformat(),
        "recipeId": item.recipe_id,
        "mealType": item.meal_type,
        "recipe": {
            "id": item.recipe.id,
            "name": item.recipe.name,
            "calories": item.recipe.calories,
            "proteins": item.recipe.proteins,
            "fats": item.recipe.fats,
            "carbohydrates": item.recipe.carbohydrates,
        },
    }


def shopping_list_to_dict(shopping: ShoppingList) -> dict[str, object]:
    payload: dict[str, object] = {
        "items": [
            {"name": item.name, "amount": item.amount, "amountType": item.amount_type}
            for item in shopping.items
        ],
        "recipes": [
            {
                "id": meal.recipe_id,
                "name": meal.recipe_name,
                "mealType": meal.meal_type,
                "servings": meal.servings,
            }
            for meal in shopping.meals
        ],
    }
    if shopping.day is not None:
        payload["date"] = shopping.day.isoformat()
    return payload


def diary_entry_to_dict(entry: FoodDiaryEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "date": entry.day.isoformat(),
        "recipeId": entry.recipe_id,
        "mealType": entry.meal_type,
        "servingSize": entry.serving_size,
        "calories": entry.calories,
        "proteins": entry.proteins,
        "fats": entry.fats,
        "carbohydrates": entry.carbohydrates,
        "recipe": {"id": entry.recipe.id, "name": entry.recipe.name},
    }


def daily_nutrition_to_dict(summary: DailyNutrition) -> dict[str, object]:
    return {
        "date": summary.day.isoformat(),
        "calories": summary.totals.calories,
        "proteins": summary.totals.proteins,
        "fats": summary.totals.fats,
        "carbohydrates": summary.totals.carbohydrates,
        "entries": summary.entries,
        "recommendedCalories": summary.recommended_calories,
        "percentage": summary.percentage,
        "balance": str(summary.balance),
    }


def stats_to_dict(stats: StatsOverview) -> dict[str, object]:
    """Statistics dashboard payload."""
    return {
        "totals": {
            "recipes": stats.recipes,
            "calendarItems": stats.calendar_items,
            "ingredients": stats.ingredients,
            "stockItems": stats.stock_items,
            "calendarCalories": stats.calendar_calories,
            "avgRecipeCalories": stats.avg_recipe_calories,
            "lowStock": stats.low_stock,
        },
        "weekly": [
            {"weekday": day.weekday, "count": day.count, "calories": day.calories}
            for day in stats.weekly
        ],
        "categories": {
            name: {
                "count": category.count,
                "totalCalories": category.total_calories,
                "avgCalories": category.avg_calories,
            }
            for name, category in stats.categories.items()
        },
        "mealTypes": {
            name: {"count": meal.count, "totalCalories": meal.total_calories}
            for name, meal in stats.meal_types.items()
        },
        "popularRecipes": [
            {
                "id": recipe.recipe_id,
                "name": recipe.name,
                "calories": recipe.calories,
                "inCalendarCount": recipe.in_calendar_count,
            }
            for recipe in stats.popular
        ],
        "personal": {
            "recommendedCalories": stats.personal.recommended_calories,
            "currentCalories": stats.personal.current_calories,
            "progress": stats.personal.progress,
            "bmi": stats.personal.bmi,
            "weightStatus": _weight_status_to_dict(stats.personal.weight_status),
        },
        "recommendations": stats.recommendations,
    }


def _weight_status_to_dict(status: WeightStatus | None) -> dict[str, object] | None:
    if status is None:
        return None
    return {
        "current": status.current,
        "target": status.target,
        "difference": status.difference,
        "progress": status.progress,
    }
