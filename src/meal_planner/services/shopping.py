"""Shopping list aggregation over planned meals and pantry stock."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date

from meal_planner.domain.planning import CalendarItem, CartItem, StockItem
from meal_planner.domain.shopping import PlannedMeal, ShoppingList, ShoppingListItem
from meal_planner.services.calendar import CalendarRepository
from meal_planner.services.cart import CartRepository
from meal_planner.services.stock import StockRepository


def build_shopping_list(
    planned_meals: Iterable[PlannedMeal], stock: Mapping[str, float]
) -> list[ShoppingListItem]:
    """Return the ingredient shortfall for the planned meals.

    Amounts accumulate per ingredient name across all meals, each scaled by
    the meal's servings. The amount type of the first occurrence wins. Stock
    is then subtracted; fully covered ingredients are dropped and stock for
    ingredients nobody needs is ignored.
    """
    needed: dict[str, ShoppingListItem] = {}
    for meal in planned_meals:
        for ingredient in meal.ingredients:
            amount = ingredient.amount * meal.servings
            current = needed.get(ingredient.name)
            if current is None:
                needed[ingredient.name] = ShoppingListItem(
                    name=ingredient.name,
                    amount=amount,
                    amount_type=ingredient.amount_type,
                )
            else:
                current.amount += amount

    for name, available in stock.items():
        item = needed.get(name)
        if item is None:
            continue
        remaining = max(0, item.amount - available)
        if remaining > 0:
            item.amount = remaining
        else:
            del needed[name]

    return list(needed.values())


def meals_for_day(items: Iterable[CalendarItem], day: date) -> list[CalendarItem]:
    """Keep calendar entries planned for the given calendar day."""
    return [item for item in items if item.day == day]


def planned_meal_from_calendar(item: CalendarItem) -> PlannedMeal:
    """One serving of the recipe per calendar entry."""
    return PlannedMeal(
        recipe_id=item.recipe.id,
        recipe_name=item.recipe.name,
        ingredients=item.recipe.ingredients,
        meal_type=item.meal_type,
    )


def planned_meal_from_cart(item: CartItem) -> PlannedMeal:
    """The cart quantity is the number of servings."""
    return PlannedMeal(
        recipe_id=item.recipe.id,
        recipe_name=item.recipe.name,
        ingredients=item.recipe.ingredients,
        servings=item.quantity,
    )


def stock_by_name(items: Iterable[StockItem]) -> dict[str, float]:
    return {item.ingredient.name: item.amount for item in items}


@dataclass
class ShoppingListService:
    """Builds shopping lists from the calendar or the cart."""

    calendar_repository: CalendarRepository
    cart_repository: CartRepository
    stock_repository: StockRepository

    def for_day(self, user_id: int, day: date) -> ShoppingList:
        """Shortfall for every meal planned on a calendar day."""
        entries = meals_for_day(
            self.calendar_repository.list_items_for_day(user_id, day), day
        )
        meals = [planned_meal_from_calendar(entry) for entry in entries]
        stock = stock_by_name(self.stock_repository.list_stock(user_id))
        return ShoppingList(
            items=build_shopping_list(meals, stock), meals=meals, day=day
        )

    def for_cart(self, user_id: int) -> ShoppingList:
        """Shortfall for the recipes in the cart, scaled by quantity."""
        meals = [
            planned_meal_from_cart(item)
            for item in self.cart_repository.list_items(user_id)
        ]
        stock = stock_by_name(self.stock_repository.list_stock(user_id))
        return ShoppingList(items=build_shopping_list(meals, stock), meals=meals)
