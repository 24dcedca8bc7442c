"""Recipe cart service."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from meal_planner.domain.planning import CartItem
from meal_planner.services.errors import NotFoundError

if TYPE_CHECKING:
    from meal_planner.services.calendar import CalendarRepository
    from meal_planner.services.recipes import RecipeService


class CartRepository(Protocol):
    """Persistence interface for cart items."""

    def list_items(self, user_id: int) -> list[CartItem]:
        """Return the user's cart with recipes and ingredients."""

    def get_item(self, user_id: int, item_id: int) -> CartItem | None:
        """Return one of the user's cart items, if present."""

    def find_by_recipe(self, user_id: int, recipe_id: int) -> CartItem | None:
        """Return the cart item for a recipe, if present."""

    def create_item(self, user_id: int, recipe_id: int, quantity: int) -> CartItem:
        """Add a recipe to the cart."""

    def set_quantity(self, item_id: int, quantity: int) -> CartItem:
        """Change the quantity of a cart item."""

    def delete_item(self, user_id: int, item_id: int) -> None:
        """Remove a cart item."""

    def clear(self, user_id: int) -> None:
        """Remove every cart item of the user."""


@dataclass
class CartService:
    """Application service for the recipe cart."""

    repository: CartRepository
    recipe_service: "RecipeService"
    calendar_repository: "CalendarRepository"

    def list_items(self, user_id: int) -> list[CartItem]:
        return self.repository.list_items(user_id)

    def add_recipe(self, user_id: int, recipe_id: int) -> CartItem:
        """Add one serving of a recipe, incrementing an existing item."""
        self.recipe_service.get_recipe(user_id, recipe_id)
        existing = self.repository.find_by_recipe(user_id, recipe_id)
        if existing:
            return self.repository.set_quantity(existing.id, existing.quantity + 1)
        return self.repository.create_item(user_id, recipe_id, 1)

    def update_quantity(
        self, user_id: int, item_id: int, quantity: int
    ) -> CartItem | None:
        """Set the quantity; zero or less removes the item and returns None."""
        if self.repository.get_item(user_id, item_id) is None:
            raise NotFoundError("Cart item not found")
        if quantity <= 0:
            self.repository.delete_item(user_id, item_id)
            return None
        return self.repository.set_quantity(item_id, quantity)

    def remove_item(self, user_id: int, item_id: int) -> None:
        if self.repository.get_item(user_id, item_id) is None:
            raise NotFoundError("Cart item not found")
        self.repository.delete_item(user_id, item_id)

    def clear(self, user_id: int) -> None:
        self.repository.clear(user_id)

    def add_calendar(self, user_id: int) -> list[CartItem]:
        """Add one serving to the cart for every calendar entry."""
        results = []
        for entry in self.calendar_repository.list_items(user_id):
            existing = self.repository.find_by_recipe(user_id, entry.recipe_id)
            if existing:
                results.append(
                    self.repository.set_quantity(existing.id, existing.quantity + 1)
                )
            else:
                results.append(
                    self.repository.create_item(user_id, entry.recipe_id, 1)
                )
        return results
