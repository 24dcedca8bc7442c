"""Supabase repository for the recipe cart."""

from dataclasses import dataclass

from supabase import Client

from meal_planner.adapters.supabase_recipe_repository import (
    RECIPE_COLUMNS,
    parse_recipe,
)
from meal_planner.domain.planning import CartItem
from meal_planner.services.cart import CartRepository

_COLUMNS = f"id, user_id, recipe_id, quantity, recipes({RECIPE_COLUMNS})"


@dataclass
class SupabaseCartRepository(CartRepository):
    """Supabase implementation for cart items."""

    client: Client

    def list_items(self, user_id: int) -> list[CartItem]:
        response = (
            self.client.table("cart_items")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def get_item(self, user_id: int, item_id: int) -> CartItem | None:
        response = (
            self.client.table("cart_items")
            .select(_COLUMNS)
            .eq("id", item_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def find_by_recipe(self, user_id: int, recipe_id: int) -> CartItem | None:
        response = (
            self.client.table("cart_items")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .eq("recipe_id", recipe_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def create_item(self, user_id: int, recipe_id: int, quantity: int) -> CartItem:
        response = (
            self.client.table("cart_items")
            .insert({"user_id": user_id, "recipe_id": recipe_id, "quantity": quantity})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to add recipe to cart")
        return self._reload(int(response.data[0]["id"]))

    def set_quantity(self, item_id: int, quantity: int) -> CartItem:
        response = (
            self.client.table("cart_items")
            .update({"quantity": quantity})
            .eq("id", item_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update cart item")
        return self._reload(item_id)

    def delete_item(self, user_id: int, item_id: int) -> None:
        self.client.table("cart_items").delete().eq("id", item_id).eq(
            "user_id", user_id
        ).execute()

    def clear(self, user_id: int) -> None:
        self.client.table("cart_items").delete().eq("user_id", user_id).execute()

    def _reload(self, item_id: int) -> CartItem:
        response = (
            self.client.table("cart_items")
            .select(_COLUMNS)
            .eq("id", item_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to load cart item")
        return _parse_item(response.data[0])


def _parse_item(row: dict[str, object]) -> CartItem:
    return CartItem(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        recipe_id=int(row["recipe_id"]),
        quantity=int(row.get("quantity", 1)),
        recipe=parse_recipe(row["recipes"]),
    )
