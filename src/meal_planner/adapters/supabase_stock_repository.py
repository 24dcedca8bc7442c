"""Supabase repository for pantry stock."""

from dataclasses import dataclass

from supabase import Client

from meal_planner.adapters.supabase_recipe_repository import parse_ingredient
from meal_planner.domain.planning import StockItem
from meal_planner.services.stock import StockRepository

_COLUMNS = "id, user_id, amount, ingredients(id, name, amount_type)"


@dataclass
class SupabaseStockRepository(StockRepository):
    """Supabase implementation for stock rows, one per user and ingredient."""

    client: Client

    def list_stock(self, user_id: int) -> list[StockItem]:
        response = (
            self.client.table("stock_items")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_stock(row) for row in response.data or []]

    def upsert_stock(
        self, user_id: int, ingredient_id: int, amount: float
    ) -> StockItem:
        response = (
            self.client.table("stock_items")
            .upsert(
                {"user_id": user_id, "ingredient_id": ingredient_id, "amount": amount},
                on_conflict="user_id,ingredient_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save stock")
        stock_id = int(response.data[0]["id"])
        reloaded = (
            self.client.table("stock_items")
            .select(_COLUMNS)
            .eq("id", stock_id)
            .limit(1)
            .execute()
        )
        if not reloaded.data:
            raise RuntimeError("Failed to load stock")
        return _parse_stock(reloaded.data[0])

    def delete_stock(self, user_id: int, ingredient_id: int) -> None:
        self.client.table("stock_items").delete().eq("user_id", user_id).eq(
            "ingredient_id", ingredient_id
        ).execute()

    def delete_for_ingredient(self, ingredient_id: int) -> None:
        self.client.table("stock_items").delete().eq(
            "ingredient_id", ingredient_id
        ).execute()


def _parse_stock(row: dict[str, object]) -> StockItem:
    return StockItem(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        ingredient=parse_ingredient(row["ingredients"]),
        amount=float(row.get("amount", 0.0)),
    )
