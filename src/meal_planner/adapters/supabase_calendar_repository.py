"""Supabase repository for calendar entries."""

from dataclasses import dataclass
from datetime import date, timedelta

from supabase import Client

from meal_planner.adapters.supabase_recipe_repository import (
    RECIPE_COLUMNS,
    parse_recipe,
)
from meal_planner.domain.planning import CalendarItem
from meal_planner.services.calendar import CalendarRepository

_COLUMNS = f"id, user_id, recipe_id, date, meal_type, recipes({RECIPE_COLUMNS})"


@dataclass
class SupabaseCalendarRepository(CalendarRepository):
    """Supabase implementation for calendar entries."""

    client: Client

    def list_items(self, user_id: int) -> list[CalendarItem]:
        response = (
            self.client.table("calendar_items")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("date", desc=False)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def list_items_for_day(self, user_id: int, day: date) -> list[CalendarItem]:
        response = (
            self.client.table("calendar_items")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .gte("date", day.isoformat())
            .lt("date", (day + timedelta(days=1)).isoformat())
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def get_item(self, user_id: int, item_id: int) -> CalendarItem | None:
        response = (
            self.client.table("calendar_items")
            .select(_COLUMNS)
            .eq("id", item_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def find_item(
        self,
        user_id: int,
        day: date,
        recipe_id: int,
        meal_type: str,
    ) -> CalendarItem | None:
        response = (
            self.client.table("calendar_items")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .eq("date", day.isoformat())
            .eq("recipe_id", recipe_id)
            .eq("meal_type", meal_type)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def create_item(
        self, user_id: int, recipe_id: int, day: date, meal_type: str
    ) -> CalendarItem:
        response = (
            self.client.table("calendar_items")
            .insert(
                {
                    "user_id": user_id,
                    "recipe_id": recipe_id,
                    "date": day.isoformat(),
                    "meal_type": meal_type,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create calendar item")
        return self._reload(int(response.data[0]["id"]))

    def update_item(self, item_id: int, day: date, meal_type: str) -> CalendarItem:
        response = (
            self.client.table("calendar_items")
            .update({"date": day.isoformat(), "meal_type": meal_type})
            .eq("id", item_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update calendar item")
        return self._reload(item_id)

    def delete_item(self, user_id: int, item_id: int) -> None:
        self.client.table("calendar_items").delete().eq("id", item_id).eq(
            "user_id", user_id
        ).execute()

    def delete_for_recipe(self, recipe_id: int) -> None:
        self.client.table("calendar_items").delete().eq(
            "recipe_id", recipe_id
        ).execute()

    def _reload(self, item_id: int) -> CalendarItem:
        response = (
            self.client.table("calendar_items")
            .select(_COLUMNS)
            .eq("id", item_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to load calendar item")
        return _parse_item(response.data[0])


def parse_day(value: object) -> date:
    """Calendar day of a date or timestamp column."""
    return date.fromisoformat(str(value)[:10])


def _parse_item(row: dict[str, object]) -> CalendarItem:
    return CalendarItem(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        recipe_id=int(row["recipe_id"]),
        day=parse_day(row["date"]),
        meal_type=str(row["meal_type"]),
        recipe=parse_recipe(row["recipes"]),
    )
