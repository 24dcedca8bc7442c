"""Supabase repository for food diary entries."""

from dataclasses import dataclass
from datetime import date, timedelta

from supabase import Client

from meal_planner.adapters.supabase_calendar_repository import parse_day
from meal_planner.adapters.supabase_recipe_repository import (
    RECIPE_COLUMNS,
    parse_recipe,
)
from meal_planner.domain.diary import FoodDiaryEntry
from meal_planner.services.diary import FoodDiaryRepository

_COLUMNS = (
    "id, user_id, recipe_id, date, meal_type, serving_size, calories, proteins, "
    f"fats, carbohydrates, recipes({RECIPE_COLUMNS})"
)


@dataclass
class SupabaseFoodDiaryRepository(FoodDiaryRepository):
    """Supabase implementation for the food diary."""

    client: Client

    def list_entries(self, user_id: int, day: date | None) -> list[FoodDiaryEntry]:
        query = (
            self.client.table("food_diary_entries")
            .select(_COLUMNS)
            .eq("user_id", user_id)
        )
        if day is not None:
            query = query.gte("date", day.isoformat()).lt(
                "date", (day + timedelta(days=1)).isoformat()
            )
        response = query.order("date", desc=False).execute()
        return [_parse_entry(row) for row in response.data or []]

    def get_entry(self, user_id: int, entry_id: int) -> FoodDiaryEntry | None:
        response = (
            self.client.table("food_diary_entries")
            .select(_COLUMNS)
            .eq("id", entry_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def create_entry(self, user_id: int, payload: dict[str, object]) -> FoodDiaryEntry:
        response = (
            self.client.table("food_diary_entries")
            .insert({**payload, "user_id": user_id})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create diary entry")
        entry = self.get_entry(user_id, int(response.data[0]["id"]))
        if entry is None:
            raise RuntimeError("Failed to load diary entry")
        return entry

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        self.client.table("food_diary_entries").delete().eq("id", entry_id).eq(
            "user_id", user_id
        ).execute()


def _parse_entry(row: dict[str, object]) -> FoodDiaryEntry:
    return FoodDiaryEntry(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        recipe_id=int(row["recipe_id"]),
        day=parse_day(row["date"]),
        meal_type=str(row["meal_type"]),
        serving_size=float(row.get("serving_size", 1.0)),
        calories=float(row.get("calories", 0.0)),
        proteins=float(row.get("proteins", 0.0)),
        fats=float(row.get("fats", 0.0)),
        carbohydrates=float(row.get("carbohydrates", 0.0)),
        recipe=parse_recipe(row["recipes"]),
    )
