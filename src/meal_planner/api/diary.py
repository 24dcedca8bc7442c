"""Food diary endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from meal_planner.api.auth import require_user
from meal_planner.api.schemas import FoodDiaryPayload, parse_day  # noqa: TC001
from meal_planner.api.serializers import daily_nutrition_to_dict, diary_entry_to_dict
from meal_planner.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(prefix="/api/food-diary", tags=["diary"])


@router.get("")
async def list_entries(
    request: Request,
    date: str | None = None,
    user: UserRecord = Depends(require_user),
) -> list[dict[str, object]]:
    """Return diary entries, optionally for a single day."""
    container: AppContainer = request.app.state.container
    day = parse_day(date) if date else None
    return [
        diary_entry_to_dict(entry)
        for entry in container.diary_service.list_entries(user.id, day)
    ]


@router.post("")
async def log_meal(
    payload: FoodDiaryPayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    entry = container.diary_service.log_meal(
        user.id,
        payload.recipe_id,
        parse_day(payload.day),
        payload.meal_type,
        payload.serving_size,
    )
    return diary_entry_to_dict(entry)


@router.get("/summary")
async def daily_summary(
    request: Request,
    date: str | None = None,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Eaten totals for a day against the recommendation."""
    container: AppContainer = request.app.state.container
    profile = container.user_service.get_profile(user.id)
    summary = container.diary_service.daily_summary(
        user.id, parse_day(date), profile.metrics
    )
    return daily_nutrition_to_dict(summary)


@router.delete("/{entry_id}")
async def delete_entry(
    entry_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, bool]:
    container: AppContainer = request.app.state.container
    container.diary_service.remove_entry(user.id, entry_id)
    return {"deleted": True}
