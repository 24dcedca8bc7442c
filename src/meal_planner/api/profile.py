"""Profile and statistics endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from meal_planner.api.auth import require_user
from meal_planner.api.schemas import ProfilePayload  # noqa: TC001
from meal_planner.api.serializers import profile_to_dict, stats_to_dict
from meal_planner.domain.models import UserRecord  # noqa: TC001
from meal_planner.services.nutrition import recommend_daily_calories

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(prefix="/api", tags=["profile"])


@router.get("/profile")
async def get_profile(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the profile with the recommended daily calories."""
    container: AppContainer = request.app.state.container
    profile = container.user_service.get_profile(user.id)
    return profile_to_dict(profile, recommend_daily_calories(profile.metrics))


@router.put("/profile")
async def update_profile(
    payload: ProfilePayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    profile = container.user_service.update_profile(user.id, payload.changes())
    return profile_to_dict(profile, recommend_daily_calories(profile.metrics))


@router.get("/stats")
async def stats(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return stats_to_dict(container.stats_service.overview(user.id))
