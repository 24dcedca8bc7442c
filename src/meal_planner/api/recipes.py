"""Recipe endpoints and the public recipe catalogue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request

from meal_planner.api.auth import require_user
from meal_planner.api.schemas import RecipePayload  # noqa: TC001
from meal_planner.api.serializers import recipe_to_dict
from meal_planner.domain.models import UserRecord  # noqa: TC001
from meal_planner.domain.recipes import RecipeFilters

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(prefix="/api/recipes", tags=["recipes"])
public_router = APIRouter(prefix="/api/public/recipes", tags=["public"])


@router.get("")
async def list_recipes(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, object]]:
    """Return the user's recipes together with public ones."""
    container: AppContainer = request.app.state.container
    return [
        recipe_to_dict(recipe)
        for recipe in container.recipe_service.list_recipes(user.id)
    ]


@router.get("/{recipe_id}")
async def get_recipe(
    recipe_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return recipe_to_dict(container.recipe_service.get_recipe(user.id, recipe_id))


@router.post("")
async def create_recipe(
    payload: RecipePayload, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.create_recipe(user.id, payload.to_draft())
    return recipe_to_dict(recipe)


@router.put("/{recipe_id}")
async def update_recipe(
    recipe_id: int,
    payload: RecipePayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.update_recipe(
        user.id, recipe_id, payload.to_draft()
    )
    return recipe_to_dict(recipe)


@router.delete("/{recipe_id}")
async def delete_recipe(
    recipe_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, bool]:
    container: AppContainer = request.app.state.container
    container.recipe_service.delete_recipe(user.id, recipe_id)
    return {"deleted": True}


@public_router.get("")
async def list_public_recipes(  # noqa: PLR0913
    request: Request,
    search: str | None = None,
    category: str | None = None,
    min_calories: float | None = Query(default=None, alias="minCalories"),
    max_calories: float | None = Query(default=None, alias="maxCalories"),
    difficulty: str | None = None,
    max_cooking_time: int | None = Query(default=None, alias="maxCookingTime"),
    sort_by: str = Query(default="name", alias="sortBy"),
    sort_order: str = Query(default="asc", alias="sortOrder"),
) -> list[dict[str, object]]:
    """Browse the public catalogue without signing in."""
    container: AppContainer = request.app.state.container
    filters = RecipeFilters(
        search=search,
        category=category,
        min_calories=min_calories,
        max_calories=max_calories,
        difficulty=difficulty,
        max_cooking_time=max_cooking_time,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return [
        recipe_to_dict(recipe)
        for recipe in container.recipe_service.list_catalogue(filters)
    ]


@public_router.put("/{recipe_id}")
async def update_public_recipe(
    recipe_id: int,
    payload: RecipePayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Edit a catalogue recipe; restricted to the catalogue editor."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.update_public_recipe(
        user, recipe_id, payload.to_draft()
    )
    return recipe_to_dict(recipe)


@public_router.delete("/{recipe_id}")
async def delete_public_recipe(
    recipe_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, bool]:
    container: AppContainer = request.app.state.container
    container.recipe_service.delete_public_recipe(user, recipe_id)
    return {"deleted": True}
