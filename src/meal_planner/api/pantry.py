"""Ingredient and pantry stock endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from meal_planner.api.auth import require_user
from meal_planner.api.schemas import IngredientPayload, StockPayload  # noqa: TC001
from meal_planner.api.serializers import ingredient_to_dict, stock_to_dict
from meal_planner.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(prefix="/api", tags=["pantry"])


@router.get("/ingredients")
async def list_ingredients(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, object]]:
    """Return ingredients used in the user's recipes."""
    container: AppContainer = request.app.state.container
    return [
        ingredient_to_dict(ingredient)
        for ingredient in container.ingredient_service.list_ingredients(user.id)
    ]


@router.post("/ingredients", dependencies=[Depends(require_user)])
async def create_ingredient(
    payload: IngredientPayload, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    ingredient = container.ingredient_service.create_ingredient(
        payload.name, payload.amount_type
    )
    return ingredient_to_dict(ingredient)


@router.delete("/ingredients/{ingredient_id}")
async def delete_ingredient(
    ingredient_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, bool]:
    container: AppContainer = request.app.state.container
    container.ingredient_service.delete_ingredient(user.id, ingredient_id)
    return {"deleted": True}


@router.get("/stock")
async def list_stock(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, object]]:
    container: AppContainer = request.app.state.container
    return [stock_to_dict(item) for item in container.stock_service.list_stock(user.id)]


@router.put("/stock/{ingredient_id}")
async def set_stock(
    ingredient_id: int,
    payload: StockPayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Set the pantry amount; zero or less removes the row."""
    container: AppContainer = request.app.state.container
    item = container.stock_service.set_amount(user.id, ingredient_id, payload.amount)
    if item is None:
        return {"deleted": True}
    return stock_to_dict(item)
