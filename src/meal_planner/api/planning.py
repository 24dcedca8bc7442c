"""Calendar, cart and shopping list endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from meal_planner.api.auth import require_user
from meal_planner.api.schemas import (  # noqa: TC001
    CalendarMovePayload,
    CalendarPayload,
    CartAddPayload,
    CartQuantityPayload,
    parse_day,
)
from meal_planner.api.serializers import (
    calendar_item_to_dict,
    cart_item_to_dict,
    daily_nutrition_to_dict,
    shopping_list_to_dict,
)
from meal_planner.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(prefix="/api", tags=["planning"])


@router.get("/calendar")
async def list_calendar(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, object]]:
    """Return the user's planned meals ordered by date."""
    container: AppContainer = request.app.state.container
    return [
        calendar_item_to_dict(item)
        for item in container.calendar_service.list_items(user.id)
    ]


@router.post("/calendar")
async def add_calendar_item(
    payload: CalendarPayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    item = container.calendar_service.add_item(
        user.id, payload.recipe_id, parse_day(payload.day), payload.meal_type
    )
    return calendar_item_to_dict(item)


@router.get("/calendar/nutrition")
async def calendar_nutrition(
    request: Request,
    date: str | None = None,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Planned calories for a day against the recommendation."""
    container: AppContainer = request.app.state.container
    profile = container.user_service.get_profile(user.id)
    summary = container.calendar_service.planned_nutrition(
        user.id, parse_day(date), profile.metrics
    )
    return daily_nutrition_to_dict(summary)


@router.post("/calendar/add-to-cart")
async def add_calendar_to_cart(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, object]]:
    """Add one serving per calendar entry to the cart."""
    container: AppContainer = request.app.state.container
    return [
        cart_item_to_dict(item) for item in container.cart_service.add_calendar(user.id)
    ]


@router.put("/calendar/{item_id}")
async def move_calendar_item(
    item_id: int,
    payload: CalendarMovePayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    item = container.calendar_service.move_item(
        user.id, item_id, parse_day(payload.day), payload.meal_type
    )
    return calendar_item_to_dict(item)


@router.delete("/calendar/{item_id}")
async def delete_calendar_item(
    item_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, bool]:
    container: AppContainer = request.app.state.container
    container.calendar_service.remove_item(user.id, item_id)
    return {"deleted": True}


@router.get("/shopping-list")
async def shopping_list(
    request: Request,
    date: str | None = None,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Ingredients still to buy for the meals planned on a day."""
    container: AppContainer = request.app.state.container
    shopping = container.shopping_service.for_day(user.id, parse_day(date))
    return shopping_list_to_dict(shopping)


@router.get("/cart")
async def list_cart(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, object]]:
    container: AppContainer = request.app.state.container
    items = container.cart_service.list_items(user.id)
    return [cart_item_to_dict(item) for item in items]


@router.post("/cart")
async def add_to_cart(
    payload: CartAddPayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    item = container.cart_service.add_recipe(user.id, payload.recipe_id)
    return cart_item_to_dict(item)


@router.get("/cart/shopping-list")
async def cart_shopping_list(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Ingredients still to buy for the cart, scaled by quantity."""
    container: AppContainer = request.app.state.container
    return shopping_list_to_dict(container.shopping_service.for_cart(user.id))


@router.put("/cart/{item_id}")
async def update_cart_item(
    item_id: int,
    payload: CartQuantityPayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    item = container.cart_service.update_quantity(user.id, item_id, payload.quantity)
    if item is None:
        return {"deleted": True}
    return cart_item_to_dict(item)


@router.delete("/cart/{item_id}")
async def delete_cart_item(
    item_id: int, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, bool]:
    container: AppContainer = request.app.state.container
    container.cart_service.remove_item(user.id, item_id)
    return {"deleted": True}


@router.delete("/cart")
async def clear_cart(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, bool]:
    container: AppContainer = request.app.state.container
    container.cart_service.clear(user.id)
    return {"cleared": True}
