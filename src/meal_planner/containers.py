"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from meal_planner.adapters.google_oauth_client import (
    GoogleOAuthClient,
    HttpxGoogleOAuthClient,
)
from meal_planner.adapters.supabase_calendar_repository import (
    SupabaseCalendarRepository,
)
from meal_planner.adapters.supabase_cart_repository import SupabaseCartRepository
from meal_planner.adapters.supabase_food_diary_repository import (
    SupabaseFoodDiaryRepository,
)
from meal_planner.adapters.supabase_ingredient_repository import (
    SupabaseIngredientRepository,
)
from meal_planner.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from meal_planner.adapters.supabase_stock_repository import SupabaseStockRepository
from meal_planner.adapters.supabase_user_repository import SupabaseUserRepository
from meal_planner.config import Settings
from meal_planner.services.auth import AuthService
from meal_planner.services.calendar import CalendarRepository, CalendarService
from meal_planner.services.cart import CartRepository, CartService
from meal_planner.services.diary import FoodDiaryRepository, FoodDiaryService
from meal_planner.services.ingredients import IngredientRepository, IngredientService
from meal_planner.services.recipes import RecipeRepository, RecipeService
from meal_planner.services.shopping import ShoppingListService
from meal_planner.services.stats import StatsService
from meal_planner.services.stock import StockRepository, StockService
from meal_planner.services.users import UserRepository, UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    auth_service: AuthService
    recipe_service: RecipeService
    ingredient_service: IngredientService
    stock_service: StockService
    cart_service: CartService
    calendar_service: CalendarService
    shopping_service: ShoppingListService
    diary_service: FoodDiaryService
    stats_service: StatsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    ingredient_repository = SupabaseIngredientRepository(supabase_client)
    stock_repository = SupabaseStockRepository(supabase_client)
    cart_repository = SupabaseCartRepository(supabase_client)
    calendar_repository = SupabaseCalendarRepository(supabase_client)
    diary_repository = SupabaseFoodDiaryRepository(supabase_client)
    oauth_client = HttpxGoogleOAuthClient.create(
        client_id=resolved_settings.google_client_id or "",
        client_secret=resolved_settings.google_client_secret or "",
    )
    return wire_container(
        settings=resolved_settings,
        oauth_client=oauth_client,
        user_repository=user_repository,
        recipe_repository=recipe_repository,
        ingredient_repository=ingredient_repository,
        stock_repository=stock_repository,
        cart_repository=cart_repository,
        calendar_repository=calendar_repository,
        diary_repository=diary_repository,
        close_resources=oauth_client.close,
    )


def wire_container(  # noqa: PLR0913
    *,
    settings: Settings,
    oauth_client: GoogleOAuthClient,
    user_repository: UserRepository,
    recipe_repository: RecipeRepository,
    ingredient_repository: IngredientRepository,
    stock_repository: StockRepository,
    cart_repository: CartRepository,
    calendar_repository: CalendarRepository,
    diary_repository: FoodDiaryRepository,
    close_resources: Callable[[], Awaitable[None]],
) -> AppContainer:
    """Build services on top of the given repositories and clients."""
    user_service = UserService(user_repository)
    stock_service = StockService(stock_repository, ingredient_repository)
    recipe_service = RecipeService(
        repository=recipe_repository,
        ingredient_repository=ingredient_repository,
        calendar_repository=calendar_repository,
        user_repository=user_repository,
        catalogue_editor_email=settings.public_recipe_editor_email,
    )
    return AppContainer(
        settings=settings,
        user_service=user_service,
        auth_service=AuthService(
            oauth_client=oauth_client,
            user_service=user_service,
            client_id=settings.google_client_id,
            jwt_secret=settings.jwt_secret,
            token_ttl_days=settings.jwt_ttl_days,
        ),
        recipe_service=recipe_service,
        ingredient_service=IngredientService(ingredient_repository, stock_repository),
        stock_service=stock_service,
        cart_service=CartService(cart_repository, recipe_service, calendar_repository),
        calendar_service=CalendarService(calendar_repository, recipe_service),
        shopping_service=ShoppingListService(
            calendar_repository, cart_repository, stock_repository
        ),
        diary_service=FoodDiaryService(diary_repository, recipe_service),
        stats_service=StatsService(
            recipe_repository=recipe_repository,
            calendar_repository=calendar_repository,
            ingredient_repository=ingredient_repository,
            user_repository=user_repository,
            stock_service=stock_service,
        ),
        close_resources=close_resources,
    )
