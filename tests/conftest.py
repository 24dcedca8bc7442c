"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from itertools import count

import pytest
from fastapi.testclient import TestClient

from meal_planner.adapters.google_oauth_client import GoogleOAuthClient
from meal_planner.config import Settings
from meal_planner.containers import AppContainer, wire_container
from meal_planner.domain.diary import FoodDiaryEntry
from meal_planner.domain.models import GoogleUserInfo, UserProfile, UserRecord
from meal_planner.domain.planning import CalendarItem, CartItem, StockItem
from meal_planner.domain.recipes import (
    AuthorSummary,
    Ingredient,
    IngredientLink,
    Recipe,
    RecipeDraft,
    RecipeFilters,
    RecipeIngredient,
)
from meal_planner.services.calendar import CalendarRepository
from meal_planner.services.cart import CartRepository
from meal_planner.services.diary import FoodDiaryRepository
from meal_planner.services.ingredients import IngredientRepository
from meal_planner.services.recipes import RecipeRepository
from meal_planner.services.stock import StockRepository
from meal_planner.services.users import UserRepository

_SORT_KEYS = {"cookingTime": "cooking_time"}


@dataclass
class InMemoryDatabase:
    """Tables shared by the in-memory repositories."""

    users: dict[int, dict[str, object]] = field(default_factory=dict)
    recipes: dict[int, dict[str, object]] = field(default_factory=dict)
    ingredients: dict[int, Ingredient] = field(default_factory=dict)
    links: dict[int, dict[str, object]] = field(default_factory=dict)
    stock: dict[int, dict[str, object]] = field(default_factory=dict)
    cart: dict[int, dict[str, object]] = field(default_factory=dict)
    calendar: dict[int, dict[str, object]] = field(default_factory=dict)
    diary: dict[int, dict[str, object]] = field(default_factory=dict)
    ids: count = field(default_factory=lambda: count(1))

    def next_id(self) -> int:
        return next(self.ids)

    def recipe(self, recipe_id: int) -> Recipe | None:
        row = self.recipes.get(recipe_id)
        if row is None:
            return None
        author_id = row.get("author_id")
        author_row = self.users.get(author_id) if author_id is not None else None
        lines = []
        for link in sorted(self.links.values(), key=lambda link: link["id"]):
            if link["recipe_id"] != recipe_id:
                continue
            ingredient = self.ingredients[link["ingredient_id"]]
            lines.append(
                RecipeIngredient(
                    name=ingredient.name,
                    amount=link["amount"],
                    amount_type=ingredient.amount_type,
                )
            )
        return Recipe(
            id=recipe_id,
            name=row["name"],
            calories=row["calories"],
            proteins=row["proteins"],
            fats=row["fats"],
            carbohydrates=row["carbohydrates"],
            instructions=row.get("instructions"),
            cooking_time=row.get("cooking_time"),
            difficulty=row.get("difficulty"),
            author_id=author_id,
            author=(
                AuthorSummary(
                    id=author_id, name=author_row["name"], email=author_row["email"]
                )
                if author_row
                else None
            ),
            ingredients=lines,
        )

    def used_ingredient_ids(self, user_id: int) -> set[int]:
        return {
            link["ingredient_id"]
            for link in self.links.values()
            if self.recipes[link["recipe_id"]].get("author_id") == user_id
        }


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    db: InMemoryDatabase

    def get_user(self, user_id: int) -> UserRecord | None:
        row = self.db.users.get(user_id)
        return _user(row) if row else None

    def get_by_google_id(self, google_id: str) -> UserRecord | None:
        for row in self.db.users.values():
            if row["google_id"] == google_id:
                return _user(row)
        return None

    def get_by_email(self, email: str) -> UserRecord | None:
        for row in self.db.users.values():
            if row["email"] == email:
                return _user(row)
        return None

    def create_user(self, info: GoogleUserInfo) -> UserRecord:
        user_id = self.db.next_id()
        self.db.users[user_id] = {
            "id": user_id,
            "google_id": info.id,
            "email": info.email,
            "name": info.name,
            "picture": info.picture,
        }
        return _user(self.db.users[user_id])

    def update_identity(self, user_id: int, info: GoogleUserInfo) -> UserRecord:
        row = self.db.users[user_id]
        row.update({"email": info.email, "name": info.name, "picture": info.picture})
        return _user(row)

    def get_profile(self, user_id: int) -> UserProfile | None:
        row = self.db.users.get(user_id)
        if row is None:
            return None
        return UserProfile(
            **{key: value for key, value in row.items() if key != "google_id"}
        )

    def update_profile(self, user_id: int, payload: dict[str, object]) -> UserProfile:
        self.db.users[user_id].update(payload)
        profile = self.get_profile(user_id)
        assert profile is not None
        return profile


def _user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=row["id"],
        google_id=row["google_id"],
        email=row["email"],
        name=row.get("name"),
        picture=row.get("picture"),
    )


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    db: InMemoryDatabase

    def list_for_user(self, user_id: int) -> list[Recipe]:
        return [
            self.db.recipe(recipe_id)
            for recipe_id, row in sorted(self.db.recipes.items())
            if row.get("author_id") in {None, user_id}
        ]

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        return self.db.recipe(recipe_id)

    def create_recipe(self, author_id: int | None, fields: dict[str, object]) -> int:
        recipe_id = self.db.next_id()
        self.db.recipes[recipe_id] = {**fields, "id": recipe_id, "author_id": author_id}
        return recipe_id

    def update_recipe(self, recipe_id: int, fields: dict[str, object]) -> None:
        self.db.recipes[recipe_id].update(fields)

    def delete_recipe(self, recipe_id: int) -> None:
        for link_id in [
            link_id
            for link_id, link in self.db.links.items()
            if link["recipe_id"] == recipe_id
        ]:
            del self.db.links[link_id]
        del self.db.recipes[recipe_id]

    def list_links(self, recipe_id: int) -> list[IngredientLink]:
        return [
            IngredientLink(
                id=link["id"],
                recipe_id=recipe_id,
                ingredient=self.db.ingredients[link["ingredient_id"]],
                amount=link["amount"],
            )
            for link in sorted(self.db.links.values(), key=lambda link: link["id"])
            if link["recipe_id"] == recipe_id
        ]

    def create_link(self, recipe_id: int, ingredient_id: int, amount: float) -> None:
        link_id = self.db.next_id()
        self.db.links[link_id] = {
            "id": link_id,
            "recipe_id": recipe_id,
            "ingredient_id": ingredient_id,
            "amount": amount,
        }

    def update_link(self, link_id: int, amount: float) -> None:
        self.db.links[link_id]["amount"] = amount

    def delete_links(self, link_ids: list[int]) -> None:
        for link_id in link_ids:
            self.db.links.pop(link_id, None)

    def list_catalogue(
        self, editor_id: int | None, filters: RecipeFilters
    ) -> list[Recipe]:
        allowed = {None, editor_id}
        recipes = [
            self.db.recipe(recipe_id)
            for recipe_id, row in sorted(self.db.recipes.items())
            if row.get("author_id") in allowed
        ]
        if filters.search:
            needle = filters.search.casefold()
            recipes = [r for r in recipes if needle in r.name.casefold()]
        if filters.min_calories is not None:
            recipes = [r for r in recipes if r.calories >= filters.min_calories]
        if filters.max_calories is not None:
            recipes = [r for r in recipes if r.calories <= filters.max_calories]
        if filters.difficulty:
            recipes = [r for r in recipes if r.difficulty == filters.difficulty]
        if filters.max_cooking_time is not None:
            recipes = [
                r
                for r in recipes
                if r.cooking_time is not None
                and r.cooking_time <= filters.max_cooking_time
            ]
        attribute = _SORT_KEYS.get(filters.sort_by, filters.sort_by)
        return sorted(
            recipes,
            key=lambda recipe: getattr(recipe, attribute, recipe.name) or 0,
            reverse=filters.sort_order == "desc",
        )


@dataclass
class InMemoryIngredientRepository(IngredientRepository):
    """In-memory ingredient repository for tests."""

    db: InMemoryDatabase

    def get_ingredient(self, ingredient_id: int) -> Ingredient | None:
        return self.db.ingredients.get(ingredient_id)

    def get_by_name(self, name: str) -> Ingredient | None:
        for ingredient in self.db.ingredients.values():
            if ingredient.name == name:
                return ingredient
        return None

    def create_ingredient(self, name: str, amount_type: str) -> Ingredient:
        ingredient = Ingredient(
            id=self.db.next_id(), name=name, amount_type=amount_type
        )
        self.db.ingredients[ingredient.id] = ingredient
        return ingredient

    def update_amount_type(self, ingredient_id: int, amount_type: str) -> Ingredient:
        current = self.db.ingredients[ingredient_id]
        updated = Ingredient(id=current.id, name=current.name, amount_type=amount_type)
        self.db.ingredients[ingredient_id] = updated
        return updated

    def list_used_by(self, user_id: int) -> list[Ingredient]:
        used = self.db.used_ingredient_ids(user_id)
        return sorted(
            (self.db.ingredients[ingredient_id] for ingredient_id in used),
            key=lambda ingredient: ingredient.name,
        )

    def is_used_by(self, ingredient_id: int, user_id: int) -> bool:
        return ingredient_id in self.db.used_ingredient_ids(user_id)

    def delete_ingredient(self, ingredient_id: int) -> None:
        del self.db.ingredients[ingredient_id]


@dataclass
class InMemoryStockRepository(StockRepository):
    """In-memory stock repository for tests."""

    db: InMemoryDatabase

    def list_stock(self, user_id: int) -> list[StockItem]:
        return [
            self._item(row)
            for row in self.db.stock.values()
            if row["user_id"] == user_id
        ]

    def upsert_stock(
        self, user_id: int, ingredient_id: int, amount: float
    ) -> StockItem:
        for row in self.db.stock.values():
            if row["user_id"] == user_id and row["ingredient_id"] == ingredient_id:
                row["amount"] = amount
                return self._item(row)
        stock_id = self.db.next_id()
        self.db.stock[stock_id] = {
            "id": stock_id,
            "user_id": user_id,
            "ingredient_id": ingredient_id,
            "amount": amount,
        }
        return self._item(self.db.stock[stock_id])

    def delete_stock(self, user_id: int, ingredient_id: int) -> None:
        self._delete_where(
            lambda row: row["user_id"] == user_id
            and row["ingredient_id"] == ingredient_id
        )

    def delete_for_ingredient(self, ingredient_id: int) -> None:
        self._delete_where(lambda row: row["ingredient_id"] == ingredient_id)

    def _delete_where(self, predicate) -> None:  # type: ignore[no-untyped-def]
        for stock_id in [key for key, row in self.db.stock.items() if predicate(row)]:
            del self.db.stock[stock_id]

    def _item(self, row: dict[str, object]) -> StockItem:
        return StockItem(
            id=row["id"],
            user_id=row["user_id"],
            ingredient=self.db.ingredients[row["ingredient_id"]],
            amount=row["amount"],
        )


@dataclass
class InMemoryCartRepository(CartRepository):
    """In-memory cart repository for tests."""

    db: InMemoryDatabase

    def list_items(self, user_id: int) -> list[CartItem]:
        return [
            self._item(row)
            for _, row in sorted(self.db.cart.items())
            if row["user_id"] == user_id
        ]

    def get_item(self, user_id: int, item_id: int) -> CartItem | None:
        row = self.db.cart.get(item_id)
        if row is None or row["user_id"] != user_id:
            return None
        return self._item(row)

    def find_by_recipe(self, user_id: int, recipe_id: int) -> CartItem | None:
        for row in self.db.cart.values():
            if row["user_id"] == user_id and row["recipe_id"] == recipe_id:
                return self._item(row)
        return None

    def create_item(self, user_id: int, recipe_id: int, quantity: int) -> CartItem:
        item_id = self.db.next_id()
        self.db.cart[item_id] = {
            "id": item_id,
            "user_id": user_id,
            "recipe_id": recipe_id,
            "quantity": quantity,
        }
        return self._item(self.db.cart[item_id])

    def set_quantity(self, item_id: int, quantity: int) -> CartItem:
        self.db.cart[item_id]["quantity"] = quantity
        return self._item(self.db.cart[item_id])

    def delete_item(self, user_id: int, item_id: int) -> None:
        self.db.cart.pop(item_id, None)

    def clear(self, user_id: int) -> None:
        for item_id in [
            key for key, row in self.db.cart.items() if row["user_id"] == user_id
        ]:
            del self.db.cart[item_id]

    def _item(self, row: dict[str, object]) -> CartItem:
        return CartItem(
            id=row["id"],
            user_id=row["user_id"],
            recipe_id=row["recipe_id"],
            quantity=row["quantity"],
            recipe=self.db.recipe(row["recipe_id"]),
        )


@dataclass
class InMemoryCalendarRepository(CalendarRepository):
    """In-memory calendar repository for tests."""

    db: InMemoryDatabase

    def list_items(self, user_id: int) -> list[CalendarItem]:
        items = [
            self._item(row)
            for row in self.db.calendar.values()
            if row["user_id"] == user_id
        ]
        return sorted(items, key=lambda item: (item.day, item.id))

    def list_items_for_day(self, user_id: int, day: date) -> list[CalendarItem]:
        return [item for item in self.list_items(user_id) if item.day == day]

    def get_item(self, user_id: int, item_id: int) -> CalendarItem | None:
        row = self.db.calendar.get(item_id)
        if row is None or row["user_id"] != user_id:
            return None
        return self._item(row)

    def find_item(
        self,
        user_id: int,
        day: date,
        recipe_id: int,
        meal_type: str,
    ) -> CalendarItem | None:
        for row in self.db.calendar.values():
            if (
                row["user_id"] == user_id
                and row["day"] == day
                and row["recipe_id"] == recipe_id
                and row["meal_type"] == meal_type
            ):
                return self._item(row)
        return None

    def create_item(
        self, user_id: int, recipe_id: int, day: date, meal_type: str
    ) -> CalendarItem:
        item_id = self.db.next_id()
        self.db.calendar[item_id] = {
            "id": item_id,
            "user_id": user_id,
            "recipe_id": recipe_id,
            "day": day,
            "meal_type": meal_type,
        }
        return self._item(self.db.calendar[item_id])

    def update_item(self, item_id: int, day: date, meal_type: str) -> CalendarItem:
        self.db.calendar[item_id].update({"day": day, "meal_type": meal_type})
        return self._item(self.db.calendar[item_id])

    def delete_item(self, user_id: int, item_id: int) -> None:
        self.db.calendar.pop(item_id, None)

    def delete_for_recipe(self, recipe_id: int) -> None:
        for item_id in [
            key
            for key, row in self.db.calendar.items()
            if row["recipe_id"] == recipe_id
        ]:
            del self.db.calendar[item_id]

    def _item(self, row: dict[str, object]) -> CalendarItem:
        return CalendarItem(
            id=row["id"],
            user_id=row["user_id"],
            recipe_id=row["recipe_id"],
            day=row["day"],
            meal_type=row["meal_type"],
            recipe=self.db.recipe(row["recipe_id"]),
        )


@dataclass
class InMemoryFoodDiaryRepository(FoodDiaryRepository):
    """In-memory food diary repository for tests."""

    db: InMemoryDatabase

    def list_entries(self, user_id: int, day: date | None) -> list[FoodDiaryEntry]:
        entries = [
            self._entry(row)
            for row in self.db.diary.values()
            if row["user_id"] == user_id and (day is None or row["day"] == day)
        ]
        return sorted(entries, key=lambda entry: (entry.day, entry.id))

    def get_entry(self, user_id: int, entry_id: int) -> FoodDiaryEntry | None:
        row = self.db.diary.get(entry_id)
        if row is None or row["user_id"] != user_id:
            return None
        return self._entry(row)

    def create_entry(self, user_id: int, payload: dict[str, object]) -> FoodDiaryEntry:
        entry_id = self.db.next_id()
        self.db.diary[entry_id] = {
            **payload,
            "id": entry_id,
            "user_id": user_id,
            "day": date.fromisoformat(str(payload["date"])),
        }
        return self._entry(self.db.diary[entry_id])

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        self.db.diary.pop(entry_id, None)

    def _entry(self, row: dict[str, object]) -> FoodDiaryEntry:
        return FoodDiaryEntry(
            id=row["id"],
            user_id=row["user_id"],
            recipe_id=row["recipe_id"],
            day=row["day"],
            meal_type=row["meal_type"],
            serving_size=row["serving_size"],
            calories=row["calories"],
            proteins=row["proteins"],
            fats=row["fats"],
            carbohydrates=row["carbohydrates"],
            recipe=self.db.recipe(row["recipe_id"]),
        )


@dataclass
class FakeGoogleOAuthClient(GoogleOAuthClient):
    """Fake OAuth client returning fixed Google payloads."""

    token_payload: dict[str, object] = field(
        default_factory=lambda: {"access_token": "google-access-token"}
    )
    user_payload: dict[str, object] = field(
        default_factory=lambda: {
            "id": "google-123",
            "email": "cook@example.com",
            "name": "Cook",
            "picture": "https://example.com/cook.png",
        }
    )
    exchanged: list[tuple[str, str]] = field(default_factory=list)
    closed: bool = False

    async def exchange_code(self, code: str, redirect_uri: str) -> dict[str, object]:
        self.exchanged.append((code, redirect_uri))
        return self.token_payload

    async def get_user_info(self, access_token: str) -> dict[str, object]:
        return self.user_payload

    async def close(self) -> None:
        self.closed = True


def create_user(
    container: AppContainer, email: str = "cook@example.com", **profile: object
) -> UserRecord:
    """Register a user as if they had signed in with Google."""
    user = container.user_service.ensure_google_user(
        GoogleUserInfo(id=f"google-{email}", email=email, name="Cook", picture=None)
    )
    if profile:
        container.user_service.update_profile(user.id, profile)
    return user


def create_recipe(  # noqa: PLR0913
    container: AppContainer,
    author_id: int | None,
    name: str,
    calories: float = 400,
    ingredients: list[tuple[str, float, str]] | None = None,
    **extra: object,
) -> Recipe:
    """Store a recipe through the recipe service."""
    draft = RecipeDraft(
        name=name,
        calories=calories,
        proteins=20,
        fats=10,
        carbohydrates=50,
        ingredients=[
            RecipeIngredient(name=item, amount=amount, amount_type=unit)
            for item, amount, unit in ingredients or []
        ],
        **extra,
    )
    return container.recipe_service.create_recipe(author_id, draft)


def login(client: TestClient, container: AppContainer, user: UserRecord) -> None:
    """Attach a session cookie for the user to a TestClient."""
    client.cookies.set("authToken", container.auth_service.issue_token(user))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        google_client_id="client-id",
        google_client_secret="client-secret",
        jwt_secret="test-secret",
        public_recipe_editor_email="editor@example.com",
    )


@pytest.fixture
def database() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def oauth_client() -> FakeGoogleOAuthClient:
    return FakeGoogleOAuthClient()


@pytest.fixture
def container(
    settings: Settings,
    database: InMemoryDatabase,
    oauth_client: FakeGoogleOAuthClient,
) -> AppContainer:
    return wire_container(
        settings=settings,
        oauth_client=oauth_client,
        user_repository=InMemoryUserRepository(database),
        recipe_repository=InMemoryRecipeRepository(database),
        ingredient_repository=InMemoryIngredientRepository(database),
        stock_repository=InMemoryStockRepository(database),
        cart_repository=InMemoryCartRepository(database),
        calendar_repository=InMemoryCalendarRepository(database),
        diary_repository=InMemoryFoodDiaryRepository(database),
        close_resources=oauth_client.close,
    )
