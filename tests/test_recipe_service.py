"""Tests for personal recipes and the public catalogue."""

from datetime import date

import pytest

from meal_planner.domain.recipes import RecipeDraft, RecipeFilters, RecipeIngredient
from meal_planner.services.errors import NotFoundError, PermissionDeniedError
from meal_planner.services.recipes import matches_calorie_category
from tests.conftest import create_recipe, create_user


def _draft(name: str, *ingredients: tuple[str, float, str]) -> RecipeDraft:
    return RecipeDraft(
        name=name,
        calories=350,
        proteins=15,
        fats=12,
        carbohydrates=40,
        instructions="",
        ingredients=[
            RecipeIngredient(name=item, amount=amount, amount_type=unit)
            for item, amount, unit in ingredients
        ],
    )


def test_create_recipe_reuses_ingredients_by_name(container) -> None:
    user = create_user(container)
    create_recipe(container, user.id, "Блины", ingredients=[("Яйцо", 2, "шт")])
    recipe = create_recipe(
        container, user.id, "Сырники", ingredients=[("Яйцо", 1, "г")]
    )

    ingredients = container.ingredient_service.list_ingredients(user.id)

    assert [ingredient.name for ingredient in ingredients] == ["Яйцо"]
    assert ingredients[0].amount_type == "шт"
    assert recipe.ingredients == [
        RecipeIngredient(name="Яйцо", amount=1, amount_type="шт")
    ]
    assert recipe.author is not None
    assert recipe.author.email == "cook@example.com"


def test_empty_optional_fields_are_stored_as_null(container) -> None:
    user = create_user(container)

    recipe = container.recipe_service.create_recipe(user.id, _draft("Каша"))

    assert recipe.instructions is None
    assert recipe.cooking_time is None


def test_list_recipes_includes_public_but_not_foreign(container) -> None:
    user = create_user(container)
    other = create_user(container, email="other@example.com")
    create_recipe(container, None, "Public")
    create_recipe(container, user.id, "Mine")
    create_recipe(container, other.id, "Theirs")

    names = [recipe.name for recipe in container.recipe_service.list_recipes(user.id)]

    assert names == ["Public", "Mine"]


def test_get_recipe_hides_foreign_recipes(container) -> None:
    user = create_user(container)
    other = create_user(container, email="other@example.com")
    foreign = create_recipe(container, other.id, "Theirs")

    with pytest.raises(NotFoundError):
        container.recipe_service.get_recipe(user.id, foreign.id)


def test_get_recipe_returns_catalogue_editor_recipe(container) -> None:
    editor = create_user(container, email="editor@example.com")
    user = create_user(container)
    soup = create_recipe(container, editor.id, "Борщ")

    assert container.recipe_service.get_recipe(user.id, soup.id).name == "Борщ"


def test_update_recipe_syncs_ingredient_links(container) -> None:
    user = create_user(container)
    recipe = create_recipe(
        container,
        user.id,
        "Блины",
        ingredients=[("Мука", 100, "г"), ("Молоко", 200, "мл")],
    )

    updated = container.recipe_service.update_recipe(
        user.id,
        recipe.id,
        _draft("Блины тонкие", ("Мука", 120, "г"), ("Яйцо", 2, "шт")),
    )

    assert updated.name == "Блины тонкие"
    assert updated.ingredients == [
        RecipeIngredient(name="Мука", amount=120, amount_type="г"),
        RecipeIngredient(name="Яйцо", amount=2, amount_type="шт"),
    ]


def test_update_recipe_refreshes_amount_type(container) -> None:
    user = create_user(container)
    recipe = create_recipe(container, user.id, "Чай", ingredients=[("Сахар", 10, "г")])

    updated = container.recipe_service.update_recipe(
        user.id, recipe.id, _draft("Чай", ("Сахар", 2, "ч.л."))
    )

    assert updated.ingredients[0].amount_type == "ч.л."


def test_update_public_recipe_through_personal_route_is_not_found(container) -> None:
    user = create_user(container)
    public = create_recipe(container, None, "Public")

    with pytest.raises(NotFoundError):
        container.recipe_service.update_recipe(user.id, public.id, _draft("Hacked"))


def test_delete_recipe_removes_calendar_entries(container) -> None:
    user = create_user(container)
    recipe = create_recipe(
        container, user.id, "Блины", ingredients=[("Мука", 100, "г")]
    )
    container.calendar_service.add_item(user.id, recipe.id, date(2024, 5, 1), "lunch")

    container.recipe_service.delete_recipe(user.id, recipe.id)

    assert container.calendar_service.list_items(user.id) == []
    assert container.recipe_service.list_recipes(user.id) == []


def test_catalogue_includes_public_and_editor_recipes(container) -> None:
    editor = create_user(container, email="editor@example.com")
    cook = create_user(container)
    create_recipe(container, None, "Овсянка", calories=250)
    create_recipe(container, editor.id, "Борщ", calories=450)
    create_recipe(container, cook.id, "Private", calories=500)

    names = [
        recipe.name
        for recipe in container.recipe_service.list_catalogue(RecipeFilters())
    ]

    assert names == ["Борщ", "Овсянка"]


def test_catalogue_filters_and_sorting(container) -> None:
    create_recipe(container, None, "Салат", calories=150, cooking_time=10)
    create_recipe(container, None, "Суп", calories=350, cooking_time=40)
    create_recipe(container, None, "Стейк", calories=700, cooking_time=25)

    service = container.recipe_service
    low = service.list_catalogue(RecipeFilters(category="low"))
    medium = service.list_catalogue(RecipeFilters(category="medium"))
    quick = service.list_catalogue(
        RecipeFilters(max_cooking_time=30, sort_by="calories", sort_order="desc")
    )
    search = service.list_catalogue(RecipeFilters(search="су"))

    assert [recipe.name for recipe in low] == ["Салат"]
    assert [recipe.name for recipe in medium] == ["Суп"]
    assert [recipe.name for recipe in quick] == ["Стейк", "Салат"]
    assert [recipe.name for recipe in search] == ["Суп"]


def test_only_catalogue_editor_may_change_public_recipes(container) -> None:
    editor = create_user(container, email="editor@example.com")
    cook = create_user(container)
    public = create_recipe(container, None, "Овсянка")

    with pytest.raises(PermissionDeniedError):
        container.recipe_service.update_public_recipe(cook, public.id, _draft("X"))

    updated = container.recipe_service.update_public_recipe(
        editor, public.id, _draft("Овсянка на молоке")
    )
    assert updated.name == "Овсянка на молоке"


def test_editor_cannot_change_private_recipes(container) -> None:
    editor = create_user(container, email="editor@example.com")
    cook = create_user(container)
    private = create_recipe(container, cook.id, "Private")

    with pytest.raises(PermissionDeniedError):
        container.recipe_service.delete_public_recipe(editor, private.id)


def test_editor_deletes_public_recipe(container) -> None:
    editor = create_user(container, email="editor@example.com")
    public = create_recipe(container, None, "Овсянка")

    container.recipe_service.delete_public_recipe(editor, public.id)

    with pytest.raises(NotFoundError):
        container.recipe_service.delete_public_recipe(editor, public.id)


def test_matches_calorie_category_bounds() -> None:
    assert matches_calorie_category(299, "low")
    assert matches_calorie_category(300, "medium")
    assert matches_calorie_category(600, "medium")
    assert matches_calorie_category(601, "high")
    assert matches_calorie_category(601, "unknown")
