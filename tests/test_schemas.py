"""Tests for request bodies and query parsing."""

from datetime import date

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from meal_planner.api.schemas import CalendarPayload, FoodDiaryPayload, parse_day
from meal_planner.domain.planning import MealType


def test_parse_day_accepts_plain_date() -> None:
    assert parse_day("2024-05-01") == date(2024, 5, 1)


def test_parse_day_converts_offset_to_utc() -> None:
    assert parse_day("2024-05-01T23:30:00-05:00") == date(2024, 5, 2)
    assert parse_day("2024-05-01T10:00:00.000Z") == date(2024, 5, 1)


def test_parse_day_keeps_naive_datetime_day() -> None:
    assert parse_day("2024-05-01T23:30:00") == date(2024, 5, 1)


def test_parse_day_rejects_garbage() -> None:
    with pytest.raises(HTTPException) as exc_info:
        parse_day("first of May")

    assert exc_info.value.status_code == 400


def test_calendar_payload_parses_meal_type() -> None:
    payload = CalendarPayload.model_validate(
        {"date": "2024-05-01", "recipeId": 1, "mealType": "snack"}
    )

    assert payload.meal_type is MealType.SNACK


def test_meal_type_outside_enum_is_rejected() -> None:
    with pytest.raises(ValidationError):
        FoodDiaryPayload.model_validate(
            {"date": "2024-05-01", "recipeId": 1, "mealType": "brunch"}
        )
