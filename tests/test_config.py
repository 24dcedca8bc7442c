"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from meal_planner.config import Settings, parse_cors_origins

REQUIRED = {
    "supabase_url": "https://example.supabase.co",
    "supabase_service_key": "service-key",
    "jwt_secret": "test-secret",
}


def test_log_level_is_normalised() -> None:
    assert Settings(**REQUIRED, log_level="debug").log_level == "DEBUG"


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(**REQUIRED, log_level="verbose")


def test_parse_cors_origins() -> None:
    assert parse_cors_origins(None, "http://localhost:5173") == [
        "http://localhost:5173"
    ]
    assert parse_cors_origins(
        "https://a.example/, https://b.example", "http://localhost:5173"
    ) == ["https://a.example", "https://b.example"]
