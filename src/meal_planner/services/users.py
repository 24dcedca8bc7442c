"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol

from meal_planner.domain.models import GoogleUserInfo, UserProfile, UserRecord
from meal_planner.services.errors import NotFoundError
from meal_planner.services.nutrition import recommend_daily_calories

PROFILE_FIELDS = (
    "name",
    "height",
    "weight",
    "target_weight",
    "daily_calories",
    "age",
    "gender",
    "activity_level",
    "goal",
)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return the user by id, if present."""

    def get_by_google_id(self, google_id: str) -> UserRecord | None:
        """Return the user for a Google account id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with the given e-mail, if present."""

    def create_user(self, info: GoogleUserInfo) -> UserRecord:
        """Create and return a new user record."""

    def update_identity(self, user_id: int, info: GoogleUserInfo) -> UserRecord:
        """Refresh e-mail, name and picture from Google."""

    def get_profile(self, user_id: int) -> UserProfile | None:
        """Return the full profile for a user."""

    def update_profile(self, user_id: int, payload: dict[str, object]) -> UserProfile:
        """Update profile columns and return the profile."""


@dataclass
class UserService:
    """Application service for user lifecycle and profile actions."""

    repository: UserRepository

    def ensure_google_user(self, info: GoogleUserInfo) -> UserRecord:
        """Return the user for a Google account, creating it on first login."""
        existing = self.repository.get_by_google_id(info.id)
        if existing:
            return self.repository.update_identity(existing.id, info)
        return self.repository.create_user(info)

    def get_user(self, user_id: int) -> UserRecord | None:
        return self.repository.get_user(user_id)

    def get_profile(self, user_id: int) -> UserProfile:
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise NotFoundError("User not found")
        return profile

    def update_profile(self, user_id: int, changes: dict[str, object]) -> UserProfile:
        """Update the given profile fields; empty or zero values become null."""
        payload = {
            field: changes.get(field) or None
            for field in PROFILE_FIELDS
            if field in changes
        }
        if not payload:
            return self.get_profile(user_id)
        return self.repository.update_profile(user_id, payload)

    def recommended_calories(self, user_id: int) -> int | None:
        profile = self.repository.get_profile(user_id)
        if profile is None:
            return None
        return recommend_daily_calories(profile.metrics)
