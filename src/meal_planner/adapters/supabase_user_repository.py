"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from meal_planner.domain.models import GoogleUserInfo, UserProfile, UserRecord
from meal_planner.services.users import PROFILE_FIELDS, UserRepository

_USER_COLUMNS = "id, google_id, email, name, picture"
_PROFILE_COLUMNS = "id, email, picture, " + ", ".join(PROFILE_FIELDS)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: int) -> UserRecord | None:
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_google_id(self, google_id: str) -> UserRecord | None:
        """Return the user for a Google account id, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("google_id", google_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_email(self, email: str) -> UserRecord | None:
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, info: GoogleUserInfo) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert(
                {
                    "google_id": info.id,
                    "email": info.email,
                    "name": info.name,
                    "picture": info.picture,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def update_identity(self, user_id: int, info: GoogleUserInfo) -> UserRecord:
        """Refresh e-mail, name and picture from Google."""
        response = (
            self.client.table("users")
            .update({"email": info.email, "name": info.name, "picture": info.picture})
            .eq("id", user_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user in Supabase")
        return _parse_user(response.data[0])

    def get_profile(self, user_id: int) -> UserProfile | None:
        response = (
            self.client.table("users")
            .select(_PROFILE_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def update_profile(self, user_id: int, payload: dict[str, object]) -> UserProfile:
        """Update profile columns and return the profile."""
        response = (
            self.client.table("users").update(payload).eq("id", user_id).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update profile in Supabase")
        return _parse_profile(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=int(row["id"]),
        google_id=str(row["google_id"]),
        email=str(row["email"]),
        name=row.get("name"),
        picture=row.get("picture"),
    )


def _optional_float(value: object) -> float | None:
    return float(value) if value is not None else None


def _parse_profile(row: dict[str, object]) -> UserProfile:
    age = row.get("age")
    return UserProfile(
        id=int(row["id"]),
        email=str(row.get("email", "")),
        name=row.get("name"),
        picture=row.get("picture"),
        height=_optional_float(row.get("height")),
        weight=_optional_float(row.get("weight")),
        target_weight=_optional_float(row.get("target_weight")),
        daily_calories=_optional_float(row.get("daily_calories")),
        age=int(age) if age is not None else None,
        gender=row.get("gender"),
        activity_level=row.get("activity_level"),
        goal=row.get("goal"),
    )
