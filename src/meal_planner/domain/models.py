"""Domain models for users and their profiles."""

from dataclasses import dataclass

from meal_planner.domain.nutrition import BodyMetrics


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: int
    google_id: str
    email: str
    name: str | None = None
    picture: str | None = None


@dataclass(frozen=True)
class GoogleUserInfo:
    """Identity returned by Google's userinfo endpoint."""

    id: str
    email: str
    name: str | None
    picture: str | None


@dataclass(frozen=True)
class UserProfile:
    """User record with the optional body and goal fields."""

    id: int
    email: str
    name: str | None = None
    picture: str | None = None
    height: float | None = None
    weight: float | None = None
    target_weight: float | None = None
    daily_calories: float | None = None
    age: int | None = None
    gender: str | None = None
    activity_level: str | None = None
    goal: str | None = None

    @property
    def metrics(self) -> BodyMetrics:
        """Fields consumed by the calorie recommendation."""
        return BodyMetrics(
            age=self.age,
            weight=self.weight,
            height=self.height,
            gender=self.gender,
            activity_level=self.activity_level,
            goal=self.goal,
        )
