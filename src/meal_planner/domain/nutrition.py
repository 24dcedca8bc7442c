"""Nutrition domain models."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class Gender(StrEnum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(StrEnum):
    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"


class Goal(StrEnum):
    LOSE_WEIGHT = "lose_weight"
    MAINTAIN_WEIGHT = "maintain_weight"
    GAIN_WEIGHT = "gain_weight"


class CalorieBalance(StrEnum):
    """How a day's calories compare with the target."""

    LOW = "low"
    BALANCED = "balanced"
    HIGH = "high"


@dataclass(frozen=True)
class BodyMetrics:
    """Profile fields used for the calorie recommendation."""

    age: float | None = None
    weight: float | None = None
    height: float | None = None
    gender: str | None = None
    activity_level: str | None = None
    goal: str | None = None


@dataclass(frozen=True)
class MacroTotals:
    """Calories and macronutrients."""

    calories: float
    proteins: float
    fats: float
    carbohydrates: float


@dataclass(frozen=True)
class DailyNutrition:
    """A day's totals compared with the recommended intake."""

    day: date
    totals: MacroTotals
    entries: int
    recommended_calories: int | None
    percentage: int | None
    balance: CalorieBalance
