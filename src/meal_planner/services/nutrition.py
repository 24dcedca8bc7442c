"""Calorie recommendation and daily intake classification."""

import math
from collections.abc import Iterable
from datetime import date

from meal_planner.domain.nutrition import (
    ActivityLevel,
    BodyMetrics,
    CalorieBalance,
    DailyNutrition,
    Gender,
    Goal,
    MacroTotals,
)

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.2

LOSE_WEIGHT_DEFICIT = 500
GAIN_WEIGHT_SURPLUS = 300

LOW_PERCENTAGE = 90
HIGH_PERCENTAGE = 110
# Absolute thresholds used when no recommendation is available.
LOW_CALORIES = 1200
HIGH_CALORIES = 2500


def has_required_metrics(metrics: BodyMetrics) -> bool:
    """Return True when every field needed for a recommendation is set."""
    return all(
        (
            metrics.age,
            metrics.weight,
            metrics.height,
            metrics.gender,
            metrics.activity_level,
        )
    )


def basal_metabolic_rate(
    gender: str, weight: float, height: float, age: float
) -> float:
    """Mifflin-St Jeor BMR; every gender except male uses the female formula."""
    if gender == Gender.MALE:
        return 88.362 + 13.397 * weight + 4.799 * height - 5.677 * age
    return 447.593 + 9.247 * weight + 3.098 * height - 4.33 * age


def activity_multiplier(activity_level: str | None) -> float:
    if activity_level is None:
        return DEFAULT_ACTIVITY_MULTIPLIER
    return ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)


def total_daily_energy_expenditure(metrics: BodyMetrics) -> float | None:
    """BMR scaled by the activity multiplier, or None when data is missing."""
    if not has_required_metrics(metrics):
        return None
    bmr = basal_metabolic_rate(
        str(metrics.gender),
        float(metrics.weight),
        float(metrics.height),
        float(metrics.age),
    )
    return bmr * activity_multiplier(metrics.activity_level)


def recommend_daily_calories(metrics: BodyMetrics) -> int | None:
    """Return the goal-adjusted daily calorie target.

    None means "no recommendation available" and is distinct from 0 kcal:
    it is returned whenever age, weight, height, gender or activity level
    is missing. A missing or unknown goal keeps the maintenance value.
    """
    tdee = total_daily_energy_expenditure(metrics)
    if tdee is None:
        return None
    if metrics.goal == Goal.LOSE_WEIGHT:
        recommended = tdee - LOSE_WEIGHT_DEFICIT
    elif metrics.goal == Goal.GAIN_WEIGHT:
        recommended = tdee + GAIN_WEIGHT_SURPLUS
    else:
        recommended = tdee
    return round_half_up(recommended)


def calorie_percentage(calories: float, recommended: int | None) -> int | None:
    """Return calories as a rounded percentage of the target."""
    if not recommended:
        return None
    return round_half_up(calories / recommended * 100)


def classify_calorie_intake(
    calories: float, recommended: int | None
) -> CalorieBalance:
    """Classify a day's calories against the target or fixed thresholds."""
    if recommended:
        percentage = calories / recommended * 100
        if percentage < LOW_PERCENTAGE:
            return CalorieBalance.LOW
        if percentage > HIGH_PERCENTAGE:
            return CalorieBalance.HIGH
        return CalorieBalance.BALANCED
    if calories < LOW_CALORIES:
        return CalorieBalance.LOW
    if calories > HIGH_CALORIES:
        return CalorieBalance.HIGH
    return CalorieBalance.BALANCED


def body_mass_index(weight: float | None, height: float | None) -> float | None:
    """BMI rounded to one decimal, or None without weight and height."""
    if not weight or not height:
        return None
    return round(weight / (height / 100) ** 2, 1)


def sum_macros(values: Iterable[MacroTotals]) -> MacroTotals:
    total = MacroTotals(0.0, 0.0, 0.0, 0.0)
    for value in values:
        total = MacroTotals(
            calories=total.calories + value.calories,
            proteins=total.proteins + value.proteins,
            fats=total.fats + value.fats,
            carbohydrates=total.carbohydrates + value.carbohydrates,
        )
    return total


def daily_nutrition(
    day: date, items: list[MacroTotals], metrics: BodyMetrics
) -> DailyNutrition:
    """Summarize a day's intake and compare it with the recommendation."""
    totals = sum_macros(items)
    recommended = recommend_daily_calories(metrics)
    return DailyNutrition(
        day=day,
        totals=totals,
        entries=len(items),
        recommended_calories=recommended,
        percentage=calorie_percentage(totals.calories, recommended),
        balance=classify_calorie_intake(totals.calories, recommended),
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)
