"""Daily energy and macro targets.

Mifflin-St Jeor BMR scaled by an activity multiplier, shifted by the weekly
weight-change goal (500 kcal/day per lb/week) and split into protein, fat and carbs
by body weight.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import date

from strongai.core.constants import (
    ACTIVITY_MULTIPLIERS,
    BMR_FEMALE_OFFSET,
    BMR_MALE_OFFSET,
    FAT_GRAMS_PER_LB,
    INCH_TO_CM,
    KCAL_PER_GRAM_CARBS,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
    KCAL_PER_WEEKLY_LB,
    KG_TO_LB,
    LB_TO_KG,
    MIN_DAILY_CALORIES,
    PROTEIN_GRAMS_PER_LB,
)
from strongai.core.enums import ActivityLevel, Gender, GoalType, MeasurementType, MeasurementUnit
from strongai.schemas.analytics import MacroTargets
from strongai.schemas.measurement import MeasurementLog
from strongai.schemas.profile import UserProfile


def round_half_up(value: float) -> int:
    """Nearest whole number with .5 rounded up (not to even)."""
    return math.floor(value + 0.5)


def lb_to_kg(lb: float) -> float:
    return lb * LB_TO_KG


def kg_to_lb(kg: float) -> float:
    return kg * KG_TO_LB


def age_on(birthday: date, today: date | None = None) -> int:
    """Whole years; one less if this year's birthday has not happened yet."""
    today = today or date.today()
    age = today.year - birthday.year
    if (today.month, today.day) < (birthday.month, birthday.day):
        age -= 1
    return age


def calc_bmr(weight_kg: float, height_cm: float, age: int, gender: Gender) -> float:
    """Mifflin-St Jeor BMR equation (kcal/day)."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + (BMR_MALE_OFFSET if gender == Gender.MALE else BMR_FEMALE_OFFSET)


def calc_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    return bmr * ACTIVITY_MULTIPLIERS[activity_level]


def target_calories(tdee: float, goal_type: GoalType, weekly_rate_lbs: float) -> float:
    """Maintenance shifted by the goal, floored at the minimum safe intake."""
    adjustment = weekly_rate_lbs * KCAL_PER_WEEKLY_LB
    if goal_type == GoalType.LOSE:
        tdee -= adjustment
    elif goal_type == GoalType.GAIN:
        tdee += adjustment
    return max(float(MIN_DAILY_CALORIES), tdee)


def calculate_daily_macros(
    profile: UserProfile,
    current_weight_lbs: float,
    height_inches: float,
    today: date | None = None,
) -> MacroTargets:
    """Daily calories and macro grams for the profile's goal."""
    weight_kg = lb_to_kg(current_weight_lbs)
    height_cm = height_inches * INCH_TO_CM
    age = age_on(profile.birthday, today)

    bmr = calc_bmr(weight_kg, height_cm, age, profile.gender)
    calories = target_calories(
        calc_tdee(bmr, profile.activity_level),
        profile.goal_type,
        profile.target_weekly_rate,
    )

    protein = round_half_up(current_weight_lbs * PROTEIN_GRAMS_PER_LB)
    fat = round_half_up(current_weight_lbs * FAT_GRAMS_PER_LB)
    carb_kcal = max(0.0, calories - protein * KCAL_PER_GRAM_PROTEIN - fat * KCAL_PER_GRAM_FAT)
    return MacroTargets(
        calories=round_half_up(calories),
        protein=protein,
        carbs=round_half_up(carb_kcal / KCAL_PER_GRAM_CARBS),
        fat=fat,
    )


def current_body_weight_lbs(
    logs: Iterable[MeasurementLog], default_lbs: float
) -> float:
    """Latest logged body weight in pounds, or ``default_lbs`` when none is logged."""
    weights = [m for m in logs if m.type == MeasurementType.WEIGHT]
    if not weights:
        return default_lbs
    latest = max(weights, key=lambda m: m.date)
    if latest.unit == MeasurementUnit.KG:
        return kg_to_lb(latest.value)
    return latest.value
