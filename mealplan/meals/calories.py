# -*- coding: utf-8 -*-
"""
Daily calorie target estimation.

Harris-Benedict BMR scaled by an activity multiplier and shifted by the goal.
"""

from __future__ import annotations

ASSUMED_AGE = 30
GOAL_ADJUSTMENT_KCAL = 500.0
DEFAULT_ACTIVITY_MULTIPLIER = 1.2

# Keys are matched against the lower-cased fitness level, so only "advanced"
# can ever hit a non-default multiplier. Kept as-is until the intended
# levels are confirmed.
ACTIVITY_MULTIPLIERS = {
    "Beginner": 1.2,
    "I do Sport from time to time": 1.43,
    "I do sport regularly": 1.67,
    "advanced": 1.9,
}


def _harris_benedict(weight_kg: float, height_cm: float, gender: str) -> float:
    """BMR for a fixed age; unknown genders yield 0."""
    if gender == "male":
        return 88.362 + (13.397 * weight_kg) + (4.799 * height_cm) - (5.677 * ASSUMED_AGE)
    if gender == "female":
        return 447.593 + (9.247 * weight_kg) + (3.098 * height_cm) - (4.330 * ASSUMED_AGE)
    return 0.0


def _activity_multiplier(fitness_level: str) -> float:
    return ACTIVITY_MULTIPLIERS.get(fitness_level, DEFAULT_ACTIVITY_MULTIPLIER)


def _goal_adjustment(purpose: str) -> float:
    if purpose == "Gain Muscle":
        return GOAL_ADJUSTMENT_KCAL
    if purpose == "Lose Weight":
        return -GOAL_ADJUSTMENT_KCAL
    return 0.0


def caloric_intake(
    height: float,
    weight: float,
    gender: str,
    purpose: str,
    fitness_level: str,
) -> float:
    """Estimated daily calorie target (kcal) used when rendering prompts."""
    gender = (gender or "").strip().lower()
    fitness_level = (fitness_level or "").strip().lower()

    bmr = _harris_benedict(weight, height, gender)
    tdee = bmr * _activity_multiplier(fitness_level)
    return tdee + _goal_adjustment(purpose)
