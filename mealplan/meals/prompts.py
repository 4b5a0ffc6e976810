# -*- coding: utf-8 -*-
"""Prompt rendering for meal plan and meal swap completions."""

from __future__ import annotations

from typing import List

from .calories import caloric_intake
from .models import ConversationTurn, SwapMealRequest, UserProfile

SYSTEM_PROMPT = "You are a helpful assistant."

COLUMNS = "day of week,meal type,ingredients,instructions,nutrition"


def _format_instructions(delimiter: str) -> str:
    return (
        f"The columns should be as follows:\n"
        f"{COLUMNS}\n"
        "Do not include a header row. The first line should be the first meal entry.\n"
        f"Split each column using the '{delimiter}' character and never use '{delimiter}' "
        "inside a column. Put each meal entry on its own line.\n"
        "Ensure the response is valid delimited text without any extraneous characters "
        "or formatting. Include no additional text in your response."
    )


def build_meal_plan_prompt(profile: UserProfile, delimiter: str = ";") -> str:
    calories = caloric_intake(
        profile.height,
        profile.weight,
        profile.gender,
        profile.purpose,
        profile.fitness_level,
    )
    return (
        "Generate a meal plan with the user's details as follows:\n"
        f"Purpose: {profile.purpose}\n"
        f"Height: {profile.height:g} cm\n"
        f"Weight: {profile.weight:g} kg\n"
        f"Gender: {profile.gender}\n"
        f"Diet Preference: {', '.join(profile.selected_preferences())}\n"
        f"Allergies: {profile.allergies}\n"
        f"Meals Per Day: {profile.meals_per_day}\n"
        f"Snacks Per Day: {profile.snacks_per_day}\n"
        f"Approximate Calories intake per Day: {calories:f}\n"
        "\n"
        "Provide daily meal plans from Monday to Sunday. Include details like ingredients, "
        "instructions, and nutrition information for each meal.\n"
        "\n"
        "Respond with one row per meal entry.\n"
        f"{_format_instructions(delimiter)}\n"
        "Ensure all meals align with the user's diet preference and do not contain any "
        "allergens specified."
    )


def build_swap_prompt(request: SwapMealRequest, delimiter: str = ";") -> str:
    meal = request.meal
    return (
        "I need an alternative meal option for the following meal:\n"
        "{\n"
        f"\tDay: {meal.day}\n"
        f"\tMeal Type: {meal.meal_type}\n"
        f"\tIngredients: {meal.ingredients}\n"
        f"\tInstructions: {meal.instructions}\n"
        f"\tNutrition: {meal.nutrition}\n"
        "}\n"
        f"Diet Preference: {', '.join(request.selected_preferences())}\n"
        f"Allergies: {request.allergies}\n"
        f"The new meal should not be any of the following: {', '.join(request.other_meals)}.\n"
        "The new meal should be suitable for the user's diet preference and allergies.\n"
        "\n"
        "Provide exactly one alternative meal with the same day and meal type.\n"
        f"{_format_instructions(delimiter)}"
    )


def initial_conversation(prompt: str) -> List[ConversationTurn]:
    return [
        ConversationTurn(role="system", content=SYSTEM_PROMPT),
        ConversationTurn(role="user", content=prompt),
    ]


def correction_message(error: Exception, delimiter: str = ";") -> str:
    """User turn sent back after a reply could not be parsed."""
    return (
        f"There is an error with your data: {error}. "
        f"Please fix your data so every line has exactly five columns separated by '{delimiter}', "
        "without quotation marks, with no header row and no additional text, and resend it."
    )
