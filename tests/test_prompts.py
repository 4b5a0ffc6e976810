# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from mealplan.errors import ParseError
from mealplan.meals.calories import caloric_intake
from mealplan.meals.models import MealRecord, SwapMealRequest, UserProfile
from mealplan.meals.prompts import (
    SYSTEM_PROMPT,
    build_meal_plan_prompt,
    build_swap_prompt,
    correction_message,
    initial_conversation,
)


def _profile() -> UserProfile:
    return UserProfile.model_validate(
        {
            "primaryPurpose": "Gain Muscle",
            "height": 170,
            "weight": 70.5,
            "gender": "male",
            "dietPreference": {"vegan": True, "glutenFree": True, "keto": False},
            "fitnessLevel": "Beginner",
            "allergies": "peanuts",
            "mealsPerDay": 3,
            "snacksPerDay": 2,
        }
    )


class TestMealPlanPrompt(unittest.TestCase):
    def test_embeds_profile_details(self) -> None:
        prompt = build_meal_plan_prompt(_profile())
        self.assertIn("Purpose: Gain Muscle\n", prompt)
        self.assertIn("Height: 170 cm\n", prompt)
        self.assertIn("Weight: 70.5 kg\n", prompt)
        self.assertIn("Allergies: peanuts\n", prompt)
        self.assertIn("Meals Per Day: 3\n", prompt)
        self.assertIn("Snacks Per Day: 2\n", prompt)
        self.assertIn("Monday to Sunday", prompt)
        self.assertIn("Do not include a header row", prompt)
        expected = caloric_intake(170, 70.5, "male", "Gain Muscle", "Beginner")
        self.assertIn(f"Approximate Calories intake per Day: {expected:f}\n", prompt)

    def test_preferences_sorted_and_only_selected(self) -> None:
        prompt = build_meal_plan_prompt(_profile())
        self.assertIn("Diet Preference: glutenFree, vegan\n", prompt)
        self.assertNotIn("keto", prompt)

    def test_rendering_is_deterministic(self) -> None:
        self.assertEqual(build_meal_plan_prompt(_profile()), build_meal_plan_prompt(_profile()))

    def test_delimiter_is_named(self) -> None:
        self.assertIn("'|' character", build_meal_plan_prompt(_profile(), delimiter="|"))

    def test_purpose_alias_accepted(self) -> None:
        profile = UserProfile.model_validate({"purpose": "Lose Weight"})
        self.assertEqual(profile.purpose, "Lose Weight")
        self.assertEqual(profile.selected_preferences(), [])


class TestSwapPrompt(unittest.TestCase):
    def test_embeds_meal_and_exclusions(self) -> None:
        request = SwapMealRequest.model_validate(
            {
                "meal": {
                    "day": "Monday",
                    "mealType": "Lunch",
                    "ingredients": "Chicken, rice",
                    "instructions": "Grill",
                    "nutrition": "600 kcal",
                },
                "otherMeals": ["Oatmeal", "Salmon bowl"],
                "dietPreference": {"halal": True, "dairyFree": True},
                "allergies": "shellfish",
            }
        )
        prompt = build_swap_prompt(request)
        self.assertIn("\tMeal Type: Lunch\n", prompt)
        self.assertIn("\tIngredients: Chicken, rice\n", prompt)
        self.assertIn("Diet Preference: dairyFree, halal\n", prompt)
        self.assertIn("Allergies: shellfish\n", prompt)
        self.assertIn("should not be any of the following: Oatmeal, Salmon bowl.", prompt)
        self.assertIn("exactly one alternative meal", prompt)


class TestConversation(unittest.TestCase):
    def test_initial_conversation(self) -> None:
        turns = initial_conversation("hello")
        self.assertEqual([t.role for t in turns], ["system", "user"])
        self.assertEqual(turns[0].content, SYSTEM_PROMPT)
        self.assertEqual(turns[1].content, "hello")

    def test_correction_message_describes_error(self) -> None:
        msg = correction_message(ParseError("no records found in response"))
        self.assertIn("no records found in response", msg)
        self.assertIn("';'", msg)
        self.assertIn("without quotation marks", msg)

    def test_meal_record_serializes_camel_case(self) -> None:
        meal = MealRecord(day="Mon", meal_type="Snack", ingredients="a", instructions="b", nutrition="c")
        self.assertEqual(meal.model_dump(by_alias=True)["mealType"], "Snack")


if __name__ == "__main__":
    unittest.main()
