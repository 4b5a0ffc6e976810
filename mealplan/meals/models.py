# -*- coding: utf-8 -*-
"""Meals — Pydantic models."""

from __future__ import annotations

from typing import ClassVar, Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


def _selected(preferences: Dict[str, bool]) -> List[str]:
    return sorted(name for name, chosen in preferences.items() if chosen)


class UserProfile(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    purpose: str = Field(
        "",
        validation_alias=AliasChoices("primaryPurpose", "purpose"),
        description="e.g. 'Gain Muscle', 'Lose Weight', 'Maintain Weight'",
    )
    height: float = Field(0.0, description="Height in cm")
    weight: float = Field(0.0, description="Weight in kg")
    gender: str = ""
    diet_preference: Dict[str, bool] = Field(default_factory=dict, alias="dietPreference")
    fitness_level: str = Field("", alias="fitnessLevel")
    allergies: str = ""
    meals_per_day: int = Field(0, ge=0, alias="mealsPerDay")
    snacks_per_day: int = Field(0, ge=0, alias="snacksPerDay")

    def selected_preferences(self) -> List[str]:
        return _selected(self.diet_preference)


class MealRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    FIELD_COUNT: ClassVar[int] = 5

    day: str
    meal_type: str = Field(..., alias="mealType")
    ingredients: str
    instructions: str
    nutrition: str

    @classmethod
    def from_row(cls, row: List[str]) -> "MealRecord":
        """Build a record from the first five columns of a parsed row."""
        day, meal_type, ingredients, instructions, nutrition = row[: cls.FIELD_COUNT]
        return cls(
            day=day,
            meal_type=meal_type,
            ingredients=ingredients,
            instructions=instructions,
            nutrition=nutrition,
        )


class SwapMealRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    meal: MealRecord
    other_meals: List[str] = Field(default_factory=list, alias="otherMeals")
    diet_preference: Dict[str, bool] = Field(default_factory=dict, alias="dietPreference")
    allergies: str = ""

    def selected_preferences(self) -> List[str]:
        return _selected(self.diet_preference)


class MealPlanResponse(BaseModel):
    meal: List[MealRecord] = []


class SwapMealResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    old_meal_ingredients: str = Field(..., alias="oldMealIngredients")
    new_meal: MealRecord = Field(..., alias="newMeal")


# ---- Completion API wire format ----


class ConversationTurn(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class CompletionRequest(BaseModel):
    model: str
    messages: List[ConversationTurn]
    temperature: Optional[float] = None


class CompletionMessage(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None


class CompletionChoice(BaseModel):
    index: int = 0
    message: CompletionMessage = CompletionMessage()


class CompletionResponse(BaseModel):
    choices: List[CompletionChoice] = []

    def first_content(self) -> str:
        if not self.choices:
            return ""
        return self.choices[0].message.content or ""
