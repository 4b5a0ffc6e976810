# -*- coding: utf-8 -*-
"""Meals — API endpoints."""

from __future__ import annotations

import logging
from functools import partial
from typing import Iterator

from fastapi import APIRouter, Depends

from ..config import settings
from ..errors import ConfigError
from .completion import CompletionClient, complete_with_retries
from .models import MealPlanResponse, MealRecord, SwapMealRequest, SwapMealResponse, UserProfile
from .parser import parse_meal_records, parse_single_meal
from .prompts import build_meal_plan_prompt, build_swap_prompt, initial_conversation

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Meals"])


def get_completion_client() -> Iterator[CompletionClient]:
    """One completion client per request; fails fast without a credential."""
    api_key = settings.openai_api_key
    if not api_key:
        raise ConfigError()
    client = CompletionClient(
        api_key=api_key,
        model=settings.openai_model,
        api_url=settings.openai_api_url,
        timeout=settings.openai_timeout,
        temperature=settings.openai_temperature,
    )
    try:
        yield client
    finally:
        client.close()


@router.post("/get-meal-data", response_model=MealPlanResponse, summary="Generate a weekly meal plan")
def get_meal_data(profile: UserProfile, client: CompletionClient = Depends(get_completion_client)):
    delimiter = settings.delimiter
    prompt = build_meal_plan_prompt(profile, delimiter)
    logger.debug("meal plan prompt: %s", prompt)

    outcome = complete_with_retries(
        client,
        initial_conversation(prompt),
        partial(parse_meal_records, expected_fields=MealRecord.FIELD_COUNT, delimiter=delimiter),
        max_attempts=settings.meal_plan_max_attempts,
        delimiter=delimiter,
    )
    logger.info("meal plan ready: %d meals after %d attempt(s)", len(outcome.result), outcome.attempts)
    return MealPlanResponse(meal=outcome.result)


@router.post("/swap-meal", response_model=SwapMealResponse, summary="Replace a single meal")
def swap_meal(request: SwapMealRequest, client: CompletionClient = Depends(get_completion_client)):
    delimiter = settings.delimiter
    prompt = build_swap_prompt(request, delimiter)
    logger.debug("swap prompt: %s", prompt)

    outcome = complete_with_retries(
        client,
        initial_conversation(prompt),
        partial(parse_single_meal, expected_fields=MealRecord.FIELD_COUNT, delimiter=delimiter),
        max_attempts=settings.swap_meal_max_attempts,
        delimiter=delimiter,
    )
    return SwapMealResponse(
        old_meal_ingredients=request.meal.ingredients,
        new_meal=outcome.result,
    )
