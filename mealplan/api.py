# -*- coding: utf-8 -*-
"""
Meal plan backend API

Turns a dietary profile into a weekly meal plan via a chat completion API.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import settings
from .errors import DecodeError, MealPlanError
from .meals.api import router as meals_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Meal Plan Backend",
    description="Weekly meal plans and meal swaps generated by a chat completion model",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["POST", "GET"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.exception_handler(MealPlanError)
async def _meal_plan_error(request: Request, exc: MealPlanError) -> PlainTextResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return exc.to_response()


@app.exception_handler(RequestValidationError)
async def _decode_error(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    stage = "getting user onboarding data" if request.url.path == "/get-meal-data" else "decoding request body"
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )
    return await _meal_plan_error(request, DecodeError(f"Error {stage}: {details}"))


app.include_router(meals_router)


@app.get("/health")
def health() -> dict:
    return {"ok": True}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        port = int(settings.port_raw)
    except Exception:
        port = 8080

    logger.info("Server starting on %s:%d", settings.host, port)
    uvicorn.run("mealplan.api:app", host=settings.host, port=port, reload=False)
