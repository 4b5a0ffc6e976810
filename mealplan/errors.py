"""
Error taxonomy for the meal plan backend.

Every error renders as a plain-text HTTP response naming the stage that failed.
"""

from __future__ import annotations

from typing import Optional

from fastapi import status
from fastapi.responses import PlainTextResponse


class MealPlanError(Exception):
    """Base class for errors surfaced to API callers."""

    retryable = False

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_response(self) -> PlainTextResponse:
        return PlainTextResponse(self.message, status_code=self.status_code)


class ConfigError(MealPlanError):
    """Raised when the completion API credential is not configured."""

    def __init__(self, message: str = "API key not set in environment variables"):
        super().__init__(message)


class DecodeError(MealPlanError):
    """Raised when an inbound request body cannot be decoded."""


class TransportError(MealPlanError):
    """Raised when the completion API call fails or returns an unreadable body."""

    retryable = True


class EmptyResponseError(MealPlanError):
    """Raised when the completion API returns no usable content."""

    retryable = True

    def __init__(self, message: str = "No content found in response"):
        super().__init__(message)


class ParseError(MealPlanError):
    """Raised when model output does not yield well-formed meal records."""

    retryable = True


class RetryExhausted(MealPlanError):
    """Raised when every completion attempt failed."""

    def __init__(self, attempts: int, last_error: Optional[Exception]):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"Error after {attempts} attempts: {last_error}")
