# -*- coding: utf-8 -*-
"""Meals — chat completion client and the corrective retry loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, TypeVar

import httpx
from pydantic import ValidationError

from ..errors import EmptyResponseError, MealPlanError, ParseError, RetryExhausted, TransportError
from .models import CompletionRequest, CompletionResponse, ConversationTurn
from .prompts import correction_message

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CompletionClient:
    """Thin synchronous wrapper over an OpenAI-compatible chat completion endpoint."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        api_url: str,
        timeout: float,
        temperature: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.model = model
        self.api_url = api_url
        self.temperature = temperature
        self._client = httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "CompletionClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def complete(self, conversation: List[ConversationTurn]) -> str:
        """Submit the conversation and return the first choice's content.

        Raises:
            TransportError: the call failed, returned an error status, or the
                body is not a chat completion.
            EmptyResponseError: no choice carried any content.
        """
        request = CompletionRequest(
            model=self.model,
            messages=list(conversation),
            temperature=self.temperature,
        )
        payload = request.model_dump(exclude_none=True)
        try:
            resp = self._client.post(self.api_url, json=payload)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            snippet = (exc.response.text or "").replace("\n", " ").strip()[:200]
            raise TransportError(
                f"Completion API returned {exc.response.status_code}: {snippet}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Error making request: {exc}") from exc

        try:
            data = CompletionResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise TransportError(f"Error decoding response body: {exc}") from exc

        content = data.first_content()
        if not content.strip():
            raise EmptyResponseError()
        return content


@dataclass
class RetryOutcome(Generic[T]):
    result: T
    attempts: int
    conversation: List[ConversationTurn] = field(default_factory=list)


def complete_with_retries(
    client: CompletionClient,
    conversation: List[ConversationTurn],
    parse: Callable[[str], T],
    max_attempts: int,
    delimiter: str = ";",
) -> RetryOutcome[T]:
    """Call the completion API until ``parse`` accepts a reply.

    Transport failures and empty replies are retried with the conversation
    untouched. A reply that fails to parse is appended to the conversation
    together with a corrective user turn, so the next attempt sees its own
    mistake. ``conversation`` is extended in place.

    Raises:
        RetryExhausted: ``max_attempts`` calls were made without a parseable
            reply; carries the last underlying error.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    last_error: Optional[MealPlanError] = None
    for attempt in range(1, max_attempts + 1):
        try:
            content = client.complete(conversation)
        except (TransportError, EmptyResponseError) as exc:
            last_error = exc
            logger.warning("%s, retrying (%d/%d)", exc, attempt, max_attempts)
            continue

        logger.debug("completion reply (attempt %d): %s", attempt, content)
        try:
            result = parse(content)
        except ParseError as exc:
            last_error = exc
            logger.warning("Error handling meal data, retrying (%d/%d): %s", attempt, max_attempts, exc)
            conversation.append(ConversationTurn(role="assistant", content=content))
            conversation.append(
                ConversationTurn(role="user", content=correction_message(exc, delimiter))
            )
            continue

        return RetryOutcome(result=result, attempts=attempt, conversation=conversation)

    raise RetryExhausted(max_attempts, last_error)
