"""Pytest configuration and shared fixtures."""
import asyncio
import os
from typing import Any

import pytest

from usharani.llm import CompletionClient

HELLO_BODY = {"candidates": [{"content": {"parts": [{"text": "Hello!"}]}}]}


def reply_body(text: str) -> dict[str, Any]:
    """Build a well-formed generateContent response."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class FakeCompletionClient(CompletionClient):
    """In-memory completion client.

    Returns queued bodies in order (an empty object once exhausted).
    Queued exception instances are raised instead of returned.
    Set ``gate`` to hold every request until the event is set.
    """

    def __init__(self, *responses: Any) -> None:
        self._responses = list(responses)
        self.payloads: list[dict[str, Any]] = []
        self.gate: asyncio.Event | None = None
        self.closed = False

    async def generate_content(self, payload: dict[str, Any]) -> Any:
        self.payloads.append(payload)
        if self.gate is not None:
            await self.gate.wait()
        response = self._responses.pop(0) if self._responses else {}
        if isinstance(response, BaseException):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "gemini": os.getenv("GEMINI_API_KEY"),
    }


@pytest.fixture
def hello_client():
    """Client that answers "Hello!" once."""
    return FakeCompletionClient(HELLO_BODY)
