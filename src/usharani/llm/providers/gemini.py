"""Google Gemini completion client over the public REST API.

Talks to ``generateContent`` directly with httpx so that the request body
and the ``?key=`` query parameter are exactly what the endpoint documents.
Reference: https://ai.google.dev/api/generate-content

Note: the API key may be empty. Hosting environments that proxy the
endpoint inject credentials out-of-band.
"""

from typing import Any

import httpx

from ..base import CompletionClient

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiClient(CompletionClient):
    """Google Gemini completion client.

    Hidden design decisions:
    - Endpoint URL construction from base URL and model name
    - Credential placement (``key`` query parameter)
    - No timeout and no retries: one POST per call, awaited to completion
    """

    def __init__(
        self,
        api_key: str = "",
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        endpoint: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize Gemini client.

        Args:
            api_key: Google AI API key (may be empty)
            model: Model name used to build the endpoint URL
            base_url: API base URL
            endpoint: Full endpoint URL, overrides base_url and model
            **client_kwargs: Additional kwargs for httpx.AsyncClient
                (e.g. ``transport`` in tests)
        """
        self._api_key = api_key
        self._model = model
        self._endpoint = endpoint or f"{base_url.rstrip('/')}/models/{model}:generateContent"
        client_kwargs.setdefault("timeout", None)
        self._client = httpx.AsyncClient(**client_kwargs)
        self._last_status: int | None = None

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    @property
    def endpoint(self) -> str:
        """Get the endpoint URL (without the key parameter)."""
        return self._endpoint

    @property
    def last_status(self) -> int | None:
        """HTTP status of the most recent response, if any."""
        return self._last_status

    async def generate_content(self, payload: dict[str, Any]) -> Any:
        """POST the payload and return the parsed JSON body.

        The HTTP status is not checked: error bodies are returned like any
        other JSON so the caller can classify them.

        Args:
            payload: Request body

        Returns:
            Parsed JSON response

        Raises:
            httpx.HTTPError: On network failures
            ValueError: If the body is not JSON
        """
        response = await self._client.post(
            self._endpoint,
            params={"key": self._api_key},
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        self._last_status = response.status_code
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
