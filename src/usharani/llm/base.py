from abc import ABC, abstractmethod
from typing import Any


class CompletionClient(ABC):
    """Abstract base class for completion endpoint clients.

    This module hides the design decision of which completion service is used.
    Implementations must handle provider-specific details like:
    - HTTP client setup
    - Endpoint URL and credential placement
    - Transport of the JSON request body

    Implementations do NOT interpret the response: they return the parsed
    JSON body as-is and let the caller classify its structure.

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            body = await client.generate_content(payload)
        # Automatically cleaned up
    """

    @abstractmethod
    async def generate_content(self, payload: dict[str, Any]) -> Any:
        """Send one completion request.

        Args:
            payload: JSON-serializable request body

        Returns:
            The parsed JSON response body (any JSON value)

        Raises:
            httpx.HTTPError: On transport failures
            ValueError: If the response body is not valid JSON
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "CompletionClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
