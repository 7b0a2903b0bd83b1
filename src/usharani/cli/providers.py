"""Client factory for the CLI.

Centralizes creation of the completion client from environment variables.
Hides configuration details from command implementations.
"""

import os

from ..llm import CompletionClient, create_completion_client
from ..llm.providers.gemini import DEFAULT_MODEL


def get_model_name() -> str:
    """Model name from GEMINI_MODEL (default: gemini-2.0-flash)."""
    return os.getenv("GEMINI_MODEL", DEFAULT_MODEL)


def get_client() -> CompletionClient:
    """Create the completion client from environment variables.

    Returns:
        Gemini completion client

    Environment variables:
        GEMINI_API_KEY: API key (default: empty, injected by the host)
        GEMINI_MODEL: Model name (default: gemini-2.0-flash)
        GEMINI_ENDPOINT: Full endpoint URL, overrides the model-based URL
    """
    config = {
        "api_key": os.getenv("GEMINI_API_KEY", ""),
        "model": get_model_name(),
    }
    endpoint = os.getenv("GEMINI_ENDPOINT")
    if endpoint:
        config["endpoint"] = endpoint
    return create_completion_client("gemini", **config)
