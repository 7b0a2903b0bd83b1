from .base import CompletionClient
from .factory import create_completion_client
from .models import (
    Content,
    GenerateContentRequest,
    Part,
    extract_reply_text,
)
from .providers import GeminiClient

__all__ = [
    "CompletionClient",
    "create_completion_client",
    "Content",
    "GenerateContentRequest",
    "Part",
    "extract_reply_text",
    "GeminiClient",
]
