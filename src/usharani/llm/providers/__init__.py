from .gemini import GeminiClient

__all__ = ["GeminiClient"]
