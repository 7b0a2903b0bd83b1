"""Wire models for the Gemini ``generateContent`` endpoint.

Request models are strict and frozen. Responses are not modeled as a whole:
only the path to the reply text is walked, and the part found there is
validated with the same ``Part`` model the request uses.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class Part(BaseModel):
    """A single piece of content."""

    model_config = ConfigDict(frozen=True)

    text: str | None = Field(default=None, description="Text of this part")


class Content(BaseModel):
    """A turn of content with its author role."""

    model_config = ConfigDict(frozen=True)

    role: str | None = Field(default=None, description="'user' or 'model'")
    parts: list[Part] | None = Field(default=None, description="Content parts")


class GenerateContentRequest(BaseModel):
    """Request body for a single-turn completion."""

    model_config = ConfigDict(frozen=True)

    contents: list[Content]

    @classmethod
    def single_turn(cls, text: str) -> "GenerateContentRequest":
        """Build a request holding only the given user text."""
        return cls(contents=[Content(role="user", parts=[Part(text=text)])])

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body sent on the wire."""
        return self.model_dump(exclude_none=True)


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def extract_reply_text(body: Any) -> str | None:
    """Return the first candidate's first part text, or None.

    Only the ``candidates[0].content.parts[0].text`` path is inspected.
    Other candidates, later parts and sibling fields are never validated.
    None means that path is missing or its text is not a string.
    """
    candidate = _first(body.get("candidates")) if isinstance(body, dict) else None
    content = candidate.get("content") if isinstance(candidate, dict) else None
    part = _first(content.get("parts")) if isinstance(content, dict) else None
    if part is None:
        return None

    try:
        return Part.model_validate(part).text
    except ValidationError:
        return None
