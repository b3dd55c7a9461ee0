from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GeminiModel(BaseModel):
    """Base for Gemini REST payloads (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class Part(GeminiModel):
    """Single part of a content turn. Non-text parts pass through as extras."""

    text: str | None = None
    thought: bool | None = None


class Content(GeminiModel):
    """One conversation turn."""

    role: str | None = None
    parts: list[Part] = Field(default_factory=list)


class GenerateContentRequest(GeminiModel):
    """Request to the models/{model}:generateContent endpoint."""

    contents: list[Content]
    generation_config: dict[str, Any] | None = None
    system_instruction: Content | None = None
    safety_settings: list[dict[str, Any]] | None = None
    tools: list[dict[str, Any]] | None = None
    tool_config: dict[str, Any] | None = None
    cached_content: str | None = None
    labels: dict[str, str] | None = None


class Candidate(GeminiModel):
    """Single candidate in a generateContent response."""

    content: Content | None = None
    finish_reason: str | None = None
    index: int = 0


class UsageMetadata(GeminiModel):
    """Token usage reported by the provider."""

    prompt_token_count: int = 0
    candidates_token_count: int = 0
    total_token_count: int = 0


class GenerateContentResponse(GeminiModel):
    """Response from the generateContent endpoint."""

    candidates: list[Candidate] = Field(default_factory=list)
    usage_metadata: UsageMetadata | None = None
    model_version: str | None = None

    @property
    def text(self) -> str | None:
        """Concatenated text of the first candidate, skipping thought parts."""
        if not self.candidates:
            return None

        content = self.candidates[0].content
        if content is None:
            return None

        texts = [
            part.text
            for part in content.parts
            if part.text is not None and not part.thought
        ]
        if not texts:
            return None
        return "".join(texts)
