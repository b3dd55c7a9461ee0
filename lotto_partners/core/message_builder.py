from typing import Any

from lotto_partners.models.gemini import Content, GenerateContentRequest, Part


# Config keys that live at the top level of a generateContent request
REQUEST_LEVEL_KEYS = {
    "systemInstruction": "system_instruction",
    "safetySettings": "safety_settings",
    "tools": "tools",
    "toolConfig": "tool_config",
    "cachedContent": "cached_content",
    "labels": "labels",
}

# Client-side options with no wire representation
DROPPED_KEYS = {"httpOptions", "abortSignal"}


def _to_part(value: Any) -> Part:
    if isinstance(value, str):
        return Part(text=value)
    if isinstance(value, dict):
        return Part.model_validate(value)
    raise ValueError(f"Unsupported part type: {type(value).__name__}")


def _is_content(value: Any) -> bool:
    return isinstance(value, dict) and "parts" in value


def _to_content(value: Any) -> Content:
    if isinstance(value, str):
        return Content(parts=[Part(text=value)])
    if isinstance(value, dict):
        return Content.model_validate(value)
    raise ValueError(f"Unsupported system instruction type: {type(value).__name__}")


def build_contents(contents: Any) -> list[Content]:
    """
    Normalize a proxy ``contents`` payload into provider content turns.

    Args:
        contents: Text, a single content or part dict, or a list of either

    Returns:
        List of Content turns ready for the request body

    Raises:
        ValueError: If the payload has an unsupported shape
    """
    if isinstance(contents, str):
        return [Content(role="user", parts=[Part(text=contents)])]

    if isinstance(contents, dict):
        if _is_content(contents):
            return [Content.model_validate(contents)]
        return [Content(role="user", parts=[_to_part(contents)])]

    if isinstance(contents, list):
        if not contents:
            raise ValueError("contents must not be an empty list")
        if all(_is_content(item) for item in contents):
            return [Content.model_validate(item) for item in contents]
        return [Content(role="user", parts=[_to_part(item) for item in contents])]

    raise ValueError(f"Unsupported contents type: {type(contents).__name__}")


def build_generate_request(
    contents: Any,
    config: dict[str, Any] | None = None,
) -> GenerateContentRequest:
    """
    Build a generateContent request from proxy ``contents`` and ``config``.

    Generation options go to ``generationConfig``; request-level keys such
    as ``systemInstruction`` and ``tools`` are lifted to the top level.
    """
    fields: dict[str, Any] = {"contents": build_contents(contents)}
    generation_config: dict[str, Any] = {}

    for key, value in (config or {}).items():
        if key in DROPPED_KEYS or value is None:
            continue
        if key == "systemInstruction":
            fields["system_instruction"] = _to_content(value)
        elif key in REQUEST_LEVEL_KEYS:
            fields[REQUEST_LEVEL_KEYS[key]] = value
        else:
            generation_config[key] = value

    if generation_config:
        fields["generation_config"] = generation_config

    return GenerateContentRequest(**fields)
