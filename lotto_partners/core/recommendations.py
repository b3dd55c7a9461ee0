import json

from pydantic import BaseModel, TypeAdapter, ValidationError


class Recommendation(BaseModel):
    """Affiliate product suggestion."""

    name: str
    description: str


class RecommendationError(Exception):
    """Provider text could not be read as recommendations."""
    pass


_recommendations_adapter = TypeAdapter(list[Recommendation])


def parse_recommendations(text: str) -> list[Recommendation]:
    """
    Parse the JSON array produced under RECOMMENDATION_CONFIG.

    The number of items is whatever the provider returned.

    Raises:
        RecommendationError: If the text is not JSON or items lack name/description
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise RecommendationError(f"Recommendations are not valid JSON: {e}") from e

    try:
        return _recommendations_adapter.validate_python(data)
    except ValidationError as e:
        raise RecommendationError(f"Unexpected recommendations shape: {e}") from e
