from typing import Any

import httpx
from pydantic import ValidationError

from lotto_partners.core.message_builder import build_generate_request
from lotto_partners.models.config import GeminiConfig
from lotto_partners.models.gemini import GenerateContentRequest, GenerateContentResponse
from lotto_partners.utils.logging import get_logger


logger = get_logger("gemini")


class GeminiError(Exception):
    """Gemini API error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GeminiClient:
    """Async client for the Gemini generateContent API."""

    def __init__(
        self,
        api_key: str,
        config: GeminiConfig,
        model: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.config = config
        self.model = model
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers={
                    "x-goog-api-key": self.api_key,
                    "Content-Type": "application/json",
                },
                timeout=httpx.Timeout(self.config.timeout_sec),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def generate_content(
        self, request: GenerateContentRequest
    ) -> GenerateContentResponse:
        """Send a single generateContent request. Failures are not retried."""
        client = await self._get_client()

        request_data = request.model_dump(by_alias=True, exclude_none=True)

        try:
            response = await client.post(
                f"/models/{self.model}:generateContent",
                json=request_data,
            )
            response.raise_for_status()
            return GenerateContentResponse.model_validate(response.json())

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error {e.response.status_code}: {e.response.text}")
            raise GeminiError(
                f"Gemini API error: {e.response.text}",
                status_code=e.response.status_code,
            ) from e

        except httpx.RequestError as e:
            logger.error(f"Request error: {e}")
            raise GeminiError(f"Request failed: {e}") from e

        except (ValueError, ValidationError) as e:
            logger.error(f"Malformed provider response: {e}")
            raise GeminiError(f"Malformed provider response: {e}") from e

    async def generate_text(
        self,
        contents: Any,
        config: dict[str, Any] | None = None,
    ) -> str:
        """
        Forward a prompt to the model and return only its text.

        Args:
            contents: Prompt payload (text or provider content structure)
            config: Optional generation options, passed through untouched

        Returns:
            Response text, or an empty string when the model returned none

        Raises:
            GeminiError: On any request, provider, or decoding failure
        """
        try:
            request = build_generate_request(contents, config)
        except ValueError as e:
            raise GeminiError(f"Invalid request payload: {e}") from e

        response = await self.generate_content(request)
        return response.text or ""

    async def __aenter__(self) -> "GeminiClient":
        await self._get_client()
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
