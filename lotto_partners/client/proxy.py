from typing import Any

import httpx

from lotto_partners.models.config import ClientConfig
from lotto_partners.utils.logging import get_logger


logger = get_logger("client.proxy")


class ProxyRequestError(Exception):
    """Completion proxy call failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CompletionProxyClient:
    """Async client for the completion proxy endpoint."""

    def __init__(self, config: ClientConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers={"Content-Type": "application/json"},
                timeout=httpx.Timeout(self.config.timeout_sec),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def complete(self, contents: Any, config: dict[str, Any] | None = None) -> str:
        """
        Send a prompt through the proxy.

        Args:
            contents: Prompt payload
            config: Optional generation options

        Returns:
            The ``text`` field of the proxy response

        Raises:
            ProxyRequestError: On transport failure or a non-success status
        """
        client = await self._get_client()

        payload: dict[str, Any] = {"contents": contents}
        if config is not None:
            payload["config"] = config

        try:
            response = await client.post(self.config.proxy_path, json=payload)
            response.raise_for_status()
            text = response.json()["text"]
            if not isinstance(text, str):
                raise TypeError(f"text must be a string, got {type(text).__name__}")
            return text

        except httpx.HTTPStatusError as e:
            logger.error(f"Proxy returned {e.response.status_code}: {e.response.text}")
            raise ProxyRequestError(
                "API request failed",
                status_code=e.response.status_code,
            ) from e

        except httpx.RequestError as e:
            logger.error(f"Request error: {e}")
            raise ProxyRequestError(f"Request failed: {e}") from e

        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Malformed proxy response: {e}")
            raise ProxyRequestError(f"Malformed proxy response: {e}") from e

    async def __aenter__(self) -> "CompletionProxyClient":
        await self._get_client()
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
