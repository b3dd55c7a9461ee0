import json
from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from lotto_partners.core.gemini import GeminiClient
from lotto_partners.models.config import GeminiConfig
from lotto_partners.server.app import create_app, get_gemini_client


def gemini_payload(text: str) -> dict:
    """Minimal generateContent response carrying ``text``."""
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": "STOP",
                "index": 0,
            }
        ],
        "usageMetadata": {"promptTokenCount": 3, "candidatesTokenCount": 1, "totalTokenCount": 4},
        "modelVersion": "gemini-2.5-flash",
    }


class StubProvider:
    """Records provider requests and answers them with a fixed reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.reply: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json=gemini_payload("world")
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.reply(request)

    def bodies(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def gemini_client(provider: StubProvider) -> GeminiClient:
    return GeminiClient(
        api_key="test-key",
        config=GeminiConfig(),
        model="gemini-2.5-flash",
        transport=httpx.MockTransport(provider),
    )


@pytest.fixture
def app(gemini_client: GeminiClient):
    app = create_app()
    app.dependency_overrides[get_gemini_client] = lambda: gemini_client
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
