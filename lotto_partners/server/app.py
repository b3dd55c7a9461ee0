from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from lotto_partners.core.gemini import GeminiClient
from lotto_partners.models.config import AppConfig
from lotto_partners.utils.config import get_api_key, get_config
from lotto_partners.utils.logging import get_logger, setup_logging


logger = get_logger("app")


# Global state
_gemini_client: GeminiClient | None = None
_app_config: AppConfig | None = None


def get_gemini_client() -> GeminiClient:
    """Get Gemini client instance."""
    if _gemini_client is None:
        raise RuntimeError("Gemini client not initialized")
    return _gemini_client


def get_app_config() -> AppConfig:
    """Get application config. Loads it directly when the lifespan has not run yet."""
    if _app_config is None:
        return get_config()
    return _app_config


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    global _gemini_client, _app_config

    # Startup
    _app_config = get_config()
    setup_logging(_app_config.logging)
    logger.info("Starting Lotto Stock Partners server...")

    # Missing key aborts startup
    api_key = get_api_key()

    _gemini_client = GeminiClient(
        api_key=api_key,
        config=_app_config.gemini,
        model=_app_config.defaults.model,
    )
    await _gemini_client._get_client()

    logger.info(f"Server configured on {_app_config.server.host}:{_app_config.server.port}, model={_app_config.defaults.model}")

    yield

    # Shutdown
    logger.info("Shutting down Lotto Stock Partners server...")
    if _gemini_client:
        await _gemini_client.close()
        _gemini_client = None
    logger.info("Server stopped")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title="Lotto Stock Partners",
        description="Lotto draws and a completion proxy for the Gemini API",
        version="0.1.0",
        lifespan=lifespan,
    )

    from lotto_partners.api.routes import health, lotto, proxy

    config = get_config()

    app.include_router(health.router, prefix=config.server.api_prefix)
    app.include_router(lotto.router, prefix=config.server.api_prefix)
    app.include_router(proxy.router, prefix=config.server.api_prefix)

    return app
