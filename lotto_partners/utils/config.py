import json
import os
from pathlib import Path

from dotenv import load_dotenv

from lotto_partners.models.config import AppConfig


API_KEY_ENV = "API_KEY"

_config: AppConfig | None = None


def get_project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent.parent


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load configuration from JSON file and environment variables."""
    global _config

    if config_path is None:
        config_path = get_project_root() / "config.json"

    # Load .env file
    env_path = get_project_root() / ".env"
    load_dotenv(env_path)

    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        _config = AppConfig.model_validate(data)
    else:
        _config = AppConfig()

    return _config


def get_config() -> AppConfig:
    """Get current configuration. Loads from file if not already loaded."""
    if _config is None:
        return load_config()
    return _config


def get_api_key() -> str:
    """Get the generative API key from environment."""
    key = os.getenv(API_KEY_ENV, "")
    if not key:
        raise ValueError(f"{API_KEY_ENV} environment variable not set")
    return key
