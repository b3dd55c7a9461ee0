import json

import pytest

from lotto_partners.utils.config import get_api_key, load_config


def test_defaults_without_config_file(tmp_path):
    config = load_config(tmp_path / "missing.json")

    assert config.defaults.model == "gemini-2.5-flash"
    assert config.server.api_prefix == "/api"
    assert config.client.proxy_path == "/api/gemini"


def test_config_file_overrides(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"server": {"port": 9000}, "defaults": {"model": "gemini-2.5-pro"}}),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.server.port == 9000
    assert config.defaults.model == "gemini-2.5-pro"
    assert config.gemini.timeout_sec == 120

    # Restore defaults for other tests
    load_config(tmp_path / "missing.json")


def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("API_KEY", "secret")

    assert get_api_key() == "secret"


def test_missing_api_key_raises(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)

    with pytest.raises(ValueError, match="API_KEY environment variable not set"):
        get_api_key()
