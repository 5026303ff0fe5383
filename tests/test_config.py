"""
Tests for configuration loading and validation.
"""

import json

import pytest

from src.smartrice.core import Config


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in [
        "CONFIG_FILE",
        "SMARTRICE_API_URL",
        "SMARTRICE_API_KEY",
        "SMARTRICE_ACCESS_TOKEN",
        "SMARTRICE_TIMEZONE",
        "ENVIRONMENT",
    ]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def api_config():
    return {
        "source": "api",
        "api": {"base_url": "https://example.supabase.co", "timeout": 10, "max_retries": 2},
        "authentication": {"api_key": "anon-key"},
    }


class TestConfig:
    """Test cases for Config."""

    def test_api_config(self, tmp_path, api_config):
        config = Config(write_config(tmp_path, api_config))

        assert config.source == "api"
        assert config.api_base_url == "https://example.supabase.co"
        assert config.api_timeout == 10
        assert config.api_max_retries == 2
        assert config.api_verify_ssl is True
        assert config.api_key == "anon-key"
        assert config.access_token is None
        assert config.timezone == "Asia/Manila"
        assert config.duplicate_policy == "last"

    def test_files_config(self, tmp_path):
        config = Config(write_config(tmp_path, {
            "source": "files",
            "files": {"rainfall": "rain.json", "planting_logs": "planting.json"},
            "processing": {"duplicate_policy": "sum", "timezone": "UTC"},
        }))

        assert config.rainfall_file == "rain.json"
        assert config.planting_logs_file == "planting.json"
        assert config.harvest_logs_file is None
        assert config.duplicate_policy == "sum"
        assert config.timezone == "UTC"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "absent.json"))

    def test_missing_api_key(self, tmp_path, api_config):
        del api_config["authentication"]["api_key"]
        with pytest.raises(ValueError, match="authentication.api_key"):
            Config(write_config(tmp_path, api_config))

    def test_missing_section(self, tmp_path, api_config):
        del api_config["api"]
        with pytest.raises(ValueError, match="api"):
            Config(write_config(tmp_path, api_config))

    def test_files_require_logs(self, tmp_path):
        with pytest.raises(ValueError, match="harvest_logs"):
            Config(write_config(tmp_path, {"source": "files", "files": {"rainfall": "rain.json"}}))

    def test_invalid_source(self, tmp_path):
        with pytest.raises(ValueError, match="source"):
            Config(write_config(tmp_path, {"source": "ftp"}))

    def test_invalid_duplicate_policy(self, tmp_path, api_config):
        api_config["processing"] = {"duplicate_policy": "average"}
        with pytest.raises(ValueError, match="duplicate_policy"):
            Config(write_config(tmp_path, api_config))

    def test_invalid_timezone(self, tmp_path, api_config):
        api_config["processing"] = {"timezone": "Nowhere/Place"}
        with pytest.raises(ValueError, match="timezone"):
            Config(write_config(tmp_path, api_config))

    def test_environment_overrides(self, tmp_path, monkeypatch, api_config):
        del api_config["authentication"]
        monkeypatch.setenv("SMARTRICE_API_KEY", "env-key")
        monkeypatch.setenv("SMARTRICE_ACCESS_TOKEN", "user-token")
        monkeypatch.setenv("SMARTRICE_API_URL", "https://other.supabase.co")
        monkeypatch.setenv("SMARTRICE_TIMEZONE", "UTC")

        config = Config(write_config(tmp_path, api_config))

        assert config.api_key == "env-key"
        assert config.access_token == "user-token"
        assert config.api_base_url == "https://other.supabase.co"
        assert config.timezone == "UTC"

    def test_config_file_env_var(self, tmp_path, monkeypatch, api_config):
        monkeypatch.setenv("CONFIG_FILE", write_config(tmp_path, api_config))
        assert Config().api_key == "anon-key"

    def test_get_dot_notation(self, tmp_path, api_config):
        config = Config(write_config(tmp_path, api_config))

        assert config.get("api.timeout") == 10
        assert config.get("api.missing", "fallback") == "fallback"
        assert config.get("api.timeout.deeper") is None
