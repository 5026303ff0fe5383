"""
Configuration module for the SmartRice comparison library.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

import pytz

from . import constants

SOURCES = ("api", "files")
DUPLICATE_POLICIES = ("last", "sum", "reject")


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("SMARTRICE_API_URL"):
            self.config.setdefault("api", {})["base_url"] = os.getenv("SMARTRICE_API_URL")

        if os.getenv("SMARTRICE_API_KEY"):
            self.config.setdefault("authentication", {})["api_key"] = os.getenv("SMARTRICE_API_KEY")

        if os.getenv("SMARTRICE_ACCESS_TOKEN"):
            self.config.setdefault("authentication", {})["access_token"] = os.getenv(
                "SMARTRICE_ACCESS_TOKEN"
            )

        if os.getenv("SMARTRICE_TIMEZONE"):
            self.config.setdefault("processing", {})["timezone"] = os.getenv("SMARTRICE_TIMEZONE")

        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present."""
        source = self.source
        if source not in SOURCES:
            raise ValueError(
                f"Invalid source '{source}' (expected one of: {', '.join(SOURCES)})"
            )

        if source == "api":
            required_config = {
                "api": ["base_url", "timeout", "max_retries"],
                "authentication": ["api_key"],
            }
        else:
            required_config = {
                "files": ["rainfall"],
            }

        missing_sections = [
            section for section in required_config if section not in self.config
        ]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if self.config[section].get(key) in (None, ""):
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        if source == "files":
            files = self.config["files"]
            if not files.get("harvest_logs") and not files.get("planting_logs"):
                raise ValueError(
                    "File configuration must include 'harvest_logs' or 'planting_logs'"
                )

        if self.duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(
                f"Invalid processing.duplicate_policy '{self.duplicate_policy}' "
                f"(expected one of: {', '.join(DUPLICATE_POLICIES)})"
            )

        if self.timezone not in pytz.all_timezones_set:
            raise ValueError(f"Invalid processing.timezone: {self.timezone}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def source(self) -> str:
        """Get record source ('api' or 'files')."""
        return self.get("source", "api")

    @property
    def api_base_url(self) -> str:
        """Get API base URL."""
        return self.get("api.base_url", "")

    @property
    def api_timeout(self) -> int:
        """Get API timeout in seconds."""
        return self.get("api.timeout", 30)

    @property
    def api_max_retries(self) -> int:
        """Get maximum API retry attempts."""
        return self.get("api.max_retries", 3)

    @property
    def api_verify_ssl(self) -> bool:
        """Get API SSL verification setting."""
        return self.get("api.verify_ssl", True)

    @property
    def api_key(self) -> Optional[str]:
        """Get the backend's public API key."""
        return self.get("authentication.api_key")

    @property
    def access_token(self) -> Optional[str]:
        """Get the user access token (falls back to the API key)."""
        return self.get("authentication.access_token")

    @property
    def harvest_logs_file(self) -> Optional[str]:
        return self.get("files.harvest_logs")

    @property
    def planting_logs_file(self) -> Optional[str]:
        return self.get("files.planting_logs")

    @property
    def rainfall_file(self) -> Optional[str]:
        return self.get("files.rainfall")

    @property
    def recommendations_file(self) -> Optional[str]:
        return self.get("files.recommendations")

    @property
    def timezone(self) -> str:
        """Get the farm location timezone."""
        return self.get("processing.timezone", constants.DEFAULT_TIMEZONE)

    @property
    def duplicate_policy(self) -> str:
        """Get the policy for duplicated rainfall dates."""
        return self.get("processing.duplicate_policy", constants.DEFAULT_DUPLICATE_POLICY)

    @property
    def log_level(self) -> str:
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        return self.get("logging.file")

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"Config(file={self.config_file}, source={self.source}, "
            f"env={self.get('environment')})"
        )
