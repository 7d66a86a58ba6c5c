"""
Configuration loader with support for YAML and environment variables.
"""

import os
import logging
from typing import Any, Dict, Optional
from pathlib import Path

import yaml

from chomikuj.core.exceptions import ConfigurationError

logger: logging.Logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Loads and manages configuration from YAML files and environment variables.
    Precedence: environment, then file, then defaults.
    """

    ENV_MAPPING: Dict[str, str] = {
        "CHOMIKUJ_USERNAME": "auth.username",
        "CHOMIKUJ_PASSWORD": "auth.password",
        "CHOMIKUJ_BASE_URL": "chomikuj.base_url",
        "CHOMIKUJ_TIMEOUT": "http.timeout",
    }

    def __init__(self, config_path: str = "config.yaml") -> None:
        """
        Initialize config loader.

        Args:
            config_path: Path to YAML configuration file.
        """
        self._config_path: str = config_path
        self._config: Dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load configuration from file and environment."""
        path = Path(self._config_path)
        defaults: Dict[str, Any] = self._get_defaults()

        if not path.exists():
            logger.warning(f"Config file not found: {self._config_path}, using defaults")
            self._config = defaults
        else:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Failed to parse config file: {e}") from e
            except OSError as e:
                raise ConfigurationError(f"Failed to load config file: {e}") from e

            if not isinstance(loaded, dict):
                raise ConfigurationError(f"Config file must contain a mapping: {self._config_path}")

            logger.info(f"Loaded configuration from: {self._config_path}")
            self._config = self._deep_merge(defaults, loaded)

        self._apply_env_overrides()

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values."""
        return {
            "chomikuj": {
                "base_url": "https://chomikuj.pl",
            },
            "http": {
                "timeout": 30.0,
                "user_agent": (
                    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
                    "AppleWebKit/537.36 (KHTML, like Gecko) "
                    "Chrome/120.0.0.0 Safari/537.36"
                ),
            },
            "auth": {
                "username": None,
                "password": None,
            },
        }

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result: Dict[str, Any] = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        for env_var, config_path in self.ENV_MAPPING.items():
            value: Optional[str] = os.environ.get(env_var)
            if value:
                self._set_nested(config_path, value, convert=config_path != "auth.password")

    def _set_nested(self, path: str, value: Any, convert: bool = True) -> None:
        """Set a nested configuration value using dot notation."""
        keys: list[str] = path.split(".")
        current: Dict[str, Any] = self._config

        for key in keys[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]

        # Type conversion
        if convert and isinstance(value, str):
            if value.lower() in ("true", "false"):
                value = value.lower() == "true"
            elif value.isdigit():
                value = int(value)
            else:
                try:
                    value = float(value)
                except ValueError:
                    pass

        current[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., "http.timeout").
            default: Default value if key not found.

        Returns:
            Configuration value.
        """
        keys: list[str] = key.split(".")
        current: Any = self._config

        for k in keys:
            if isinstance(current, dict) and k in current:
                current = current[k]
            else:
                return default

        return current

    @property
    def base_url(self) -> str:
        """Site root URL without a trailing slash."""
        return str(self.get("chomikuj.base_url", "https://chomikuj.pl")).rstrip("/")
