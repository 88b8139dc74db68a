"""
Configuration module for the Meteologix client.

Loads client options from built-in defaults, an optional JSON file,
environment variables and explicit keyword options (in that order).
"""

import copy
import json
import os
import platform
from pathlib import Path
from typing import Any, Dict, Optional

from . import constants


def default_user_agent() -> str:
    """Return the default User-Agent naming the library, its version and the host OS."""
    from .. import __version__

    return f"meteologix-python v{__version__} ({platform.system() or 'unknown'})"


# option name -> (section, key, environment variable)
OPTIONS = {
    "api_key": ("authentication", "api_key", "METEOLOGIX_API_KEY"),
    "username": ("authentication", "username", "METEOLOGIX_USERNAME"),
    "password": ("authentication", "password", "METEOLOGIX_PASSWORD"),
    "accept_language": ("http", "accept_language", "METEOLOGIX_ACCEPT_LANGUAGE"),
    "user_agent": ("http", "user_agent", "METEOLOGIX_USER_AGENT"),
    "api_base_url": ("api", "base_url", "METEOLOGIX_API_BASE_URL"),
    "geocoder_url": ("api", "geocoder_url", "METEOLOGIX_GEOCODER_URL"),
    "timeout": ("api", "timeout", "METEOLOGIX_TIMEOUT"),
}


class Config:
    """Configuration manager for the client."""

    def __init__(self, config_file: Optional[str] = None, **options: Any):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses the
                        METEOLOGIX_CONFIG_FILE env var; without either, only
                        defaults, environment and options are used
            **options: Explicit option overrides (api_key, username, password,
                       accept_language, user_agent, api_base_url, geocoder_url,
                       timeout)

        Raises:
            FileNotFoundError: If the configuration file does not exist
            ValueError: On unknown options or invalid values
        """
        self.config_file = config_file or os.getenv("METEOLOGIX_CONFIG_FILE")
        self.config: Dict[str, Any] = self._defaults()
        if self.config_file:
            self._load_config()
        self._override_from_env()
        self._apply_options(options)
        self._validate_config()

    @staticmethod
    def _defaults() -> Dict[str, Any]:
        return {
            "api": {
                "base_url": constants.API_BASE_URL,
                "geocoder_url": constants.NOMINATIM_URL,
                "timeout": constants.DEFAULT_TIMEOUT,
            },
            "authentication": {},
            "http": {
                "accept_language": constants.DEFAULT_ACCEPT_LANGUAGE,
                "user_agent": default_user_agent(),
            },
        }

    def _set(self, section: str, key: str, value: Any) -> None:
        # Empty strings never override a previous layer
        if value is None or value == "":
            return
        self.config.setdefault(section, {})[key] = value

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        for section, values in loaded.items():
            if not isinstance(values, dict):
                continue
            for key, value in values.items():
                self._set(section, key, value)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        for section, key, env_var in OPTIONS.values():
            self._set(section, key, os.getenv(env_var))

    def _apply_options(self, options: Dict[str, Any]) -> None:
        """Apply explicit keyword options."""
        unknown = sorted(set(options) - set(OPTIONS))
        if unknown:
            raise ValueError(f"Unknown configuration options: {', '.join(unknown)}")

        for name, value in options.items():
            section, key, _ = OPTIONS[name]
            self._set(section, key, value)

    def _validate_config(self) -> None:
        """Validate URLs and timeout."""
        for key in ("base_url", "geocoder_url"):
            url = self.config["api"].get(key, "")
            if not str(url).startswith(("http://", "https://")):
                raise ValueError(f"Invalid URL for api.{key}: {url!r}")
        self.config["api"]["base_url"] = self.config["api"]["base_url"].rstrip("/")

        try:
            timeout = float(self.config["api"]["timeout"])
        except (TypeError, ValueError):
            raise ValueError(f"Invalid timeout: {self.config['api']['timeout']!r}")
        if timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {timeout}")
        self.config["api"]["timeout"] = timeout

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

    def as_dict(self) -> Dict[str, Any]:
        """Return a copy of the resolved configuration."""
        return copy.deepcopy(self.config)

    @property
    def api_base_url(self) -> str:
        """Get weather API base URL."""
        return self.get("api.base_url", constants.API_BASE_URL)

    @property
    def geocoder_url(self) -> str:
        """Get geocoder search URL."""
        return self.get("api.geocoder_url", constants.NOMINATIM_URL)

    @property
    def timeout(self) -> float:
        """Get request timeout in seconds."""
        return self.get("api.timeout", constants.DEFAULT_TIMEOUT)

    @property
    def api_key(self) -> Optional[str]:
        """Get API key."""
        return self.get("authentication.api_key")

    @property
    def username(self) -> Optional[str]:
        """Get HTTP Basic auth username."""
        return self.get("authentication.username")

    @property
    def password(self) -> Optional[str]:
        """Get HTTP Basic auth password."""
        return self.get("authentication.password")

    @property
    def accept_language(self) -> str:
        """Get Accept-Language header value."""
        return self.get("http.accept_language", constants.DEFAULT_ACCEPT_LANGUAGE)

    @property
    def user_agent(self) -> str:
        """Get User-Agent header value."""
        return self.get("http.user_agent") or default_user_agent()

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, base_url={self.api_base_url})"
