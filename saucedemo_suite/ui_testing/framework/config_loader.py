"""
================================================================================
Configuration Loader
================================================================================

YAML-based settings for the SauceDemo UI suite with environment variable
override support.

Features:
    - Load-once YAML settings file (fails fast when missing or malformed)
    - Environment variable override (SETTINGS_BROWSER overrides settings.browser)
    - Dot notation path access
    - Named credential sets (StandardUser, LockedOutUser, ...)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit, urlunsplit

import yaml
from loguru import logger

from saucedemo_tools.report_tools.report_generator import find_project_root

from .models import Credentials


# Default configuration file path (repo root / config / settings.yaml)
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "settings.yaml"

# Environment variable that points to an alternative settings file
CONFIG_PATH_ENV = "SAUCEDEMO_CONFIG"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class CredentialsNotFoundError(ConfigurationError, KeyError):
    """Raised when a named user type is absent from the credentials section."""

    def __init__(self, user_type: str, available: List[str]):
        self.user_type = user_type
        self.available = available
        super().__init__(
            f"Credentials not found for user type '{user_type}'. "
            f"Available: {', '.join(available) or 'none'}"
        )

    def __str__(self) -> str:
        return self.args[0]


class BrowserEngine(str, Enum):
    """Browser engines supported by the suite."""
    CHROMIUM = "Chromium"
    FIREFOX = "Firefox"
    WEBKIT = "Webkit"

    @classmethod
    def parse(cls, value: str) -> "BrowserEngine":
        for engine in cls:
            if engine.value.lower() == str(value).strip().lower():
                return engine
        raise ConfigurationError(
            f"Unsupported browser '{value}'. Expected one of: "
            f"{', '.join(e.value for e in cls)}"
        )

    @property
    def playwright_name(self) -> str:
        return self.value.lower()


class ConfigLoader:
    """
    Read-only settings provider, loaded once per test session.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (SETTINGS_HEADLESS)
        2. YAML configuration file
        3. Default values passed to get()

    Usage:
        >>> config = ConfigLoader()
        >>> config.base_url
        'https://www.saucedemo.com/v1/index.html'
        >>> config.get_credentials("StandardUser").username
        'standard_user'
    """

    REQUIRED_SECTIONS = ("settings", "credentials")

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file. Falls back to the
                        SAUCEDEMO_CONFIG env var, then DEFAULT_CONFIG_PATH.
        """
        env_path = os.environ.get(CONFIG_PATH_ENV)
        self._config_path = Path(config_path or env_path or DEFAULT_CONFIG_PATH)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self._config_path}")

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {self._config_path}"
            )
        for section in self.REQUIRED_SECTIONS:
            if not isinstance(data.get(section), dict):
                raise ConfigurationError(
                    f"Missing '{section}' section in {self._config_path}"
                )

        self._config = data
        logger.debug(f"Loaded configuration from: {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "settings.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire configuration section (empty dict if absent)."""
        return dict(self._config.get(section) or {})

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    # =========================================================================
    # Typed Settings
    # =========================================================================

    @property
    def base_url(self) -> str:
        value = self.get("settings.base_url")
        if not value:
            raise ConfigurationError("BaseUrl not configured (settings.base_url)")
        return str(value)

    @property
    def browser(self) -> BrowserEngine:
        return BrowserEngine.parse(self.get("settings.browser", "Chromium"))

    @property
    def headless(self) -> bool:
        return bool(self.get("settings.headless", True))

    @property
    def slow_mo(self) -> int:
        return int(self.get("settings.slow_mo", 0))

    @property
    def timeout(self) -> int:
        return int(self.get("settings.timeout", 30000))

    @property
    def implicit_wait(self) -> int:
        return int(self.get("settings.implicit_wait", 10000))

    @property
    def screenshot_on_failure(self) -> bool:
        return bool(self.get("settings.screenshot_on_failure", True))

    @property
    def video_recording(self) -> bool:
        return bool(self.get("settings.video_recording", False))

    @property
    def trace_on_failure(self) -> bool:
        return bool(self.get("settings.trace_on_failure", False))

    @property
    def root_dir(self) -> Path:
        """Project root; relative paths in the settings file are resolved against it."""
        return find_project_root(self._config_path.parent)

    def resolve_path(self, value: str) -> Path:
        path = Path(value)
        return path if path.is_absolute() else self.root_dir / path

    def output_dir(self, name: str) -> Path:
        """Artifact directory for `screenshots`, `videos`, `traces` or `reports`."""
        return self.resolve_path(self.get(f"paths.{name}", name))

    @property
    def test_data_path(self) -> Path:
        return self.resolve_path(self.get("test_data.file", "config/test_data.json"))

    @property
    def test_data_seed(self) -> Optional[int]:
        """Seed for random fixture picks (TEST_DATA_SEED overrides the file)."""
        value = self.get("test_data.seed")
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"test_data.seed must be an integer: {value!r}") from e

    def page_url(self, page_path: str) -> str:
        """
        Build an absolute URL for a screen of the application.

        The base URL points at the landing document (".../index.html");
        the last path segment is replaced with `page_path`.
        """
        parts = urlsplit(self.base_url)
        directory = parts.path.rsplit("/", 1)[0]
        path = f"{directory}/{page_path.lstrip('/')}"
        return urlunsplit((parts.scheme, parts.netloc, path, "", ""))

    # =========================================================================
    # Credentials
    # =========================================================================

    def user_types(self) -> List[str]:
        return list(self.get_section("credentials").keys())

    def get_credentials(self, user_type: str) -> Credentials:
        """
        Look up a named credential set.

        Raises:
            CredentialsNotFoundError: When the key is absent
        """
        users = self.get_section("credentials")
        user = users.get(user_type)
        if not isinstance(user, dict):
            raise CredentialsNotFoundError(user_type, list(users.keys()))

        username = user.get("username")
        password = user.get("password")
        if username is None or password is None:
            raise ConfigurationError(
                f"Incomplete credentials for user type: {user_type}"
            )
        return Credentials(username=str(username), password=str(password))

    def describe(self) -> Dict[str, Any]:
        """Run metadata for logging (no secrets)."""
        return {
            "base_url": self.base_url,
            "browser": self.browser.value,
            "headless": self.headless,
            "slow_mo": self.slow_mo,
            "timeout": self.timeout,
        }


__all__ = [
    "BrowserEngine",
    "ConfigLoader",
    "ConfigurationError",
    "CredentialsNotFoundError",
]
