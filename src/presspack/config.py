"""Process-wide configuration."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from presspack.headers import DEFAULT_HEADER_BYTES

logger = logging.getLogger(__name__)

DEFAULT_PLUGINS_DIR = "wp-content/plugins"
DEFAULT_VENDOR = "presspack"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


def _env_plugins_dir() -> str:
    return (
        os.getenv("PRESSPACK_PLUGINS_DIR")
        or os.getenv("WP_PLUGIN_DIR")
        or str(Path.cwd() / DEFAULT_PLUGINS_DIR)
    )


@dataclass
class Settings:
    """Configuration shared by package objects."""

    # Absolute directory under which plugin basenames are resolved
    plugins_dir: str = field(default_factory=_env_plugins_dir)
    vendor: str = field(default_factory=lambda: os.getenv("PRESSPACK_VENDOR", DEFAULT_VENDOR))
    header_bytes: int = DEFAULT_HEADER_BYTES

    def __post_init__(self) -> None:
        # Relative roots resolve against the working directory
        self.plugins_dir = os.path.abspath(os.fspath(self.plugins_dir))

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables."""
        return cls()

    @classmethod
    def from_file(cls, path: str | Path) -> Settings:
        """Load settings from a JSON file.

        Keys missing from the file fall back to the environment.

        Raises:
            ConfigError: If the file is unreadable, not a JSON object, or holds
                a value of the wrong type
        """
        path = Path(path)
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to load config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        known = {"plugins_dir", "vendor", "header_bytes"}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys in {path}: {sorted(unknown)}")

        kwargs: dict[str, Any] = {k: v for k, v in data.items() if k in known}
        for key in ("plugins_dir", "vendor"):
            if key in kwargs and (not isinstance(kwargs[key], str) or not kwargs[key]):
                raise ConfigError(f"{key} in {path} must be a non-empty string")
        header_bytes = kwargs.get("header_bytes", DEFAULT_HEADER_BYTES)
        if isinstance(header_bytes, bool) or not isinstance(header_bytes, int) or header_bytes <= 0:
            raise ConfigError(f"header_bytes in {path} must be a positive integer")
        return cls(**kwargs)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return process-wide settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def set_settings(settings: Settings) -> None:
    """Replace the process-wide settings."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget cached settings so the next lookup rereads the environment."""
    global _settings
    _settings = None
