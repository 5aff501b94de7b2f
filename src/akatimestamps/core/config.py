"""Configuration management for akatimestamps.

Settings come from TOML files: a local ``.akats/config`` in the current
directory overrides the global ``$HOME/.akats/config``, which overrides the
built-in defaults. ``AKATS_API_URL`` overrides the service address.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli
import tomli_w

from akatimestamps.core.errors import ConfigError

API_URL_ENV = "AKATS_API_URL"

DEFAULT_BASE_URL = "https://api.aka-podcast.mkopenga.com"
LOCAL_DEV_BASE_URL = "http://localhost:9090"

DEFAULT_CONFIG: dict[str, Any] = {
    "api": {
        "base_url": DEFAULT_BASE_URL,
        "timeout": 0,
    },
    "refresh": {
        "reload_delay": 0.5,
    },
    "storage": {
        "credentials_file": "~/.akats/credentials",
    },
}


@dataclass
class ApiConfig:
    """Episode service settings."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 0  # 0 disables the client-side timeout


@dataclass
class RefreshConfig:
    """Refresh gate settings."""

    reload_delay: float = 0.5


@dataclass
class StorageConfig:
    """Where local state is kept."""

    credentials_file: str = "~/.akats/credentials"


@dataclass
class AkaConfig:
    """Complete akatimestamps configuration."""

    api: ApiConfig = field(default_factory=ApiConfig)
    refresh: RefreshConfig = field(default_factory=RefreshConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)

    def get_timeout(self) -> float | None:
        """Timeout for service calls in seconds, None when disabled."""
        return self.api.timeout or None

    def get_credentials_path(self) -> Path:
        """Credentials file as an absolute Path."""
        return Path(self.storage.credentials_file).expanduser()


def get_local_config_path() -> Path:
    """Get the local configuration file path (.akats/config in current directory)."""
    return Path.cwd() / ".akats" / "config"


def get_global_config_path() -> Path:
    """Get the global configuration file path ($HOME/.akats/config)."""
    return Path.home() / ".akats" / "config"


def _load_config_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, an unreadable or missing file counts as empty."""
    if not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            return tomli.load(f)
    except (tomli.TOMLDecodeError, OSError):
        return {}


def _create_default_global_config(path: Path) -> None:
    """Create the global config file with default values if it doesn't exist."""
    if path.exists():
        return

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        tomli_w.dump(DEFAULT_CONFIG, f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _validate_config(config_dict: dict[str, Any]) -> None:
    """
    Validate configuration values.

    Raises:
        ConfigError: If configuration values are invalid.
    """
    api = config_dict.get("api", {})
    base_url = api.get("base_url")
    if not isinstance(base_url, str) or not base_url.startswith(("http://", "https://")):
        raise ConfigError(f"api.base_url must be an http(s) URL, got {base_url!r}")

    numbers = [
        ("api.timeout", api.get("timeout")),
        ("refresh.reload_delay", config_dict.get("refresh", {}).get("reload_delay")),
    ]
    for name, value in numbers:
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ConfigError(f"{name} must be a number, got {type(value).__name__}")
        if value < 0:
            raise ConfigError(f"{name} must not be negative, got {value}")

    credentials_file = config_dict.get("storage", {}).get("credentials_file")
    if not isinstance(credentials_file, str) or not credentials_file:
        raise ConfigError("storage.credentials_file must be a non-empty string")


def _dict_to_config(config_dict: dict[str, Any]) -> AkaConfig:
    api = config_dict["api"]
    return AkaConfig(
        api=ApiConfig(
            base_url=api["base_url"].rstrip("/"),
            timeout=float(api["timeout"]),
        ),
        refresh=RefreshConfig(
            reload_delay=float(config_dict["refresh"]["reload_delay"]),
        ),
        storage=StorageConfig(
            credentials_file=config_dict["storage"]["credentials_file"],
        ),
    )


def load_config(
    local_path: Path | None = None,
    global_path: Path | None = None,
    create_global_if_missing: bool = True,
) -> AkaConfig:
    """
    Load configuration with priority: environment > local > global > defaults.

    Args:
        local_path: Path to local config file (default: .akats/config)
        global_path: Path to global config file (default: $HOME/.akats/config)
        create_global_if_missing: Whether to create global config if it doesn't exist

    Returns:
        Merged and validated configuration

    Raises:
        ConfigError: If a configured value is invalid
    """
    if local_path is None:
        local_path = get_local_config_path()
    if global_path is None:
        global_path = get_global_config_path()

    if create_global_if_missing:
        _create_default_global_config(global_path)

    merged = _deep_merge(DEFAULT_CONFIG, _load_config_file(global_path))
    merged = _deep_merge(merged, _load_config_file(local_path))

    env_url = os.environ.get(API_URL_ENV)
    if env_url:
        merged = _deep_merge(merged, {"api": {"base_url": env_url}})

    _validate_config(merged)
    return _dict_to_config(merged)
