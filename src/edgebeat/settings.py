"""Settings management: config file, environment and command-line overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Final, Mapping

from edgebeat.config import (
    API_BASE_URL,
    API_TIMEOUT,
    LOG_FILE,
    LOG_LEVEL,
    PING_INTERVAL,
    WALLETS_FILE,
    WALLETS_PER_PAGE,
)

logger = logging.getLogger(__name__)

CONFIG_DIR: Final[Path] = Path.home() / ".edgebeat"
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"

# Settings field -> environment variable
ENV_VARS: Final[dict[str, str]] = {
    "api_base_url": "EDGEBEAT_API_URL",
    "ping_interval": "EDGEBEAT_PING_INTERVAL",
    "page_size": "EDGEBEAT_PAGE_SIZE",
    "api_timeout": "EDGEBEAT_API_TIMEOUT",
    "wallets_file": "EDGEBEAT_WALLETS_FILE",
    "log_file": "EDGEBEAT_LOG_FILE",
    "log_level": "EDGEBEAT_LOG_LEVEL",
}

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsError(ValueError):
    """Raised when a configuration value is invalid."""


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    api_base_url: str = API_BASE_URL
    ping_interval: float = PING_INTERVAL
    page_size: int = WALLETS_PER_PAGE
    api_timeout: float = API_TIMEOUT
    wallets_file: str = WALLETS_FILE
    log_file: str = LOG_FILE
    log_level: str = LOG_LEVEL


def _load_config(path: Path = CONFIG_FILE) -> dict:
    """Load configuration from file."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        logger.warning("Ignoring unreadable config file %s", path)
        return {}
    return data if isinstance(data, dict) else {}


def _positive(name: str, value: Any, cast: type) -> Any:
    try:
        result = cast(value)
    except (TypeError, ValueError):
        raise SettingsError(f"{name} must be a number, got {value!r}") from None
    if result <= 0:
        raise SettingsError(f"{name} must be positive, got {value!r}")
    return result


def _coerce(values: Mapping[str, Any]) -> dict[str, Any]:
    """Validate and convert raw values into Settings field types."""
    out: dict[str, Any] = {}
    for key, value in values.items():
        if value is None or key not in ENV_VARS:
            continue
        if key in ("ping_interval", "api_timeout"):
            out[key] = _positive(key, value, float)
        elif key == "page_size":
            out[key] = _positive(key, value, int)
        elif key == "log_level":
            level = str(value).upper()
            if level not in LOG_LEVELS:
                raise SettingsError(
                    f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}"
                )
            out[key] = level
        else:
            out[key] = str(value)
    return out


def load_settings(
    *,
    config_file: Path | None = None,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Settings:
    """
    Resolve settings from defaults, config file, environment and overrides.

    Args:
        config_file: JSON config path (defaults to ~/.edgebeat/config.json)
        env: Environment mapping (defaults to os.environ)
        overrides: Highest priority values, usually parsed CLI flags

    Returns:
        Frozen Settings instance

    Raises:
        SettingsError: If a numeric value is malformed or not positive
    """
    env = os.environ if env is None else env
    settings = Settings()
    settings = replace(settings, **_coerce(_load_config(config_file or CONFIG_FILE)))
    from_env = {key: env.get(var) for key, var in ENV_VARS.items()}
    settings = replace(settings, **_coerce(from_env))
    if overrides:
        settings = replace(settings, **_coerce(overrides))
    return settings
