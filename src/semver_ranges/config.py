"""Configuration loader.

Settings are read from an optional JSON file. Recognised keys are
``defaultDialect`` (the dialect used when a constraint does not name one) and
``failOnInvalid`` (whether unparsable ranges or versions count as failures in
batch reports). Without a file the built-in defaults apply.

The ``SEMVER_RANGES_DIALECT`` environment variable overrides the default
dialect from any source.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .parsers import DEFAULT_DIALECT, PARSERS, get_known_dialects

CONFIG_PATH_ENV_VAR = "SEMVER_RANGES_CONFIG"
DIALECT_ENV_VAR = "SEMVER_RANGES_DIALECT"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    default_dialect: str = DEFAULT_DIALECT
    fail_on_invalid: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a dictionary, validating known fields."""
        dialect = data.get("defaultDialect", DEFAULT_DIALECT)
        if not isinstance(dialect, str) or not dialect:
            raise ConfigError("'defaultDialect' must be a non-empty string")
        _check_dialect(dialect)

        fail_on_invalid = data.get("failOnInvalid", True)
        if not isinstance(fail_on_invalid, bool):
            raise ConfigError("'failOnInvalid' must be a boolean")

        return cls(default_dialect=dialect, fail_on_invalid=fail_on_invalid)


def _check_dialect(dialect: str) -> None:
    if dialect not in PARSERS:
        known = ", ".join(get_known_dialects())
        raise ConfigError(f"Unknown dialect '{dialect}'. Known dialects: {known}")


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. SEMVER_RANGES_CONFIG environment variable
    3. None (use built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Optional path to the config file. If not provided, uses the
            SEMVER_RANGES_CONFIG env var or falls back to the defaults.

    Returns:
        A validated Settings object.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)

    if config_path is None:
        settings = Settings()
    else:
        settings = Settings.from_dict(_read_config(config_path))

    env_dialect = os.environ.get(DIALECT_ENV_VAR, "").strip()
    if env_dialect:
        _check_dialect(env_dialect)
        settings = replace(settings, default_dialect=env_dialect)

    return settings


def _read_config(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    return data
