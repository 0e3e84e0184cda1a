"""
Package configuration.

Defaults live at module level; ``load_settings`` overlays a JSON file named by
``RENTCAL_CONFIG`` and individual ``RENTCAL_*`` environment variables.
"""

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Display and pricing defaults for pickers and quotes."""

    date_placeholder: str = "Select date"
    time_placeholder: str = "Select time"
    datetime_placeholder: str = "dd/mm/yyyy --:-- --"
    default_hour: int = 10
    default_minute: int = 0
    minute_step: int = 1
    pad_trailing_cells: bool = False
    deposit_rate: float = 0.015


_DEFAULT_SETTINGS = Settings()
_settings: Optional[Settings] = None

_ENV_PREFIX = "RENTCAL_"


def _convert(raw, default):
    """Convert a raw config value to the type of its default."""
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        return str(raw).strip().lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, float):
        return float(raw)
    return str(raw)


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Build settings from defaults, an optional JSON file and the environment.

    Args:
        config_path: JSON file path (defaults to env var RENTCAL_CONFIG)

    Returns:
        Settings instance; unusable values keep their defaults
    """
    overrides = {}
    path = config_path or os.getenv(_ENV_PREFIX + "CONFIG")
    if path:
        try:
            with Path(path).open("r", encoding="utf-8") as fh:
                overrides.update(json.load(fh))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read config file %s: %s", path, exc)

    for f in fields(Settings):
        env_value = os.getenv(_ENV_PREFIX + f.name.upper())
        if env_value is not None:
            overrides[f.name] = env_value

    values = {}
    for f in fields(Settings):
        if f.name not in overrides:
            continue
        default = getattr(_DEFAULT_SETTINGS, f.name)
        try:
            values[f.name] = _convert(overrides[f.name], default)
        except (TypeError, ValueError):
            logger.warning(
                "Ignoring invalid value for %s: %r", f.name, overrides[f.name]
            )

    unknown = set(overrides) - {f.name for f in fields(Settings)}
    if unknown:
        logger.warning("Ignoring unknown settings: %s", sorted(unknown))

    return replace(_DEFAULT_SETTINGS, **values)


def get_settings() -> Settings:
    """Get active settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Replace the active settings."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop active settings so the next access reloads them."""
    global _settings
    _settings = None
