"""
Application settings and API key resolution.

Settings come from ``WEATHER_*`` environment variables. The API key is looked
up in ``WEATHER_KEY`` first, then in the YAML file at ``config_path``::

    # config.yml
    weather_api_key: abc123

Nothing is cached: ``get_settings()`` and ``resolve_api_key()`` re-read their
sources on every call.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from daily_weather.errors import ConfigurationError

API_KEY_FIELD = "weather_api_key"


class Settings(BaseSettings):
    """Runtime configuration, read from the environment."""

    model_config = SettingsConfigDict(env_prefix="WEATHER_", extra="ignore")

    app_name: str = "daily-weather"
    debug: bool = False

    # Read from WEATHER_KEY (the prefix plus "key")
    key: str | None = Field(default=None, repr=False)
    config_path: Path = Path("./config.yml")

    forecast_api_url: str = "https://api.forecast.io/forecast"
    search_api_url: str = "http://www.worldweatheronline.com/feed/search.ashx"
    http_timeout: float = 30.0


def get_settings() -> Settings:
    """
    Build a fresh ``Settings`` from the current environment.

    Raises:
        ConfigurationError: A ``WEATHER_*`` variable has an invalid value.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid WEATHER_* settings: {exc}") from exc


def resolve_api_key(settings: Settings | None = None) -> str:
    """
    Return the weather API key.

    Args:
        settings: Settings to read from (default: a fresh ``get_settings()``).

    Raises:
        ConfigurationError: Invalid ``WEATHER_*`` settings, or no key in the
            environment and the config file is missing, malformed, or has no
            ``weather_api_key``.
    """
    settings = settings or get_settings()
    if settings.key and settings.key.strip():
        return settings.key

    data = _read_config(settings.config_path)
    value = data.get(API_KEY_FIELD)
    if value is None or not str(value).strip():
        raise ConfigurationError(f"'{API_KEY_FIELD}' is missing from {settings.config_path}")
    return str(value)


def _read_config(path: Path) -> Mapping[str, object]:
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
        data = yaml.safe_load(text) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Could not read config file {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Config file {path} must contain a mapping.")
    return data
