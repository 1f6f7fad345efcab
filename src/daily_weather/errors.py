"""
Error taxonomy.

Every public operation raises one of these (or lets one propagate). Callers
decide on presentation and retry policy; nothing here is retried.
"""

from __future__ import annotations


class WeatherError(Exception):
    """Base class for all daily-weather errors."""


class ConfigurationError(WeatherError):
    """The API key could not be resolved from the environment or config file."""


class NetworkError(WeatherError):
    """Transport failure, timeout, unavailable service or empty response."""


class PermanentError(WeatherError):
    """A response arrived but does not match the provider's contract."""


class InputError(WeatherError, ValueError):
    """Caller-supplied input is malformed (e.g. a bad ``"lat,lon"`` string)."""
