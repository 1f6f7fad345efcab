"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` that makes exactly one attempt
per request (no retry, no backoff) and applies a default timeout. Callers get
transport errors straight away and decide for themselves whether to retry.

Usage::

    from daily_weather.services.http import session

    resp = session.get("https://api.example.com/v1/data")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from daily_weather import __version__
from daily_weather.config import get_settings

#: Single attempt: urllib3 raises on the first failure.
SINGLE_ATTEMPT = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30.0  # seconds

USER_AGENT = f"daily-weather/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with a single-attempt adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``SINGLE_ATTEMPT``).
        timeout: Default timeout applied to every request. ``None`` reads
            ``WEATHER_HTTP_TIMEOUT`` when each request is sent.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or SINGLE_ATTEMPT)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout if timeout is not None else get_settings().http_timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, timeout from WEATHER_HTTP_TIMEOUT. Import and use directly.
session: requests.Session = create_session(timeout=None)
