"""Check that a free-text location is one the search service recognizes."""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import requests

from daily_weather.config import get_settings, resolve_api_key
from daily_weather.datasources.search import client
from daily_weather.errors import NetworkError, PermanentError
from daily_weather.services.http import session

SERVICE_UNAVAILABLE = 503


def search_url(location: str, api_key: str, base_url: str = client.SEARCH_API) -> str:
    """Full query URL for ``location``, asking for one JSON result."""
    params: dict[str, Any] = {
        "query": location,
        "num_of_results": client.NUM_OF_RESULTS,
        "format": client.RESPONSE_FORMAT,
        "key": api_key,
    }
    prepared = requests.Request("GET", base_url, params=params).prepare()
    return str(prepared.url)


def is_location_valid(
    location: str,
    *,
    http: requests.Session | None = None,
    api_key: str | None = None,
) -> bool:
    """
    Ask the search service whether it knows ``location``.

    Args:
        location: Free text as typed by the user, e.g. ``"London"``.
        http: Session to send the request on (default: shared session).
        api_key: Service key (default: ``resolve_api_key()``).

    Returns:
        True if the response has a top-level ``search_api`` key (any value).

    Raises:
        ConfigurationError: No API key could be resolved.
        NetworkError: Timeout, 503 or any other transport failure.
        PermanentError: The response body is not JSON.
    """
    settings = get_settings()
    key = api_key or resolve_api_key(settings)
    url = search_url(location, key, settings.search_api_url)
    shown = _mask_key(url)

    http = http if http is not None else session
    try:
        resp = http.get(url)
        resp.raise_for_status()
    except requests.Timeout as exc:
        raise NetworkError(f"Connection to {shown} timed out!") from exc
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        if status == SERVICE_UNAVAILABLE:
            raise NetworkError(f"ServiceUnavailable was received from {shown}") from exc
        raise NetworkError(f"HTTP {status} was received from {shown}") from exc
    except requests.RequestException as exc:
        raise NetworkError(f"Request to {shown} failed") from exc

    try:
        content = resp.json()
    except ValueError as exc:
        raise PermanentError("there was an error parsing the JSON") from exc

    return isinstance(content, dict) and client.RESULT_KEY in content


def _mask_key(url: str) -> str:
    """Same URL with the ``key`` query value shown as ``***``."""
    parts = urlsplit(url)
    query = [
        (name, "***" if name == "key" else value)
        for name, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="*")))
