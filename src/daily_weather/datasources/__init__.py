"""External data source integrations.

Each subdirectory is one external service with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, response keys
    └── {feature}.py      # Request/parse functions (one per endpoint/concept)

    forecast/   forecast.io daily forecast + icon classification
    search/     World Weather Online location search

Fetch functions make one request on the shared session and translate
failures into ``daily_weather.errors``::

    from daily_weather.services.http import session

    def fetch_something(url, *, http=None) -> dict[str, Any]:
        http = http if http is not None else session
        try:
            resp = http.get(url)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise NetworkError("...") from exc
        return resp.json()

Every fetch function accepts ``http=`` (any object with ``get``) so tests
and callers can inject their own transport.
"""
