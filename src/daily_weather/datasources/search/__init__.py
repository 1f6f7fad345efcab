"""Location search data source (World Weather Online ``search.ashx``).

Public API:
  - locations: is_location_valid, search_url
  - client: API URL, result key
"""

from daily_weather.datasources.search.client import RESULT_KEY, SEARCH_API
from daily_weather.datasources.search.locations import is_location_valid, search_url

__all__ = [
    "RESULT_KEY",
    "SEARCH_API",
    "is_location_valid",
    "search_url",
]
