"""Location search service constants.

API docs: World Weather Online Location Search API (``search.ashx``).
"""

SEARCH_API = "http://www.worldweatheronline.com/feed/search.ashx"

# Top-level key present in the response whenever the query matched
RESULT_KEY = "search_api"

NUM_OF_RESULTS = 1
RESPONSE_FORMAT = "json"
