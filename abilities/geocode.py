"""
Geocode ability — turn a free-text place name into candidate locations.

Expects a Nominatim-style search endpoint that answers with a JSON
array of {lat, lon, display_name} objects.
"""

import logging

from config import DEFAULT_TIMEOUT
from errors import DecodeError
from fetcher import fetch, loads
from models import GeoCode

log = logging.getLogger(__name__)


def resolve_geocodes(
    user_agent: str, geocode_api_url: str, place_query: str, timeout: float = DEFAULT_TIMEOUT
) -> list[GeoCode]:
    """Return every candidate for ``place_query`` in the order the API sent them."""
    body = fetch(user_agent, geocode_api_url, params={"q": place_query}, timeout=timeout)
    try:
        results = loads(body)
    except ValueError as e:
        raise DecodeError(f"Geocode response is not valid JSON: {e}") from e
    if not isinstance(results, list):
        raise DecodeError(f"Geocode response is a {type(results).__name__}, not an array")

    candidates = [GeoCode.from_json(item) for item in results]
    log.info(f"{len(candidates)} geocode candidate(s) for {place_query!r}")
    return candidates
