"""
Forecast ability — nearest upcoming data point for a coordinate pair.

Expects a MET Norway Locationforecast-style endpoint; only the first
entry of properties.timeseries is used.
"""

import logging

from config import DEFAULT_TIMEOUT
from errors import UnexpectedFormatError
from fetcher import fetch, loads
from models import Forecast

log = logging.getLogger(__name__)


def resolve_forecast(
    user_agent: str, forecast_api_url: str, lat: str, lon: str, timeout: float = DEFAULT_TIMEOUT
) -> Forecast:
    body = fetch(
        user_agent,
        forecast_api_url,
        params={"lat": lat, "lon": lon},
        timeout=timeout,
    )
    # Malformed JSON and an empty series are reported the same way.
    try:
        payload = loads(body)
    except ValueError as e:
        raise UnexpectedFormatError("Unexpected API format") from e
    if not isinstance(payload, dict):
        raise UnexpectedFormatError("Unexpected API format")

    properties = payload.get("properties") or {}
    if not isinstance(properties, dict):
        raise UnexpectedFormatError("Unexpected API format")
    timeseries = properties.get("timeseries") or []
    if not isinstance(timeseries, list) or not timeseries:
        raise UnexpectedFormatError("Unexpected API format")

    forecast = Forecast.from_entry(timeseries[0])
    log.info(f"Forecast for ({lat}, {lon}) at {forecast.timestamp or '(no time)'}")
    return forecast
