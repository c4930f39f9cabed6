"""
Orchestrator — runs a place query through geocoding and forecasting.

Flow:
  1. Geocode the free-text query
  2. Zero candidates → no_match, several → ambiguous (never auto-picks)
  3. Exactly one candidate → fetch its forecast → resolved

Stage failures raise LookupFailed; everything else comes back as a
Resolution for the caller to render.
"""

from __future__ import annotations
import logging

from abilities.forecast import resolve_forecast
from abilities.geocode import resolve_geocodes
from config import Settings
from errors import DecodeError, LookupFailed, TransportError, UnexpectedFormatError
from models import AMBIGUOUS, NO_MATCH, RESOLVED, Resolution

log = logging.getLogger(__name__)

NO_MATCH_TEXT = "Found no matches, try again with a different parameter."
AMBIGUOUS_TEXT = "Found multiple matches for your search. Try again with one of the following:"


def format_amount(value: float) -> str:
    """Shortest float text, with integral values printed bare (0.0 → "0")."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


class Orchestrator:
    def __init__(self, settings: Settings):
        self.settings = settings

    # ── Lookup ──────────────────────────────────────────────────

    def resolve(self, place_query: str) -> Resolution:
        s = self.settings
        try:
            candidates = resolve_geocodes(
                s.user_agent, s.geocode_api_url, place_query, timeout=s.timeout
            )
        except (TransportError, DecodeError) as e:
            log.error(f"Geocode lookup failed for {place_query!r}: {e}")
            raise LookupFailed("geocode", "An error occurred while fetching geo codes") from e

        if not candidates:
            log.info(f"No geocode match for {place_query!r}")
            return Resolution(query=place_query, status=NO_MATCH)
        if len(candidates) > 1:
            log.info(f"{len(candidates)} geocode matches for {place_query!r}, asking user to refine")
            return Resolution(query=place_query, status=AMBIGUOUS, candidates=tuple(candidates))

        geo = candidates[0]
        try:
            forecast = resolve_forecast(
                s.user_agent, s.forecast_api_url, geo.latitude, geo.longitude, timeout=s.timeout
            )
        except (TransportError, UnexpectedFormatError) as e:
            log.error(f"Forecast lookup failed for {geo.display_name or place_query!r}: {e}")
            raise LookupFailed("forecast", "An error occurred while fetching forecast") from e

        return Resolution(
            query=place_query, status=RESOLVED, candidates=(geo,), forecast=forecast
        )

    # ── Rendering ───────────────────────────────────────────────

    def get_resolution_text(self, resolution: Resolution) -> str:
        """Console text for a finished lookup."""
        if resolution.status == NO_MATCH:
            return NO_MATCH_TEXT
        if resolution.status == AMBIGUOUS:
            return "\n".join([AMBIGUOUS_TEXT, *resolution.display_names])

        f = resolution.forecast
        return "\n".join([
            f"Expected forecast for {resolution.query}",
            f"At {f.timestamp}",
            f"Temp: {format_amount(f.air_temperature)}°C",
            f"Windspeed: {format_amount(f.wind_speed)}m/s",
            f"Precipitation within the next hour: {format_amount(f.precipitation)}mm",
        ])
