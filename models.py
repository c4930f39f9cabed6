"""
Data models for geocode candidates, forecasts, and lookup outcomes.

Decoding is lenient: absent or null fields fall back to empty/zero values.
Fields that are present with the wrong type are still rejected.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from errors import DecodeError, UnexpectedFormatError

NO_MATCH = "no_match"
AMBIGUOUS = "ambiguous"
RESOLVED = "resolved"


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _coordinate(raw: dict, key: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if _is_number(value):
        return str(value)
    raise DecodeError(f"Field {key!r} has unexpected type {type(value).__name__}")


def _section(raw: dict, key: str) -> dict:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise UnexpectedFormatError("Unexpected API format")
    return value


def _amount(raw: dict, key: str) -> float:
    value = raw.get(key)
    if value is None:
        return 0.0
    if not _is_number(value):
        raise UnexpectedFormatError("Unexpected API format")
    return float(value)


@dataclass(frozen=True)
class GeoCode:
    latitude: str = ""
    longitude: str = ""
    display_name: str = ""

    @classmethod
    def from_json(cls, raw: dict) -> GeoCode:
        if not isinstance(raw, dict):
            raise DecodeError("Geocode candidate is not a JSON object")
        name = raw.get("display_name")
        if name is not None and not isinstance(name, str):
            raise DecodeError("Field 'display_name' is not a string")
        return cls(
            latitude=_coordinate(raw, "lat"),
            longitude=_coordinate(raw, "lon"),
            display_name=name or "",
        )


@dataclass(frozen=True)
class Forecast:
    timestamp: str = ""
    air_temperature: float = 0.0  # °C
    wind_speed: float = 0.0  # m/s
    precipitation: float = 0.0  # mm, next hour

    @classmethod
    def from_entry(cls, entry: dict) -> Forecast:
        """Build a forecast from one ``properties.timeseries`` element."""
        if not isinstance(entry, dict):
            raise UnexpectedFormatError("Unexpected API format")
        timestamp = entry.get("time")
        if timestamp is not None and not isinstance(timestamp, str):
            raise UnexpectedFormatError("Unexpected API format")

        data = _section(entry, "data")
        instant = _section(_section(data, "instant"), "details")
        next_hour = _section(_section(data, "next_1_hours"), "details")
        return cls(
            timestamp=timestamp or "",
            air_temperature=_amount(instant, "air_temperature"),
            wind_speed=_amount(instant, "wind_speed"),
            precipitation=_amount(next_hour, "precipitation_amount"),
        )


@dataclass(frozen=True)
class Resolution:
    query: str
    status: str  # no_match, ambiguous, resolved
    candidates: tuple[GeoCode, ...] = field(default_factory=tuple)
    forecast: Optional[Forecast] = None

    @property
    def display_names(self) -> list[str]:
        return [c.display_name for c in self.candidates]
