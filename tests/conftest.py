import json
from unittest.mock import Mock

import pytest
import requests

from config import Settings


STOCKHOLM = {"lat": "59.33", "lon": "18.06", "display_name": "Stockholm"}

STOCKHOLM_FORECAST = {
    "type": "Feature",
    "properties": {
        "timeseries": [
            {
                "time": "2024-01-01T12:00:00Z",
                "data": {
                    "instant": {"details": {"air_temperature": 5.2, "wind_speed": 3.1}},
                    "next_1_hours": {"details": {"precipitation_amount": 0.0}},
                },
            },
        ]
    },
}


def make_response(payload=None, status: int = 200, body: bytes = None) -> Mock:
    resp = Mock()
    resp.status_code = status
    resp.content = body if body is not None else json.dumps(payload).encode("utf-8")
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    else:
        resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def settings():
    return Settings(
        user_agent="weather-tests/1.0 tests@example.com",
        geocode_api_url="https://geo.example/search",
        forecast_api_url="https://met.example/compact",
        timeout=5.0,
    )
