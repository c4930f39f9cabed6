from unittest.mock import Mock

import pytest
import requests

import fetcher
from config import DEFAULT_TIMEOUT
from errors import TransportError
from conftest import make_response


def test_fetch_sends_user_agent_params_and_timeout(monkeypatch):
    get = Mock(return_value=make_response(body=b"[]"))
    monkeypatch.setattr(fetcher.requests, "get", get)

    body = fetcher.fetch("agent/1.0", "https://geo.example/search", params={"q": "Oslo"}, timeout=3)

    assert body == b"[]"
    get.assert_called_once()
    args, kwargs = get.call_args
    assert args == ("https://geo.example/search",)
    assert kwargs["params"] == {"q": "Oslo"}
    assert kwargs["headers"] == {"User-Agent": "agent/1.0"}
    assert kwargs["timeout"] == 3


def test_fetch_defaults_to_bounded_timeout(monkeypatch):
    get = Mock(return_value=make_response(body=b"{}"))
    monkeypatch.setattr(fetcher.requests, "get", get)

    fetcher.fetch("agent/1.0", "https://met.example/compact")

    assert get.call_args.kwargs["timeout"] == DEFAULT_TIMEOUT


def test_connection_error_becomes_transport_error(monkeypatch):
    cause = requests.ConnectionError("connection refused")
    monkeypatch.setattr(fetcher.requests, "get", Mock(side_effect=cause))

    with pytest.raises(TransportError) as exc_info:
        fetcher.fetch("agent/1.0", "https://geo.example/search")

    assert exc_info.value.__cause__ is cause


def test_timeout_becomes_transport_error(monkeypatch):
    monkeypatch.setattr(fetcher.requests, "get", Mock(side_effect=requests.Timeout("read timed out")))

    with pytest.raises(TransportError):
        fetcher.fetch("agent/1.0", "https://geo.example/search")


@pytest.mark.parametrize("status", [403, 404, 500, 503])
def test_error_status_becomes_transport_error(monkeypatch, status):
    resp = make_response(body=b"<html>nope</html>", status=status)
    monkeypatch.setattr(fetcher.requests, "get", Mock(return_value=resp))

    with pytest.raises(TransportError) as exc_info:
        fetcher.fetch("agent/1.0", "https://geo.example/search")

    assert isinstance(exc_info.value.__cause__, requests.HTTPError)


def test_unencodable_user_agent_becomes_transport_error(monkeypatch):
    # http.client raises this while writing a non-latin-1 header value
    cause = UnicodeEncodeError("latin-1", "weather/1.0 (contact: €@example.com)", 22, 23, "ordinal not in range(256)")
    monkeypatch.setattr(fetcher.requests, "get", Mock(side_effect=cause))

    with pytest.raises(TransportError) as exc_info:
        fetcher.fetch("weather/1.0 (contact: €@example.com)", "https://geo.example/search")

    assert exc_info.value.__cause__ is cause


@pytest.mark.parametrize("body", [b"NaN", b"[Infinity]", b'{"t": -Infinity}'])
def test_loads_rejects_non_standard_constants(body):
    with pytest.raises(ValueError):
        fetcher.loads(body)


def test_loads_accepts_plain_json():
    assert fetcher.loads(b'{"t": 5.2, "n": null}') == {"t": 5.2, "n": None}
