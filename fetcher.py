"""
HTTP fetcher — one GET per call, identified by a User-Agent header.

Public geocoding/forecast services (Nominatim, MET Norway) reject
anonymous clients, so every request carries the configured agent string.
"""

import json
import logging
from typing import Optional

import requests

from config import DEFAULT_TIMEOUT
from errors import TransportError

log = logging.getLogger(__name__)


def fetch(
    user_agent: str,
    url: str,
    params: Optional[dict] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> bytes:
    """GET ``url`` and return the raw body. Raises TransportError on failure."""
    headers = {"User-Agent": user_agent}
    log.debug(f"GET {url} params={params}")
    try:
        resp = requests.get(url, params=params, headers=headers, timeout=timeout)
        resp.raise_for_status()
        body = resp.content
    except (requests.RequestException, UnicodeError) as e:
        # http.client encodes header values as latin-1
        log.debug(f"GET {url} failed: {e}")
        raise TransportError(f"Request to {url} failed: {e}") from e
    log.debug(f"GET {url} -> {resp.status_code}, {len(body)} bytes")
    return body


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def loads(body: bytes):
    """Strict JSON decode: NaN, Infinity and -Infinity raise ValueError."""
    return json.loads(body, parse_constant=_reject_constant)
