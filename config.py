"""
Configuration — loads from .env, provides defaults.

Values from the process environment win over values in the file.
"""

from __future__ import annotations
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from errors import ConfigError

DEFAULT_ENV_FILE = ".env"
DEFAULT_TIMEOUT = 10.0  # seconds
DEFAULT_LOG_LEVEL = "INFO"

REQUIRED_KEYS = ("USERAGENT", "GEOCODEAPIURL", "FORECASTAPIURL")


@dataclass(frozen=True)
class Settings:
    user_agent: str
    geocode_api_url: str
    forecast_api_url: str
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def _read_env_file(path: Path) -> dict:
    if not path.is_file():
        raise ConfigError(f"Error reading {path} file")
    try:
        values = dotenv_values(path)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading {path} file") from e
    return {k: v for k, v in values.items() if v is not None}


def _parse_timeout(raw: Optional[str]) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigError(f"REQUESTTIMEOUT must be a number, got {raw!r}") from e
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError(f"REQUESTTIMEOUT must be a positive finite number, got {raw!r}")
    return timeout


def _parse_user_agent(raw: str) -> str:
    value = raw.strip()
    try:
        value.encode("latin-1")
    except UnicodeEncodeError as e:
        raise ConfigError(f"USERAGENT must be latin-1 text, got {raw!r}") from e
    return value


def _parse_log_level(raw: Optional[str]) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"LOGLEVEL is not a logging level: {raw!r}")
    return level


def load_settings(
    env_file: str | os.PathLike = DEFAULT_ENV_FILE,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Build Settings from a dotenv file overlaid with environment variables.
    Raises ConfigError if the file is unreadable or a required key is empty.
    """
    values = _read_env_file(Path(env_file))
    source = os.environ if environ is None else environ
    for key in (*REQUIRED_KEYS, "REQUESTTIMEOUT", "LOGLEVEL"):
        if source.get(key):
            values[key] = source[key]

    missing = [key for key in REQUIRED_KEYS if not values.get(key, "").strip()]
    if missing:
        raise ConfigError(f"Missing configuration: {', '.join(missing)}")

    return Settings(
        user_agent=_parse_user_agent(values["USERAGENT"]),
        geocode_api_url=values["GEOCODEAPIURL"].strip(),
        forecast_api_url=values["FORECASTAPIURL"].strip(),
        timeout=_parse_timeout(values.get("REQUESTTIMEOUT")),
        log_level=_parse_log_level(values.get("LOGLEVEL")),
    )
