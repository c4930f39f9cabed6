"""
Error types raised across the lookup pipeline.

Only the CLI decides what is fatal; everything below it raises.
"""


class WeatherError(Exception):
    """Base class for every error this tool raises on purpose."""


class ConfigError(WeatherError):
    pass


class MissingArgumentError(WeatherError):
    pass


class TransportError(WeatherError):
    """The HTTP request could not be completed or returned an error status."""


class DecodeError(WeatherError):
    """The geocoding body is not a JSON array of location objects."""


class UnexpectedFormatError(WeatherError):
    """The forecast body is malformed or has an empty time series."""


class LookupFailed(WeatherError):
    """A pipeline stage failed. The underlying error is chained as __cause__."""

    def __init__(self, stage: str, message: str):
        super().__init__(message)
        self.stage = stage
