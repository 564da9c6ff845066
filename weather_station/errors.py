"""Error types for the weather station client and presenter."""

from __future__ import annotations


class WeatherStationError(Exception):
    """Base error for all weather station failures."""


class ConfigError(WeatherStationError):
    """Environment configuration is missing or invalid."""


class UnknownConditionError(WeatherStationError):
    """Condition code outside the known OpenWeatherMap vocabulary."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Unknown weather condition: {code!r}")
        self.code = code


class WeatherClientError(WeatherStationError):
    """Base error for weather API client failures."""


class WeatherTimeout(WeatherClientError):
    """No complete response arrived within the configured request timeout."""


class WeatherConnectionError(WeatherClientError):
    """The request never got a response (DNS failure, refused connection, ...)."""


class WeatherResponseError(WeatherClientError):
    """The API answered with a non-200 status, e.g. 404 for an unknown city.

    Attributes:
        status: HTTP status code returned by the API.
    """

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


class WeatherSchemaError(WeatherClientError):
    """Response body does not match the expected weather payload."""
