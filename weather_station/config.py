"""Configuration sourced from environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from .errors import ConfigError

DEFAULT_BASE_URL: Final = "https://api.openweathermap.org/data/2.5"
DEFAULT_TIMEOUT: Final = 10.0
DEFAULT_LOG_LEVEL: Final = "WARNING"

ENV_API_KEY: Final = "OPENWEATHER_API_KEY"
ENV_BASE_URL: Final = "WEATHER_STATION_BASE_URL"
ENV_TIMEOUT: Final = "WEATHER_STATION_TIMEOUT"
ENV_LOG_LEVEL: Final = "WEATHER_STATION_LOG_LEVEL"


@dataclass(frozen=True)
class WeatherConfig:
    """Runtime settings for a weather station session.

    Attributes:
        api_key: OpenWeatherMap API key.
        base_url: API base URL, without trailing slash.
        timeout: Total request timeout in seconds.
        log_level: Name of the logging level for the CLI.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> WeatherConfig:
        """Build configuration from the process environment.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            Validated configuration.

        Raises:
            ConfigError: If the API key is missing or a value is malformed.
        """
        env = os.environ if environ is None else environ

        api_key = env.get(ENV_API_KEY, "").strip()
        if not api_key:
            raise ConfigError(f"Required environment variable {ENV_API_KEY} is not set")

        base_url = env.get(ENV_BASE_URL, "").strip() or DEFAULT_BASE_URL

        return cls(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            timeout=_parse_timeout(env.get(ENV_TIMEOUT)),
            log_level=_parse_log_level(env.get(ENV_LOG_LEVEL)),
        )


def _parse_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as err:
        raise ConfigError(f"{ENV_TIMEOUT} must be a number, got {raw!r}") from err
    if timeout <= 0:
        raise ConfigError(f"{ENV_TIMEOUT} must be positive, got {raw!r}")
    return timeout


def _parse_log_level(raw: str | None) -> str:
    if raw is None or not raw.strip():
        return DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{ENV_LOG_LEVEL} is not a logging level: {raw!r}")
    return level
