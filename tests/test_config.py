"""Tests for WeatherConfig.from_env()."""

from __future__ import annotations

import pytest

from weather_station.config import DEFAULT_BASE_URL, WeatherConfig
from weather_station.errors import ConfigError


class TestFromEnv:
    """Environment variable parsing."""

    def test_defaults(self) -> None:
        config = WeatherConfig.from_env({"OPENWEATHER_API_KEY": "abc123"})

        assert config == WeatherConfig(api_key="abc123")
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == 10.0
        assert config.log_level == "WARNING"

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENWEATHER_API_KEY", " from-env \n")
        monkeypatch.delenv("WEATHER_STATION_TIMEOUT", raising=False)

        assert WeatherConfig.from_env().api_key == "from-env"

    @pytest.mark.parametrize("environ", [{}, {"OPENWEATHER_API_KEY": "   "}])
    def test_missing_api_key(self, environ: dict[str, str]) -> None:
        with pytest.raises(ConfigError, match="OPENWEATHER_API_KEY"):
            WeatherConfig.from_env(environ)

    def test_overrides(self) -> None:
        config = WeatherConfig.from_env(
            {
                "OPENWEATHER_API_KEY": "abc123",
                "WEATHER_STATION_BASE_URL": "http://localhost:9000/data/2.5/",
                "WEATHER_STATION_TIMEOUT": "2.5",
                "WEATHER_STATION_LOG_LEVEL": "debug",
            }
        )

        assert config.base_url == "http://localhost:9000/data/2.5"
        assert config.timeout == 2.5
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["soon", "0", "-1"])
    def test_invalid_timeout(self, raw: str) -> None:
        with pytest.raises(ConfigError, match="WEATHER_STATION_TIMEOUT"):
            WeatherConfig.from_env(
                {"OPENWEATHER_API_KEY": "abc123", "WEATHER_STATION_TIMEOUT": raw}
            )

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ConfigError, match="WEATHER_STATION_LOG_LEVEL"):
            WeatherConfig.from_env(
                {"OPENWEATHER_API_KEY": "abc123", "WEATHER_STATION_LOG_LEVEL": "LOUD"}
            )
