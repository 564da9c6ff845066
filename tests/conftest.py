"""Pytest configuration and fixtures for weather_station tests."""

from __future__ import annotations

import io
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from rich.console import Console


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    json_error: Exception | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        json_error: Exception raised by json() instead of returning data

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response


def make_payload(
    *,
    name: str = "London",
    main: str = "Rain",
    description: str = "light rain",
    temp: float = 15.26,
    feels_like: float = 14.9,
    humidity: float = 82.0,
    pressure: float = 1012.0,
    wind_speed: float = 3.6,
) -> dict[str, Any]:
    """Build an OpenWeatherMap /weather body with the fields the client reads."""
    return {
        "coord": {"lon": -0.13, "lat": 51.51},
        "weather": [{"id": 500, "main": main, "description": description}],
        "main": {
            "temp": temp,
            "feels_like": feels_like,
            "humidity": humidity,
            "pressure": pressure,
        },
        "wind": {"speed": wind_speed, "deg": 240},
        "name": name,
        "cod": 200,
    }


def make_console() -> tuple[Console, io.StringIO]:
    """Create a non-terminal console that records output without styling."""
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, soft_wrap=True, width=200)
    return console, buffer
