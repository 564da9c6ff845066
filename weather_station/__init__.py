"""Interactive current-weather lookup for the terminal.

Queries the OpenWeatherMap API for a city and prints a colorized report.
"""

__version__ = "0.1.0"

from .config import WeatherConfig
from .domains.weather import (
    ComfortBand,
    ConditionKind,
    WeatherQuery,
    WeatherResponse,
    classify_condition,
    classify_temperature,
)
from .errors import (
    ConfigError,
    UnknownConditionError,
    WeatherClientError,
    WeatherConnectionError,
    WeatherResponseError,
    WeatherSchemaError,
    WeatherStationError,
    WeatherTimeout,
)
from .http import BlockingWeatherClient, WeatherHttpClient
from .presenter import render
from .station import StationState, WeatherStation, wants_to_continue

__all__ = [
    "BlockingWeatherClient",
    "ComfortBand",
    "ConditionKind",
    "ConfigError",
    "StationState",
    "UnknownConditionError",
    "WeatherClientError",
    "WeatherConfig",
    "WeatherConnectionError",
    "WeatherHttpClient",
    "WeatherQuery",
    "WeatherResponse",
    "WeatherResponseError",
    "WeatherSchemaError",
    "WeatherStation",
    "WeatherStationError",
    "WeatherTimeout",
    "__version__",
    "classify_condition",
    "classify_temperature",
    "render",
    "wants_to_continue",
]
