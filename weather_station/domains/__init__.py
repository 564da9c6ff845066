"""Domain-specific data structures and helpers.

This package contains the weather types decoded from the OpenWeatherMap API.
"""

from .weather import (
    UNKNOWN_CONDITION_STYLE,
    ComfortBand,
    ConditionKind,
    ConditionStyle,
    WeatherQuery,
    WeatherResponse,
    classify_condition,
    classify_temperature,
)

__all__ = [
    "UNKNOWN_CONDITION_STYLE",
    "ComfortBand",
    "ConditionKind",
    "ConditionStyle",
    "WeatherQuery",
    "WeatherResponse",
    "classify_condition",
    "classify_temperature",
]
