"""Weather domain data structures.

This module defines the current-weather payload returned by the
OpenWeatherMap ``/weather`` endpoint, the closed set of condition codes it
reports, and the temperature comfort bands used for display.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

from ..errors import UnknownConditionError, WeatherSchemaError


class ConditionStyle(NamedTuple):
    """Display decoration for a weather condition.

    Attributes:
        glyph: Emoji shown next to the condition code.
        color: Human-readable color name.
        rich_style: Color as understood by ``rich``.
    """

    glyph: str
    color: str
    rich_style: str


class ConditionKind(Enum):
    """Main weather groups reported by OpenWeatherMap."""

    THUNDERSTORM = "Thunderstorm"
    DRIZZLE = "Drizzle"
    RAIN = "Rain"
    SNOW = "Snow"
    MIST = "Mist"
    SMOKE = "Smoke"
    HAZE = "Haze"
    DUST = "Dust"
    FOG = "Fog"
    SAND = "Sand"
    ASH = "Ash"
    SQUALL = "Squall"
    TORNADO = "Tornado"
    CLEAR = "Clear"
    CLOUDS = "Clouds"

    @property
    def style(self) -> ConditionStyle:
        """Glyph and color for this condition."""
        return _CONDITION_STYLES[self]

    @property
    def glyph(self) -> str:
        """Emoji shown after the condition code in the report header."""
        return self.style.glyph

    @property
    def color(self) -> str:
        """Color name the whole report is painted with."""
        return self.style.color


_CONDITION_STYLES: dict[ConditionKind, ConditionStyle] = {
    ConditionKind.THUNDERSTORM: ConditionStyle("⛈️", "gray", "grey50"),
    ConditionKind.DRIZZLE: ConditionStyle("🌧️", "light blue", "bright_blue"),
    ConditionKind.RAIN: ConditionStyle("☔", "blue", "blue"),
    ConditionKind.SNOW: ConditionStyle("❄️", "white", "white"),
    ConditionKind.MIST: ConditionStyle("🌫️", "light gray", "grey70"),
    ConditionKind.SMOKE: ConditionStyle("💨", "dark gray", "grey37"),
    ConditionKind.HAZE: ConditionStyle("🌫️", "light gray", "grey70"),
    ConditionKind.DUST: ConditionStyle("💨", "brown", "dark_orange3"),
    ConditionKind.FOG: ConditionStyle("🌫️", "light gray", "grey70"),
    ConditionKind.SAND: ConditionStyle("💨", "yellow", "yellow"),
    ConditionKind.ASH: ConditionStyle("💨", "dark gray", "grey37"),
    ConditionKind.SQUALL: ConditionStyle("🌪️", "dark gray", "grey37"),
    ConditionKind.TORNADO: ConditionStyle("🌪️", "dark gray", "grey37"),
    ConditionKind.CLEAR: ConditionStyle("☀️", "yellow", "yellow"),
    ConditionKind.CLOUDS: ConditionStyle("☁️", "light gray", "grey70"),
}

# Used when the API reports a code outside ConditionKind
UNKNOWN_CONDITION_STYLE = ConditionStyle("❔", "white", "white")


class ComfortBand(Enum):
    """Temperature buckets, each decorated with its own glyph."""

    COLD = "🥶️"
    COOL = "🥱"
    MILD = "😴️"
    WARM = "🤭"
    HOT = "🥵️"

    @property
    def glyph(self) -> str:
        """Emoji shown next to the current temperature."""
        return self.value


# Lower bound of each band above COLD; a threshold belongs to the higher band
_COMFORT_THRESHOLDS: tuple[tuple[float, ComfortBand], ...] = (
    (30.0, ComfortBand.HOT),
    (20.0, ComfortBand.WARM),
    (10.0, ComfortBand.MILD),
    (0.0, ComfortBand.COOL),
)


def classify_condition(code: str) -> ConditionKind:
    """Map an API condition code to its ConditionKind.

    Matching is exact and case-sensitive ("Clouds", not "clouds").

    Raises:
        UnknownConditionError: If the code is not a known condition.
    """
    try:
        return ConditionKind(code)
    except ValueError as err:
        raise UnknownConditionError(code) from err


def classify_temperature(celsius: float) -> ComfortBand:
    """Map a temperature in degrees Celsius to its comfort band."""
    for lower_bound, band in _COMFORT_THRESHOLDS:
        if celsius >= lower_bound:
            return band
    return ComfortBand.COLD


@dataclass(frozen=True)
class WeatherQuery:
    """A single city lookup entered by the user."""

    city: str
    country_code: str

    @property
    def location(self) -> str:
        """Value of the ``q`` query parameter."""
        return f"{self.city},{self.country_code}"


@dataclass(frozen=True)
class WeatherResponse:
    """Current conditions for a place.

    Attributes:
        place_name: Name of the place as resolved by the API.
        condition_code: Main condition group (e.g., "Rain").
        condition_description: Free-text description (e.g., "light rain").
        temperature_c: Air temperature in degrees Celsius.
        feels_like_c: Perceived temperature in degrees Celsius.
        humidity_pct: Relative humidity in percent.
        pressure_hpa: Atmospheric pressure in hPa.
        wind_speed_mps: Wind speed in metres per second.
    """

    place_name: str
    condition_code: str
    condition_description: str
    temperature_c: float
    feels_like_c: float
    humidity_pct: float
    pressure_hpa: float
    wind_speed_mps: float

    @classmethod
    def from_api_payload(cls, payload: Any) -> WeatherResponse:
        """Create a WeatherResponse from a decoded ``/weather`` JSON body.

        Only the first entry of the ``weather`` list is used.

        Raises:
            WeatherSchemaError: If the payload does not have the expected shape.
        """
        if not isinstance(payload, dict):
            raise WeatherSchemaError("Weather payload is not a JSON object")

        conditions = payload.get("weather")
        if not isinstance(conditions, list) or not conditions:
            raise WeatherSchemaError("Weather payload has no condition entries")
        condition = _require_section(conditions[0], "weather[0]")
        readings = _require_section(payload.get("main"), "main")
        wind = _require_section(payload.get("wind"), "wind")

        return cls(
            place_name=_require_str(payload, "name"),
            condition_code=_require_str(condition, "main"),
            condition_description=_require_str(condition, "description"),
            temperature_c=_require_number(readings, "temp"),
            feels_like_c=_require_number(readings, "feels_like"),
            humidity_pct=_require_number(readings, "humidity"),
            pressure_hpa=_require_number(readings, "pressure"),
            wind_speed_mps=_require_number(wind, "speed"),
        )


def _require_section(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise WeatherSchemaError(f"Weather payload field {name!r} is missing")
    return value


def _require_str(section: dict[str, Any], key: str) -> str:
    value = section.get(key)
    if not isinstance(value, str):
        raise WeatherSchemaError(f"Weather payload field {key!r} must be a string")
    return value


def _require_number(section: dict[str, Any], key: str) -> float:
    value = section.get(key)
    # bool is an int subclass but never a valid reading
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise WeatherSchemaError(f"Weather payload field {key!r} must be a number")
    try:
        number = float(value)
    except OverflowError as err:
        raise WeatherSchemaError(f"Weather payload field {key!r} is out of range") from err
    # The JSON decoder accepts NaN and Infinity
    if not math.isfinite(number):
        raise WeatherSchemaError(f"Weather payload field {key!r} must be finite")
    return number
