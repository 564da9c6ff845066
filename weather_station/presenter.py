"""Render current weather as a decorated, colorized report."""

from __future__ import annotations

import logging

from rich.text import Text

from .domains.weather import (
    UNKNOWN_CONDITION_STYLE,
    ConditionStyle,
    WeatherResponse,
    classify_condition,
    classify_temperature,
)
from .errors import UnknownConditionError

_LOGGER = logging.getLogger(__name__)

_REPORT_TEMPLATE = (
    "Weather in {place}: {code} {glyph}\n"
    "(More Description: {description})\n"
    "> Temperature: {temp:.1f}°C {comfort} (but feels like {feels_like:.1f}°C)\n"
    "> Humidity: {humidity:.1f}%\n"
    "> Pressure: {pressure:.1f} hPa\n"
    "> Wind Speed: {wind_speed:.1f} m/s"
)


def condition_style(code: str) -> ConditionStyle:
    """Return the display style for a condition code.

    Codes outside the known set get UNKNOWN_CONDITION_STYLE so that a single
    unexpected upstream value does not end the session.
    """
    try:
        return classify_condition(code).style
    except UnknownConditionError as err:
        _LOGGER.warning("%s; using fallback style", err)
        return UNKNOWN_CONDITION_STYLE


def render(response: WeatherResponse) -> Text:
    """Compose the multi-line report, colored as a single block."""
    style = condition_style(response.condition_code)
    report = _REPORT_TEMPLATE.format(
        place=response.place_name,
        code=response.condition_code,
        glyph=style.glyph,
        description=response.condition_description,
        temp=response.temperature_c,
        comfort=classify_temperature(response.temperature_c).glyph,
        feels_like=response.feels_like_c,
        humidity=response.humidity_pct,
        pressure=response.pressure_hpa,
        wind_speed=response.wind_speed_mps,
    )
    return Text(report, style=style.rich_style)
