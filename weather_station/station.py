"""Interactive prompt loop for city weather lookups."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import TextIO

from rich.console import Console
from rich.text import Text

from .errors import WeatherClientError
from .http import BlockingWeatherClient
from .presenter import render

_LOGGER = logging.getLogger(__name__)

BANNER = "Welcome to Weather Station"
CITY_PROMPT = "Enter the name of the city"
COUNTRY_PROMPT = "Enter the country code"
CONTINUE_PROMPT = "Do you want to search more?"

_CONTINUE_WORDS = ("yes", "ok")


class StationState(Enum):
    """Steps of one lookup cycle."""

    PROMPT_CITY = "prompt_city"
    PROMPT_COUNTRY = "prompt_country"
    FETCHING = "fetching"
    DISPLAYING = "displaying"
    PROMPT_CONTINUE = "prompt_continue"
    TERMINATED = "terminated"


def wants_to_continue(answer: str) -> bool:
    """Return True if the answer contains "yes" or "ok" anywhere, in any case."""
    lowered = answer.lower()
    return any(word in lowered for word in _CONTINUE_WORDS)


class WeatherStation:
    """Prompt for a city, show its weather, and repeat while the user agrees.

    Client errors are reported on the error console and the session carries
    on. Errors reading or writing the terminal propagate to the caller.
    """

    def __init__(
        self,
        client: BlockingWeatherClient,
        *,
        stdin: TextIO | None = None,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self._client = client
        self._stdin = stdin if stdin is not None else sys.stdin
        self._console = console or Console(soft_wrap=True, highlight=False)
        self._error_console = error_console or Console(
            stderr=True, soft_wrap=True, highlight=False
        )
        self.state = StationState.PROMPT_CITY

    def run(self) -> None:
        """Run lookup cycles until the user declines to continue."""
        self._console.print(Text(BANNER, style="bright_yellow"))
        while True:
            self._transition(StationState.PROMPT_CITY)
            city = self._prompt(CITY_PROMPT)

            self._transition(StationState.PROMPT_COUNTRY)
            country_code = self._prompt(COUNTRY_PROMPT)

            self._transition(StationState.FETCHING)
            self._lookup(city, country_code)

            self._transition(StationState.PROMPT_CONTINUE)
            if not wants_to_continue(self._prompt(CONTINUE_PROMPT)):
                break

        self._transition(StationState.TERMINATED)

    def _lookup(self, city: str, country_code: str) -> None:
        try:
            response = self._client.fetch_weather(city, country_code)
        except WeatherClientError as err:
            self._transition(StationState.DISPLAYING)
            self._error_console.print(Text(f"Error: {err}", style="red"))
            return

        self._transition(StationState.DISPLAYING)
        self._console.print(render(response))

    def _prompt(self, message: str) -> str:
        self._console.print(Text(message, style="bright_green"))
        # readline() returns "" at end of input, which reads as an empty answer
        return self._stdin.readline().strip()

    def _transition(self, state: StationState) -> None:
        _LOGGER.debug("Station state %s -> %s", self.state.value, state.value)
        self.state = state
