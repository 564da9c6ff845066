"""Command-line entry point for the weather station."""

from __future__ import annotations

import asyncio
import logging

import aiohttp
from rich.console import Console
from rich.text import Text

from .config import WeatherConfig
from .errors import ConfigError
from .http import BlockingWeatherClient, WeatherHttpClient
from .station import WeatherStation

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


async def _open_session() -> aiohttp.ClientSession:
    # ClientSession binds to the loop that is running when it is created
    return aiohttp.ClientSession()


def run_station(config: WeatherConfig, runner: asyncio.Runner) -> None:
    """Open an HTTP session on the runner and run the station until it ends.

    Prompts run outside the event loop; only requests are driven by the runner.
    """
    session = runner.run(_open_session())
    try:
        client = WeatherHttpClient(
            session,
            config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
        )
        WeatherStation(BlockingWeatherClient(runner, client)).run()
    finally:
        runner.run(session.close())


def main() -> int:
    """Run the weather station and return the process exit code."""
    try:
        config = WeatherConfig.from_env()
    except ConfigError as err:
        Console(stderr=True).print(Text(f"Error: {err}", style="red"))
        return EXIT_CONFIG_ERROR

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGER.debug("Using weather API at %s", config.base_url)

    try:
        with asyncio.Runner() as runner:
            run_station(config, runner)
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED
    return EXIT_OK
