"""HTTP client for the OpenWeatherMap current weather endpoint."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .domains.weather import WeatherQuery, WeatherResponse
from .errors import (
    WeatherConnectionError,
    WeatherResponseError,
    WeatherSchemaError,
    WeatherTimeout,
)

_LOGGER = logging.getLogger(__name__)


class WeatherHttpClient:
    """HTTP client wrapper for the OpenWeatherMap API."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _params(self, query: WeatherQuery) -> dict[str, str]:
        # City and country code go out verbatim; aiohttp does the encoding
        return {
            "q": query.location,
            "units": "metric",
            "appid": self._api_key,
        }

    async def fetch_weather(self, city: str, country_code: str) -> WeatherResponse:
        """Fetch current conditions for a city from the /weather endpoint.

        Args:
            city: City name as typed by the user.
            country_code: Country code as typed by the user; not validated.

        Returns:
            Decoded current weather.

        Raises:
            WeatherResponseError: If the API returns a non-200 status
            WeatherSchemaError: If the body does not decode into a WeatherResponse
            WeatherTimeout: If the request times out
            WeatherConnectionError: If the network request fails
        """
        query = WeatherQuery(city=city, country_code=country_code)
        url = self._url("/weather")
        _LOGGER.debug("Requesting current weather for %s", query.location)
        try:
            async with self._session.get(
                url,
                params=self._params(query),
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                if resp.status != 200:
                    message = await _error_message(resp)
                    # Reported to the user by the caller
                    _LOGGER.debug(
                        "Weather request for %s failed: %s", query.location, message
                    )
                    raise WeatherResponseError(resp.status, message)
                payload = await _decode_json(resp)
        except TimeoutError as err:
            raise WeatherTimeout("Weather request timed out") from err
        except aiohttp.ClientError as err:
            raise WeatherConnectionError(f"Weather request failed: {err}") from err

        try:
            return WeatherResponse.from_api_payload(payload)
        except WeatherSchemaError as err:
            _LOGGER.debug("Unexpected weather payload for %s: %s", query.location, err)
            raise


class BlockingWeatherClient:
    """Run WeatherHttpClient requests to completion from synchronous code.

    The event loop only runs while a request is in flight, so terminal reads
    between requests keep the default Ctrl-C handling.
    """

    def __init__(self, runner: asyncio.Runner, client: WeatherHttpClient) -> None:
        self._runner = runner
        self._client = client

    def fetch_weather(self, city: str, country_code: str) -> WeatherResponse:
        """Block until WeatherHttpClient.fetch_weather() completes."""
        return self._runner.run(self._client.fetch_weather(city, country_code))


async def _decode_json(resp: aiohttp.ClientResponse) -> Any:
    try:
        # content_type=None accepts bodies served with a non-JSON content type
        return await resp.json(content_type=None)
    except ValueError as err:
        raise WeatherSchemaError("Weather response is not valid JSON") from err


async def _error_message(resp: aiohttp.ClientResponse) -> str:
    """Build an error message, preferring the API's own ``message`` field."""
    fallback = f"Weather API returned HTTP {resp.status}"
    try:
        body = await resp.json(content_type=None)
    except (ValueError, aiohttp.ClientError):
        return fallback
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return f"{fallback}: {body['message']}"
    return fallback
