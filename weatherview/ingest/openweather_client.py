"""OpenWeatherMap API client for current conditions and the 5-day/3-hour forecast."""

import logging
import os

import httpx

logger = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_UNITS = "metric"


class OpenWeatherClientError(Exception):
    """Raised when the OpenWeatherMap API returns an error or is unreachable."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenWeatherClient:
    """Async wrapper around the /weather and /forecast endpoints.

    The API key travels as the ``appid`` query parameter. Each call opens
    its own AsyncClient; there is no retry, the timeout is the only bound.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OPENWEATHER_BASE_URL,
        units: str = DEFAULT_UNITS,
        timeout: float = 10.0,
    ):
        self.api_key = api_key or os.environ.get("WEATHERVIEW_API_KEY", "")
        if not self.api_key:
            raise OpenWeatherClientError("WEATHERVIEW_API_KEY not set")
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.timeout = timeout

    async def get_current_weather(self, city: str) -> dict:
        """Fetch current conditions for a city by name."""
        return await self._get("/weather", city)

    async def get_forecast(self, city: str) -> dict:
        """Fetch the 3-hour forecast series (with city metadata) for a city."""
        return await self._get("/forecast", city)

    async def _get(self, endpoint: str, city: str) -> dict:
        url = f"{self.base_url}{endpoint}"
        params = {"q": city, "appid": self.api_key, "units": self.units}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params)
        except httpx.RequestError as e:
            logger.error("OpenWeather request failed: %s q=%s -> %s", endpoint, city, e)
            raise OpenWeatherClientError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            logger.error(
                "OpenWeather %d: %s q=%s -> %s",
                resp.status_code, endpoint, city, resp.text[:200],
            )
            raise OpenWeatherClientError(
                f"HTTP {resp.status_code} from {endpoint}", resp.status_code
            )
        try:
            return resp.json()
        except ValueError as e:
            raise OpenWeatherClientError(f"Invalid JSON from {endpoint}: {e}") from e
