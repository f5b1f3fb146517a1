"""Search pipeline: concurrent current + forecast fetch, then daily reduction."""

import asyncio
import logging

from weatherview.config.schema import AppConfig
from weatherview.forecast.daily_reducer import reduce_daily
from weatherview.ingest.openweather_client import OpenWeatherClient
from weatherview.ingest.payload_parser import parse_current_conditions, parse_forecast
from weatherview.models.common import FETCH_FAILED_MESSAGE
from weatherview.models.weather import SearchFailure, SearchResult

logger = logging.getLogger(__name__)


class InvalidCityError(ValueError):
    """Raised for a blank city name; no request is issued."""


def sanitize_city(city: str | None) -> str:
    return (city or "").strip()


class SearchPipeline:
    def __init__(self, config: AppConfig, client: OpenWeatherClient | None = None):
        self.config = config
        self.client = client or OpenWeatherClient(
            api_key=config.provider.api_key,
            base_url=config.provider.base_url,
            units=config.provider.units,
            timeout=config.provider.timeout,
        )

    async def search(self, city: str) -> SearchResult | SearchFailure:
        """Look up current conditions and a daily forecast for a city.

        Raises InvalidCityError for blank input. Every fetch or parse
        failure is returned as a SearchFailure; partial data is dropped.
        """
        name = sanitize_city(city)
        if not name:
            raise InvalidCityError("City name is empty")

        # Both requests run to completion; the first failure wins.
        current_raw, forecast_raw = await asyncio.gather(
            self.client.get_current_weather(name),
            self.client.get_forecast(name),
            return_exceptions=True,
        )
        for outcome in (current_raw, forecast_raw):
            if isinstance(outcome, BaseException):
                logger.warning("Weather fetch failed for %r: %s", name, outcome)
                return SearchFailure(message=FETCH_FAILED_MESSAGE, reason=str(outcome))

        try:
            current = parse_current_conditions(current_raw)
            series = parse_forecast(forecast_raw)
        except ValueError as e:
            logger.exception("Unusable weather payload for %r", name)
            return SearchFailure(message=FETCH_FAILED_MESSAGE, reason=str(e))

        daily = reduce_daily(
            series.points, series.utc_offset_seconds, self.config.display.max_days
        )
        logger.info(
            "Search %r: %d forecast points -> %d days (offset %+ds)",
            name, len(series.points), len(daily), series.utc_offset_seconds,
        )
        return SearchResult(
            current=current,
            daily=tuple(daily),
            utc_offset_seconds=series.utc_offset_seconds,
        )
