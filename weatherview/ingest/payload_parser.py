"""Convert raw OpenWeatherMap JSON payloads into weather models."""

from weatherview.models.weather import (
    CurrentConditions,
    ForecastSeries,
    RawForecastPoint,
    WeatherCondition,
)


class MalformedPayloadError(ValueError):
    """Raised when a provider payload lacks required fields."""


def parse_current_conditions(raw: dict) -> CurrentConditions:
    """Parse a /weather response."""
    try:
        main = raw["main"]
        return CurrentConditions(
            city_name=str(raw.get("name", "")),
            country=str((raw.get("sys") or {}).get("country", "")),
            temperature=float(main["temp"]),
            feels_like=float(main["feels_like"]),
            humidity=int(main.get("humidity", 0)),
            pressure=int(main.get("pressure", 0)),
            wind_speed=float((raw.get("wind") or {}).get("speed", 0.0)),
            condition=_parse_condition(raw.get("weather")),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise MalformedPayloadError(f"Bad current-conditions payload: {e!r}") from e


def parse_forecast(raw: dict) -> ForecastSeries:
    """Parse a /forecast response.

    Items keep provider order. A missing ``city.timezone`` means offset 0.
    """
    try:
        items = raw["list"]
        city = raw.get("city") or {}
        points = tuple(_parse_point(item) for item in items)
        return ForecastSeries(
            points=points,
            utc_offset_seconds=int(city.get("timezone") or 0),
            city_name=str(city.get("name", "")),
            country=str(city.get("country", "")),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise MalformedPayloadError(f"Bad forecast payload: {e!r}") from e


def _parse_point(item: dict) -> RawForecastPoint:
    main = item["main"]
    return RawForecastPoint(
        timestamp_utc=int(item["dt"]),
        temperature=float(main["temp"]),
        feels_like=float(main["feels_like"]),
        condition=_parse_condition(item.get("weather")),
        wind_speed=float((item.get("wind") or {}).get("speed", 0.0)),
    )


def _parse_condition(entries: list | None) -> WeatherCondition:
    if not entries:
        raise ValueError("empty weather list")
    first = entries[0]
    return WeatherCondition(
        main=str(first.get("main", "")),
        description=str(first.get("description", "")),
        icon=str(first.get("icon", "")),
    )
