"""Weather data models: provider samples, current conditions and daily summaries."""

from dataclasses import dataclass
from datetime import date

from weatherview.models.common import OffsetSeconds, UnixSeconds


@dataclass(frozen=True)
class WeatherCondition:
    main: str  # category label, e.g. "Clear", "Rain"
    description: str
    icon: str


@dataclass(frozen=True)
class RawForecastPoint:
    timestamp_utc: UnixSeconds
    temperature: float  # °C
    feels_like: float  # °C
    condition: WeatherCondition
    wind_speed: float = 0.0  # m/s


@dataclass(frozen=True)
class ForecastSeries:
    points: tuple[RawForecastPoint, ...]
    utc_offset_seconds: OffsetSeconds = 0
    city_name: str = ""
    country: str = ""


@dataclass(frozen=True)
class CurrentConditions:
    city_name: str
    country: str
    temperature: float
    feels_like: float
    humidity: int
    pressure: int
    wind_speed: float
    condition: WeatherCondition


@dataclass(frozen=True)
class DailySummary:
    local_date: date
    point: RawForecastPoint
    local_hour: int  # 0-23


@dataclass(frozen=True)
class SearchResult:
    current: CurrentConditions
    daily: tuple[DailySummary, ...]
    utc_offset_seconds: OffsetSeconds = 0


@dataclass(frozen=True)
class SearchFailure:
    message: str
    reason: str = ""
