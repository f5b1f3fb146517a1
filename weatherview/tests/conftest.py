"""Shared test fixtures."""

from calendar import timegm
from pathlib import Path

import pytest
import yaml

from weatherview.config.defaults import DEFAULT_THEMES
from weatherview.config.schema import AppConfig, ProviderConfig
from weatherview.models.weather import RawForecastPoint, WeatherCondition

OWM_TEST_URL = "https://test-owm.example.com/data/2.5"
FORECAST_START = timegm((2024, 3, 1, 0, 0, 0))  # 2024-03-01 00:00 UTC


def _forecast_item(dt: int, temp: float) -> dict:
    return {
        "dt": dt,
        "main": {"temp": temp, "feels_like": temp - 1.5},
        "weather": [{"main": "Clouds", "description": "clouds", "icon": "04d"}],
        "wind": {"speed": 3.2},
    }


def _forecast(start: int = FORECAST_START, count: int = 40, timezone: int | None = 25200) -> dict:
    city: dict = {"name": "Hanoi", "country": "VN"}
    if timezone is not None:
        city["timezone"] = timezone
    return {
        "list": [_forecast_item(start + i * 3 * 3600, 20.0 + i % 8) for i in range(count)],
        "city": city,
    }


@pytest.fixture
def owm_url() -> str:
    """Base URL of the fake OpenWeatherMap host."""
    return OWM_TEST_URL


@pytest.fixture
def clear_sky() -> WeatherCondition:
    return WeatherCondition(main="Clear", description="clear sky", icon="01d")


@pytest.fixture
def make_point(clear_sky: WeatherCondition):
    """Factory for forecast points with a fixed clear-sky condition."""

    def _make(timestamp_utc: int, temperature: float = 20.0) -> RawForecastPoint:
        return RawForecastPoint(
            timestamp_utc=timestamp_utc,
            temperature=temperature,
            feels_like=temperature - 1,
            condition=clear_sky,
        )

    return _make


@pytest.fixture
def current_payload() -> dict:
    """A /weather response for Hanoi."""
    return {
        "name": "Hanoi",
        "sys": {"country": "VN"},
        "main": {"temp": 31.4, "feels_like": 35.6, "humidity": 70, "pressure": 1008},
        "weather": [{"main": "Clouds", "description": "scattered clouds", "icon": "03d"}],
        "wind": {"speed": 3.1},
    }


@pytest.fixture
def forecast_payload() -> dict:
    """A /forecast response: 40 points from 2024-03-01 00:00 UTC at UTC+7."""
    return _forecast()


@pytest.fixture
def forecast_factory():
    """Build /forecast responses with a custom start, length or timezone."""
    return _forecast


@pytest.fixture
def test_config() -> AppConfig:
    """AppConfig pointed at the fake provider host."""
    return AppConfig(
        provider=ProviderConfig(base_url=OWM_TEST_URL, api_key="test-key"),
        themes=DEFAULT_THEMES,
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"base_url": OWM_TEST_URL, "api_key": "yaml-key"},
        "display": {"max_days": 4, "default_theme": "Ocean"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture(autouse=True)
def _clear_provider_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WEATHERVIEW_API_KEY", raising=False)
    monkeypatch.delenv("WEATHERVIEW_BASE_URL", raising=False)
