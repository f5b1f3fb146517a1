"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class ThemeMode(StrEnum):
    LIGHT = "light"
    DARK = "dark"


class ThemeConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    gradient: str


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openweathermap.org/data/2.5"
    api_key: str = ""
    units: str = "metric"
    timeout: float = Field(default=10.0, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_days: int = Field(default=5, ge=1, le=16)
    icon_base_url: str = "https://openweathermap.org/img/wn"
    default_theme: str = "Classic"
    default_mode: ThemeMode = ThemeMode.LIGHT


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    display: DisplayConfig = DisplayConfig()
    themes: list[ThemeConfig] = []
