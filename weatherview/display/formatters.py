"""Output formatters for search results."""

import json
import math
from datetime import date

from weatherview.config.defaults import DEFAULT_THEMES
from weatherview.config.schema import ThemeConfig
from weatherview.display.state import DisplayState
from weatherview.display.themes import background_for, find_theme

ICON_BASE_URL = "https://openweathermap.org/img/wn"


def icon_url(icon: str, base_url: str = ICON_BASE_URL, scale: int = 4) -> str:
    return f"{base_url.rstrip('/')}/{icon}@{scale}x.png"


def round_half_up(value: float) -> int:
    """Round .5 away from zero on the positive side, like a display would."""
    return math.floor(value + 0.5)


def weekday_label(day: date) -> str:
    return day.strftime("%a")


def format_search_text(state: DisplayState) -> str:
    """Plain text rendering of the current display state."""
    if state.error:
        return state.error
    if state.current is None:
        return ""

    c = state.current
    location = f"{c.city_name}, {c.country}" if c.country else c.city_name
    lines = [
        f"=== {location} ({state.theme_name} theme, {state.mode}) ===",
        f"{round_half_up(c.temperature)}°C  {c.condition.description}",
        f"Feels like {round_half_up(c.feels_like)}°C | Humidity {c.humidity}% | "
        f"Wind {c.wind_speed} m/s | Pressure {c.pressure} hPa",
    ]
    if state.daily:
        lines.append("Forecast:")
    for d in state.daily:
        lines.append(
            f"  {weekday_label(d.local_date)} {d.local_date.isoformat()}  "
            f"{round_half_up(d.point.temperature)}°  {d.point.condition.main}"
        )
    return "\n".join(lines)


def format_search_json(
    state: DisplayState,
    icon_base_url: str = ICON_BASE_URL,
    themes: list[ThemeConfig] | None = None,
) -> str:
    return json.dumps(state_to_dict(state, icon_base_url, themes), indent=2)


def state_to_dict(
    state: DisplayState,
    icon_base_url: str = ICON_BASE_URL,
    themes: list[ThemeConfig] | None = None,
) -> dict:
    """JSON-ready view of the display state."""
    try:
        theme_gradient = find_theme(state.theme_name, themes).gradient
    except KeyError:
        theme_gradient = DEFAULT_THEMES[0].gradient

    data: dict = {
        "theme": state.theme_name,
        "theme_gradient": theme_gradient,
        "mode": str(state.mode),
        "error": state.error or None,
        "current": None,
        "daily": [],
    }
    c = state.current
    if c is not None:
        data["background"] = background_for(c.condition.main, state.mode)
        data["current"] = {
            "city": c.city_name,
            "country": c.country,
            "temperature": round_half_up(c.temperature),
            "feels_like": round_half_up(c.feels_like),
            "humidity": c.humidity,
            "pressure": c.pressure,
            "wind_speed": c.wind_speed,
            "condition": c.condition.main,
            "description": c.condition.description,
            "icon_url": icon_url(c.condition.icon, icon_base_url, scale=4),
        }
    data["daily"] = [
        {
            "date": d.local_date.isoformat(),
            "weekday": weekday_label(d.local_date),
            "local_hour": d.local_hour,
            "temperature": round_half_up(d.point.temperature),
            "condition": d.point.condition.main,
            "description": d.point.condition.description,
            "icon_url": icon_url(d.point.condition.icon, icon_base_url, scale=2),
        }
        for d in state.daily
    ]
    return data
