"""Weather lookup API: FastAPI backend serving search results and theme data."""

import os
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from weatherview.config.loader import load_config
from weatherview.config.schema import AppConfig, ThemeMode
from weatherview.display.formatters import state_to_dict
from weatherview.display.state import (
    EditCity,
    ToggleMode,
    initial_state,
    submit_search,
    update,
)
from weatherview.display.themes import background_for
from weatherview.ingest.openweather_client import OpenWeatherClientError
from weatherview.pipeline.search_pipeline import SearchPipeline, sanitize_city

CONFIG_PATH = os.environ.get("WEATHERVIEW_CONFIG", "configs/default.yaml")

app = FastAPI(title="Weather Lookup", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache
def get_config() -> AppConfig:
    return load_config(CONFIG_PATH)


def get_pipeline(
    city: str = "", config: AppConfig = Depends(get_config)
) -> SearchPipeline:
    if not sanitize_city(city):
        raise HTTPException(400, "City name required")
    try:
        return SearchPipeline(config)
    except OpenWeatherClientError as e:
        raise HTTPException(503, str(e)) from e


# ── Data endpoints ──────────────────────────────────────────────


@app.get("/api/weather")
async def get_weather(
    city: str = "",
    mode: ThemeMode | None = None,
    config: AppConfig = Depends(get_config),
    pipeline: SearchPipeline = Depends(get_pipeline),
):
    """Current conditions plus up to max_days daily forecast entries."""
    if not sanitize_city(city):
        raise HTTPException(400, "City name required")

    state = update(initial_state(config), EditCity(city))
    if mode is not None and mode != state.mode:
        state = update(state, ToggleMode())
    state = await submit_search(state, pipeline)
    if state.error:
        raise HTTPException(502, state.error)
    return state_to_dict(state, config.display.icon_base_url, config.themes)


@app.get("/api/themes")
def get_themes(config: AppConfig = Depends(get_config)):
    return {
        "default": config.display.default_theme,
        "default_mode": str(config.display.default_mode),
        "themes": [t.model_dump() for t in config.themes],
    }


@app.get("/api/background")
def get_background(condition: str = "", mode: ThemeMode = ThemeMode.LIGHT):
    return {"condition": condition, "mode": str(mode), "background": background_for(condition, mode)}


@app.get("/api/health")
def get_health():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8777)
