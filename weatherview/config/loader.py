"""YAML config loader with environment overrides and dotted-key lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from weatherview.config.defaults import DEFAULT_THEMES
from weatherview.config.schema import AppConfig

API_KEY_ENV = "WEATHERVIEW_API_KEY"
BASE_URL_ENV = "WEATHERVIEW_BASE_URL"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing file yields the built-in defaults. If no themes are specified,
    injects DEFAULT_THEMES. WEATHERVIEW_API_KEY and WEATHERVIEW_BASE_URL
    override the provider section.
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    if "themes" not in raw or not raw["themes"]:
        raw["themes"] = [t.model_dump() for t in DEFAULT_THEMES]

    provider = dict(raw.get("provider") or {})
    if os.environ.get(API_KEY_ENV):
        provider["api_key"] = os.environ[API_KEY_ENV]
    if os.environ.get(BASE_URL_ENV):
        provider["base_url"] = os.environ[BASE_URL_ENV]
    raw["provider"] = provider

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'display.max_days'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted_json(config: AppConfig) -> str:
    """Config as indented JSON with the provider API key masked."""
    masked = "***" if config.provider.api_key else ""
    redacted = config.model_copy(
        update={"provider": config.provider.model_copy(update={"api_key": masked})}
    )
    return redacted.model_dump_json(indent=2)
