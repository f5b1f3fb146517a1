"""CLI entry point for the weather lookup display."""

import argparse
import asyncio
import logging

import yaml
from pydantic import ValidationError

from weatherview.config.loader import get_config_value, load_config, redacted_json
from weatherview.display.formatters import format_search_json, format_search_text
from weatherview.display.state import (
    EditCity,
    SelectTheme,
    ToggleMode,
    initial_state,
    submit_search,
    update,
)
from weatherview.display.themes import find_theme
from weatherview.ingest.openweather_client import OpenWeatherClientError
from weatherview.pipeline.search_pipeline import SearchPipeline, sanitize_city

DEFAULT_CONFIG = "configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherview",
        description="Current weather and 5-day forecast lookup",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # search
    search_p = sub.add_parser("search", help="Look up a city")
    search_p.add_argument("city", help="City name, e.g. 'Hanoi'")
    search_p.add_argument("--json", action="store_true", help="JSON output")
    search_p.add_argument("--theme", help="Colour theme name")
    search_p.add_argument(
        "--dark", action="store_true", help="Toggle light/dark mode"
    )

    # themes
    sub.add_parser("themes", help="List colour themes")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. display.max_days")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (ValidationError, yaml.YAMLError) as e:
        print(f"Error: invalid config {args.config}: {e}")
        return 1

    if args.command == "search":
        return _cmd_search(config, args)
    elif args.command == "themes":
        return _cmd_themes(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_search(config, args) -> int:
    if not sanitize_city(args.city):
        return 2

    state = initial_state(config)
    if args.theme:
        try:
            theme = find_theme(args.theme, config.themes)
        except KeyError as e:
            print(f"Error: {e.args[0]}")
            return 1
        state = update(state, SelectTheme(theme.name))
    if args.dark:
        state = update(state, ToggleMode())
    state = update(state, EditCity(args.city))

    try:
        pipeline = SearchPipeline(config)
    except OpenWeatherClientError as e:
        print(f"Error: {e}")
        return 1

    state = asyncio.run(submit_search(state, pipeline))

    if args.json:
        print(format_search_json(state, config.display.icon_base_url, config.themes))
    else:
        print(format_search_text(state))
    return 1 if state.error else 0


def _cmd_themes(config) -> int:
    for theme in config.themes:
        marker = "*" if theme.name == config.display.default_theme else " "
        print(f"{marker} {theme.name}: {theme.gradient}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted_json(config))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        if args.key.startswith("provider.api_key"):
            value = "***" if value else ""
        print(value)
        return 0
    else:
        print("Use: config show | config get key")
        return 1
