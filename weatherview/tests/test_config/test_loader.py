"""Tests for config loading, environment overrides and dotted-key lookup."""

import json
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from weatherview.config.defaults import DEFAULT_THEMES
from weatherview.config.loader import get_config_value, load_config, redacted_json
from weatherview.config.schema import AppConfig, ThemeMode

REPO_CONFIG = Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.provider.api_key == "yaml-key"
        assert config.display.max_days == 4
        assert config.display.default_theme == "Ocean"

    def test_default_themes_injected(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert len(config.themes) == len(DEFAULT_THEMES)
        assert config.themes[0].name == "Classic"

    def test_explicit_themes_not_overridden(self, tmp_path: Path):
        path = tmp_path / "custom.yaml"
        with open(path, "w") as f:
            yaml.dump({"themes": [{"name": "Mono", "gradient": "#000"}]}, f)
        config = load_config(path)
        assert [t.name for t in config.themes] == ["Mono"]

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.display.max_days == 5
        assert config.provider.units == "metric"
        assert config.display.default_mode == ThemeMode.LIGHT

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "nope.yaml")
        assert config.provider.base_url == "https://api.openweathermap.org/data/2.5"

    def test_env_overrides(self, config_yaml_path: Path, monkeypatch):
        monkeypatch.setenv("WEATHERVIEW_API_KEY", "env-key")
        monkeypatch.setenv("WEATHERVIEW_BASE_URL", "https://proxy.example.com")
        config = load_config(config_yaml_path)
        assert config.provider.api_key == "env-key"
        assert config.provider.base_url == "https://proxy.example.com"

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"display": {"max_dayz": 3}}, f)
        with pytest.raises(ValidationError):
            load_config(path)

    def test_max_days_bounds(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"display": {"max_days": 0}}, f)
        with pytest.raises(ValidationError):
            load_config(path)

    def test_shipped_config(self):
        config = load_config(REPO_CONFIG)
        assert config.display.max_days == 5


class TestGetConfigValue:
    def test_dotted_key(self, test_config: AppConfig):
        assert get_config_value(test_config, "display.max_days") == 5

    def test_list_index(self, test_config: AppConfig):
        assert get_config_value(test_config, "themes.1.name") == "Ocean"

    def test_invalid_key(self, test_config: AppConfig):
        with pytest.raises((KeyError, AttributeError)):
            get_config_value(test_config, "nonexistent.key")


class TestRedactedJson:
    def test_masks_api_key(self, test_config: AppConfig):
        data = json.loads(redacted_json(test_config))
        assert data["provider"]["api_key"] == "***"
        assert test_config.provider.api_key == "test-key"

    def test_empty_key_stays_empty(self):
        data = json.loads(redacted_json(AppConfig()))
        assert data["provider"]["api_key"] == ""
