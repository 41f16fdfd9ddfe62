"""Tests for configuration loading."""

from typing import get_args

import pytest

from allocation_categorizer.core import config as config_module
from allocation_categorizer.core.config import (
    AppConfig,
    get_config,
    get_config_or_default,
    reload_config,
)
from allocation_categorizer.core.exceptions import ConfigurationError
from allocation_categorizer.core.types import LogLevelType

ENV_VARS = [
    "ALLOCATION_PAGE_TITLE",
    "ALLOCATION_CHART_HEIGHT",
    "ALLOCATION_BAR_COLOR",
    "ALLOCATION_PERCENTAGE_DECIMALS",
    "ALLOCATION_DEFAULT_OUTPUT",
    "ALLOCATION_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the caller's environment and the global config."""
    for name in ENV_VARS:
        # setenv first so teardown also removes values set by load_dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(config_module, "_config", None)


class TestAppConfig:
    """Tests for AppConfig defaults and validation."""

    def test_defaults(self):
        """Test default configuration values."""
        config = AppConfig()

        assert config.page_title == "Data Allocation Categorizer"
        assert config.chart_height == 300
        assert config.percentage_decimals == 1
        assert config.default_output == "table"

    def test_invalid_output(self):
        """Test rejection of an unknown output format."""
        with pytest.raises(ConfigurationError) as exc_info:
            AppConfig(default_output="xml")
        assert exc_info.value.config_key == "default_output"

    def test_invalid_height(self):
        """Test rejection of a non-positive chart height."""
        with pytest.raises(ConfigurationError):
            AppConfig(chart_height=0)

    def test_invalid_log_level(self):
        """Test rejection of an unknown log level."""
        with pytest.raises(ConfigurationError):
            AppConfig(log_level="LOUD")

    @pytest.mark.parametrize("level", get_args(LogLevelType))
    def test_accepts_every_log_level(self, level):
        """Test that every declared log level is accepted."""
        assert AppConfig(log_level=level).log_level == level


class TestFromEnv:
    """Tests for environment loading."""

    def test_env_overrides(self, monkeypatch):
        """Test environment variable overrides."""
        monkeypatch.setenv("ALLOCATION_CHART_HEIGHT", "500")
        monkeypatch.setenv("ALLOCATION_DEFAULT_OUTPUT", "JSON")
        monkeypatch.setenv("ALLOCATION_LOG_LEVEL", "debug")

        config = AppConfig.from_env()

        assert config.chart_height == 500
        assert config.default_output == "json"
        assert config.log_level == "DEBUG"

    def test_non_integer_env(self, monkeypatch):
        """Test the error for a non-integer environment value."""
        monkeypatch.setenv("ALLOCATION_CHART_HEIGHT", "tall")

        with pytest.raises(ConfigurationError) as exc_info:
            AppConfig.from_env()
        assert exc_info.value.config_key == "ALLOCATION_CHART_HEIGHT"

    def test_env_file(self, tmp_path, monkeypatch):
        """Test loading settings from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("ALLOCATION_PAGE_TITLE=Quota Report\n", encoding="utf-8")

        config = reload_config(env_file)

        assert config.page_title == "Quota Report"
        assert get_config() is config

    def test_invalid_env_falls_back_to_defaults(self, monkeypatch):
        """Test that an invalid environment falls back to defaults."""
        monkeypatch.setenv("ALLOCATION_CHART_HEIGHT", "tall")

        assert get_config_or_default() == AppConfig()

    def test_valid_env_is_used_by_fallback_loader(self, monkeypatch):
        """Test that the fallback loader still reads valid settings."""
        monkeypatch.setenv("ALLOCATION_CHART_HEIGHT", "640")

        assert get_config_or_default().chart_height == 640


class TestFromYaml:
    """Tests for YAML settings files."""

    def test_load(self, tmp_path):
        """Test loading a YAML settings file."""
        path = tmp_path / "settings.yaml"
        path.write_text(
            "chart_height: 420\nbar_color: '#1d4ed8'\ndefault_output: CSV\n",
            encoding="utf-8",
        )

        config = AppConfig.from_yaml(path)

        assert config.chart_height == 420
        assert config.bar_color == "#1d4ed8"
        assert config.default_output == "csv"

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test that a missing file gives defaults."""
        assert AppConfig.from_yaml(tmp_path / "missing.yaml") == AppConfig()

    def test_invalid_yaml_uses_defaults(self, tmp_path):
        """Test that malformed YAML gives defaults."""
        path = tmp_path / "broken.yaml"
        path.write_text("chart_height: [1, 2\n", encoding="utf-8")

        assert AppConfig.from_yaml(path) == AppConfig()

    def test_non_mapping_uses_defaults(self, tmp_path):
        """Test that a non-mapping document gives defaults."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        assert AppConfig.from_yaml(path) == AppConfig()

    def test_unknown_keys_ignored(self, tmp_path):
        """Test that unknown keys are ignored."""
        path = tmp_path / "extra.yaml"
        path.write_text("theme: dark\npercentage_decimals: 2\n", encoding="utf-8")

        config = AppConfig.from_yaml(path)

        assert config.percentage_decimals == 2
        assert not hasattr(config, "theme")

    def test_bad_integer_raises(self, tmp_path):
        """Test the error for a non-integer YAML value."""
        path = tmp_path / "bad.yaml"
        path.write_text("chart_height: tall\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            AppConfig.from_yaml(path)
