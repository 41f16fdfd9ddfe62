"""Configuration management for the dashboard and CLI.

Loads configuration from environment variables, an optional .env file,
or a YAML settings file.
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, get_args

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .types import LogLevelType, OutputFormat

logger = logging.getLogger(__name__)

_LOG_LEVELS = get_args(LogLevelType)


@dataclass(frozen=True)
class AppConfig:
    """Presentation and runtime settings."""

    # Dashboard
    page_title: str = "Data Allocation Categorizer"
    chart_height: int = 300
    bar_color: str = "#3b82f6"

    # Rendering
    percentage_decimals: int = 1
    default_output: str = OutputFormat.TABLE.value

    # Logging
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.chart_height <= 0:
            raise ConfigurationError("chart_height", f"must be positive, got {self.chart_height}")
        if self.percentage_decimals < 0:
            raise ConfigurationError(
                "percentage_decimals", f"must not be negative, got {self.percentage_decimals}"
            )
        try:
            OutputFormat(self.default_output)
        except ValueError:
            raise ConfigurationError(
                "default_output",
                f"unknown format '{self.default_output}' "
                f"(expected one of: {', '.join(f.value for f in OutputFormat)})",
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError("log_level", f"unknown level '{self.log_level}'")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables."""
        defaults = cls()
        return cls(
            page_title=os.getenv("ALLOCATION_PAGE_TITLE", defaults.page_title),
            chart_height=_env_int("ALLOCATION_CHART_HEIGHT", defaults.chart_height),
            bar_color=os.getenv("ALLOCATION_BAR_COLOR", defaults.bar_color),
            percentage_decimals=_env_int(
                "ALLOCATION_PERCENTAGE_DECIMALS", defaults.percentage_decimals
            ),
            default_output=os.getenv("ALLOCATION_DEFAULT_OUTPUT", defaults.default_output).lower(),
            log_level=os.getenv("ALLOCATION_LOG_LEVEL", defaults.log_level).upper(),
        )

    @classmethod
    def load(cls, env_file: Optional[Path] = None) -> "AppConfig":
        """
        Load configuration from a .env file and environment variables.

        Args:
            env_file: Optional path to .env file. If not provided,
                      looks for .env in the project root.

        Returns:
            AppConfig instance with loaded values
        """
        if env_file:
            load_dotenv(env_file)
        else:
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        return cls.from_env()

    @classmethod
    def from_yaml(cls, config_path: Path | str) -> "AppConfig":
        """
        Load configuration from a YAML mapping.

        Missing or malformed files fall back to defaults. Unknown keys
        are ignored.

        Args:
            config_path: Path to the YAML settings file

        Returns:
            AppConfig instance
        """
        config_path = Path(config_path)
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            logger.warning(f"Config file not found: {config_path}, using defaults")
            return cls()
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in {config_path}: {e}")
            return cls()

        if data is None:
            return cls()
        if not isinstance(data, dict):
            logger.warning(f"Expected a mapping in {config_path}, using defaults")
            return cls()

        config = cls().merge(data)
        logger.debug(f"Loaded settings from {config_path}")
        return config

    def merge(self, overrides: dict[str, Any]) -> "AppConfig":
        """Return a copy with known keys from ``overrides`` applied."""
        known = {f.name: f.type for f in fields(self)}
        updates: dict[str, Any] = {}

        for key, value in overrides.items():
            if key not in known:
                logger.warning(f"Ignoring unknown config key '{key}'")
                continue
            if known[key] in (int, "int"):
                updates[key] = _coerce_int(key, value)
            elif key == "default_output":
                updates[key] = str(value).lower()
            elif key == "log_level":
                updates[key] = str(value).upper()
            else:
                updates[key] = str(value)

        return replace(self, **updates)


def _coerce_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(key, f"expected an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(key, f"expected an integer, got {value!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return _coerce_int(name, raw.strip())


# Global config instance (lazy loaded)
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config


def reload_config(env_file: Optional[Path] = None) -> AppConfig:
    """Reload configuration from environment."""
    global _config
    _config = AppConfig.load(env_file)
    return _config


def get_config_or_default() -> AppConfig:
    """Global configuration, or defaults when the environment is invalid."""
    try:
        return get_config()
    except ConfigurationError as e:
        logger.warning(f"{e.message}, using defaults")
        return AppConfig()
