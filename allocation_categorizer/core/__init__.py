"""Core module - data models, types, configuration and exceptions."""

from .models import (
    AllocationLabel,
    SummaryEntry,
    AllocationSummary,
)
from .types import (
    OutputFormat,
    SIZE_UNIT,
    UNKNOWN_LABEL,
)
from .exceptions import (
    CategorizerError,
    InputReadError,
    ValidationError,
    ConfigurationError,
)
from .config import AppConfig, get_config, get_config_or_default, reload_config

__all__ = [
    # Models
    "AllocationLabel",
    "SummaryEntry",
    "AllocationSummary",
    # Types
    "OutputFormat",
    "SIZE_UNIT",
    "UNKNOWN_LABEL",
    # Exceptions
    "CategorizerError",
    "InputReadError",
    "ValidationError",
    "ConfigurationError",
    # Config
    "AppConfig",
    "get_config",
    "get_config_or_default",
    "reload_config",
]
