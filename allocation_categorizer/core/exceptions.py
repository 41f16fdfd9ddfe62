"""Custom exceptions for the allocation categorizer.

Parsing and aggregation never raise; these are only used at the
configuration and CLI boundary.
"""


class CategorizerError(Exception):
    """Base exception for all allocation categorizer errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InputReadError(CategorizerError):
    """Raised when raw input cannot be read from a file or stream."""

    def __init__(self, path: str, reason: str):
        message = f"Cannot read input from {path}: {reason}"
        super().__init__(message, {"path": path, "reason": reason})
        self.path = path
        self.reason = reason


class ValidationError(CategorizerError):
    """Raised when a user supplied option is invalid."""

    def __init__(self, field: str, value: str, reason: str):
        message = f"Validation failed for {field}={value}: {reason}"
        super().__init__(message, {"field": field, "value": value, "reason": reason})
        self.field = field
        self.value = value
        self.reason = reason


class ConfigurationError(CategorizerError):
    """Raised when configuration is invalid."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key
