"""Type definitions and enums for the allocation categorizer."""

from enum import Enum
from typing import Literal


# Suffix appended to the extracted digits when a label is displayed
SIZE_UNIT = "GB"

# Display form of records without a usable size
UNKNOWN_LABEL = "Unknown"


class OutputFormat(str, Enum):
    """Output formats supported by the CLI and exporters."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"

    @property
    def file_suffix(self) -> str:
        """File extension used when saving this format."""
        suffixes = {
            self.TABLE: ".txt",
            self.JSON: ".json",
            self.CSV: ".csv",
        }
        return suffixes[self]


# Type aliases for common patterns
Percentage = float  # 0-100 scale
RecordCount = int

LogLevelType = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
