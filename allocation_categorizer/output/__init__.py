"""Output formatting module."""

from .formatters import (
    OutputFormatter,
    JSONFormatter,
    CSVFormatter,
    TableFormatter,
    get_formatter,
)
from .charts import build_bar_chart, summary_dataframe

__all__ = [
    "OutputFormatter",
    "JSONFormatter",
    "CSVFormatter",
    "TableFormatter",
    "get_formatter",
    "build_bar_chart",
    "summary_dataframe",
]
