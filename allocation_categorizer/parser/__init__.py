"""Parsing module.

Turns pasted allocation records into normalized labels.
"""

from .line_parser import (
    count_records,
    extract_allocation_field,
    extract_records,
    parse,
    parse_line,
)

__all__ = [
    "count_records",
    "extract_allocation_field",
    "extract_records",
    "parse",
    "parse_line",
]
