"""Aggregation module."""

from .summary import aggregate, percentage, summarize

__all__ = ["aggregate", "percentage", "summarize"]
