"""Aggregator - counts labels into an ordered allocation summary."""

import logging
from typing import Iterable

from ..core.models import AllocationLabel, AllocationSummary, SummaryEntry, percentage
from ..parser.line_parser import parse

logger = logging.getLogger(__name__)

__all__ = ["aggregate", "percentage", "summarize"]


def aggregate(labels: Iterable[AllocationLabel]) -> AllocationSummary:
    """
    Count labels into summary entries.

    Entries appear in the order each label is first seen; the sum of
    counts equals the number of labels.

    Args:
        labels: Parsed allocation labels, any length

    Returns:
        AllocationSummary with one entry per distinct label
    """
    counts: dict[AllocationLabel, int] = {}

    for label in labels:
        counts[label] = counts.get(label, 0) + 1

    entries = [
        SummaryEntry(allocation=label, count=count)
        for label, count in counts.items()
    ]
    return AllocationSummary(entries=entries)


def summarize(raw: str) -> AllocationSummary:
    """Parse and aggregate raw text in one pass."""
    summary = aggregate(parse(raw))
    logger.debug(
        f"Summarized {summary.total_entries} records into {len(summary.entries)} buckets"
    )
    return summary
