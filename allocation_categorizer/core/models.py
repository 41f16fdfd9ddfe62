"""Pydantic data models for the allocation categorizer.

All data structures are immutable (frozen) after creation so a summary
handed to the table can never drift from the one handed to the chart.
"""

import re
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from .types import SIZE_UNIT, UNKNOWN_LABEL, Percentage, RecordCount

_DIGITS_RE = re.compile(r"^[0-9]+$")


def percentage(count: int, total: int) -> Percentage:
    """Share of ``count`` in ``total`` on a 0-100 scale; 0.0 if total is 0."""
    if total <= 0:
        return 0.0
    return count / total * 100


class AllocationLabel(BaseModel):
    """Bucket assigned to one record: a known size or Unknown.

    ``digits`` holds the digit string extracted from the record exactly as
    found (leading zeros included). ``None`` marks the Unknown bucket.
    """

    digits: str | None = None

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: str | None) -> str | None:
        if v is not None and not _DIGITS_RE.match(v):
            raise ValueError(f"Allocation digits must be 0-9 only, got {v!r}")
        return v

    @classmethod
    def known(cls, digits: str) -> "AllocationLabel":
        return cls(digits=digits)

    @classmethod
    def unknown(cls) -> "AllocationLabel":
        return cls(digits=None)

    @property
    def is_known(self) -> bool:
        """Check if a size was extracted for this label."""
        return self.digits is not None

    @property
    def size(self) -> int | None:
        """Numeric magnitude of the allocation, if known."""
        return int(self.digits) if self.digits is not None else None

    @property
    def display_name(self) -> str:
        """Human-readable label, e.g. ``20 GB`` or ``Unknown``."""
        if self.digits is None:
            return UNKNOWN_LABEL
        return f"{self.digits} {SIZE_UNIT}"

    def __str__(self) -> str:
        return self.display_name


class SummaryEntry(BaseModel):
    """One bucket of the summary and the number of records in it."""

    allocation: AllocationLabel
    count: RecordCount = Field(ge=1)

    model_config = {"frozen": True}

    @field_serializer("allocation")
    def serialize_allocation(self, allocation: AllocationLabel) -> str:
        return allocation.display_name


class AllocationSummary(BaseModel):
    """Ordered summary entries, one per distinct label.

    Entries keep the order in which each label was first seen in the input.
    """

    entries: list[SummaryEntry] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("entries")
    @classmethod
    def validate_unique_labels(cls, v: list[SummaryEntry]) -> list[SummaryEntry]:
        seen: set[AllocationLabel] = set()
        for entry in v:
            if entry.allocation in seen:
                raise ValueError(f"Duplicate allocation '{entry.allocation}' in summary")
            seen.add(entry.allocation)
        return v

    @property
    def total_entries(self) -> RecordCount:
        """Sum of all bucket counts (the number of parsed records)."""
        return sum(entry.count for entry in self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def percentage(self, entry: SummaryEntry) -> Percentage:
        """Share of ``entry`` in the total, 0.0 for an empty summary."""
        return percentage(entry.count, self.total_entries)

    def labels(self) -> list[str]:
        """Display names in summary order."""
        return [entry.allocation.display_name for entry in self.entries]

    def rows(self) -> list[dict[str, Any]]:
        """Flat rows for renderers: allocation, count and percentage."""
        return [
            {
                "allocation": entry.allocation.display_name,
                "count": entry.count,
                "percentage": self.percentage(entry),
            }
            for entry in self.entries
        ]
