"""Session state for the interactive dashboard.

The state is immutable: edits and processing return a new state object
that the presentation layer stores in place of the old one.
"""

import logging

from pydantic import BaseModel, Field

from ..aggregator.summary import summarize
from ..core.models import AllocationSummary
from ..parser.line_parser import WHITESPACE, count_records

logger = logging.getLogger(__name__)


class SessionState(BaseModel):
    """Input buffer and the last published summary."""

    raw_input: str = ""
    summary: AllocationSummary = Field(default_factory=AllocationSummary)

    model_config = {"frozen": True}

    @property
    def lines_detected(self) -> int:
        """Live count of non-blank input lines, independent of processing."""
        return count_records(self.raw_input)

    @property
    def can_process(self) -> bool:
        """Processing is inert for empty or whitespace-only input."""
        return bool(self.raw_input.strip(WHITESPACE))

    @property
    def has_results(self) -> bool:
        return not self.summary.is_empty

    def edit(self, raw_input: str) -> "SessionState":
        """Replace the input buffer, keeping the last published summary."""
        return self.model_copy(update={"raw_input": raw_input})

    def process(self) -> "SessionState":
        """Re-derive the summary from the current input.

        Returns ``self`` unchanged when there is nothing to process.
        """
        if not self.can_process:
            return self

        summary = summarize(self.raw_input)
        logger.info(
            f"Processed {summary.total_entries} entries into {len(summary.entries)} allocations"
        )
        return self.model_copy(update={"summary": summary})
