"""Pytest configuration and fixtures for allocation categorizer tests."""

from pathlib import Path

import pytest

from allocation_categorizer.core.models import (
    AllocationLabel,
    AllocationSummary,
    SummaryEntry,
)


@pytest.fixture
def sample_raw_input() -> str:
    """Four records, two of them in the 20 GB bucket."""
    return "02444XXXX 20GB\n059XXXXXX 50GB\n024961XXXX 10GB\n0244-20GB\n"


@pytest.fixture
def messy_raw_input() -> str:
    """Blank lines, CRLF endings, padding and records without sizes."""
    return (
        "\n"
        "   02444XXXX   20GB   \r\n"
        "\t\n"
        "justoneword\n"
        "059XXXXXX 50 GB\n"
        "id --- noDigitsHere\n"
        "0244-10-GB\n"
        "   \n"
    )


@pytest.fixture
def sample_summary() -> AllocationSummary:
    """Summary matching ``sample_raw_input``."""
    return AllocationSummary(
        entries=[
            SummaryEntry(allocation=AllocationLabel.known("20"), count=2),
            SummaryEntry(allocation=AllocationLabel.known("50"), count=1),
            SummaryEntry(allocation=AllocationLabel.known("10"), count=1),
        ]
    )


@pytest.fixture
def input_file(tmp_path: Path, sample_raw_input: str) -> Path:
    """Sample records written to a temporary file."""
    path = tmp_path / "allocations.txt"
    path.write_text(sample_raw_input, encoding="utf-8")
    return path
