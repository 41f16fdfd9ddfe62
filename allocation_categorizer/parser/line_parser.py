"""Line parser - turns pasted records into allocation labels.

Each non-blank line is one record. The record is split on runs of
whitespace and hyphens; the second field is taken as the size descriptor
(e.g. ``20GB``, ``50 GB``, ``10-GB``) and reduced to its digits. Unit text is
discarded, so ``20MB`` and ``20GB`` land in the same bucket.

Parsing never fails: anything without digits in the second field becomes
the Unknown bucket.
"""

import logging
import re

from ..core.models import AllocationLabel

logger = logging.getLogger(__name__)

# Characters trimmed from records and treated as field separators. Matches
# the browser whitespace set: includes U+FEFF, excludes \x1c-\x1f and U+0085.
WHITESPACE = (
    "\t\n\x0b\x0c\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Field delimiter: any run of whitespace and/or hyphens
FIELD_DELIMITER = re.compile("[" + re.escape(WHITESPACE) + "-]+")

# Everything that is not an ASCII decimal digit
NON_DIGIT = re.compile(r"[^0-9]")

# Zero-based index of the size descriptor within a record
ALLOCATION_FIELD_INDEX = 1


def extract_records(raw: str) -> list[str]:
    """
    Split raw text into trimmed, non-blank records.

    Args:
        raw: Pasted text, one record per line

    Returns:
        Records in input order
    """
    records = []
    for line in raw.split("\n"):
        stripped = line.strip(WHITESPACE)
        if stripped:
            records.append(stripped)
    return records


def count_records(raw: str) -> int:
    """Number of non-blank lines in ``raw`` (the live "lines detected" count)."""
    return sum(1 for line in raw.split("\n") if line.strip(WHITESPACE))


def extract_allocation_field(record: str) -> str:
    """Return the second whitespace/hyphen delimited field, or ``""``."""
    parts = FIELD_DELIMITER.split(record)
    if len(parts) > ALLOCATION_FIELD_INDEX:
        return parts[ALLOCATION_FIELD_INDEX]
    return ""


def parse_line(record: str) -> AllocationLabel:
    """
    Map a single record to its allocation label.

    Args:
        record: One trimmed input line

    Returns:
        Known label with the extracted digits, or the Unknown label
    """
    digits = NON_DIGIT.sub("", extract_allocation_field(record))
    if digits:
        return AllocationLabel.known(digits)
    return AllocationLabel.unknown()


def parse(raw: str) -> list[AllocationLabel]:
    """
    Parse raw text into one allocation label per record.

    Args:
        raw: Pasted text; may be empty

    Returns:
        Labels in input order, one per non-blank line
    """
    labels = [parse_line(record) for record in extract_records(raw)]

    if labels:
        unknown = sum(1 for label in labels if not label.is_known)
        logger.debug(f"Parsed {len(labels)} records ({unknown} unknown)")

    return labels
