"""Data Allocation Categorizer.

Parses pasted allocation records, buckets them by the size extracted from
each line and summarizes the buckets as counts and percentages.
"""

__version__ = "0.1.0"
