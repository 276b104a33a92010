"""
Data models module.

Defines data structures for ideas, comments, and list selection enums.
"""

from src.models.idea import (
    ANONYMOUS_AUTHOR,
    Comment,
    Idea,
    Period,
    SortKey,
    parse_timestamp,
)

__all__ = [
    "ANONYMOUS_AUTHOR",
    "Comment",
    "Idea",
    "Period",
    "SortKey",
    "parse_timestamp",
]
