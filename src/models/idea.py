"""
Core data models for Vibe Hunt.

Defines the Idea and Comment dataclasses mirroring the records served by the
idea board API, plus the Period and SortKey enums used by the list controls.

Records are always created by the API. The client never assigns identifiers
or timestamps; local copies are replaced wholesale on every fetch.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class Period(str, Enum):
    """Time window for the idea list filter."""

    ALL = "all"
    WEEK = "week"
    MONTH = "month"

    @property
    def label(self) -> str:
        return _PERIOD_LABELS[self]


_PERIOD_LABELS = {
    Period.ALL: "All time",
    Period.WEEK: "This week",
    Period.MONTH: "This month",
}


class SortKey(str, Enum):
    """Server-side ordering for the idea list."""

    VOTES = "votes"
    COMMENTS = "comments"

    @property
    def label(self) -> str:
        return self.value


ANONYMOUS_AUTHOR = "Anonymous"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp from the API.

    Accepts datetime objects as-is and a trailing "Z" for UTC.
    Returns None for missing or unparsable values.
    """
    if isinstance(value, datetime):
        return value
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _count(value: Any) -> int:
    """Normalize a server-supplied count (missing or negative -> 0)."""
    try:
        count = int(value or 0)
    except (TypeError, ValueError):
        return 0
    return max(count, 0)


@dataclass
class Idea:
    """
    A user-submitted proposal on the idea board.

    Attributes:
        id: Opaque server-assigned identifier.
        title: Idea title.
        description: Short description.
        author: Optional author name.
        link: Optional URL.
        tags: Ordered list of short labels.
        votes: Vote count (server-authoritative, never mutated locally).
        comments: Comment count (server-authoritative, never mutated locally).
        created_at: Creation timestamp from the server, if any.
    """

    id: Any
    title: str
    description: str = ""
    author: Optional[str] = None
    link: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    votes: int = 0
    comments: int = 0
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        """
        Convert to a plain dictionary in the API's field layout.

        Datetime fields are converted to ISO format strings.
        """
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Idea":
        """
        Create an Idea from an API object.

        Missing optional fields fall back to defaults; counts default to 0.

        Raises:
            ValueError: If data is not an object or has no id.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Idea must be a JSON object, got {type(data).__name__}")
        if data.get("id") is None:
            raise ValueError("Idea is missing its id")

        return cls(
            id=data["id"],
            title=data.get("title") or "",
            description=data.get("description") or "",
            author=data.get("author") or None,
            link=data.get("link") or None,
            tags=list(data.get("tags") or []),
            votes=_count(data.get("votes")),
            comments=_count(data.get("comments")),
            created_at=parse_timestamp(data.get("created_at")),
        )

    def __str__(self) -> str:
        return f"{self.title} ({self.votes} votes, {self.comments} comments)"


@dataclass
class Comment:
    """A text reply attached to exactly one Idea."""

    id: Any
    content: str
    idea_id: Any = None
    author: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def display_author(self) -> str:
        return self.author or ANONYMOUS_AUTHOR

    def to_dict(self) -> dict:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data

    @classmethod
    def from_dict(cls, data: dict, idea_id: Any = None) -> "Comment":
        """
        Create a Comment from an API object.

        Args:
            data: Comment object from the idea detail response.
            idea_id: Owning idea, used when the object does not carry one.

        Raises:
            ValueError: If data is not an object.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Comment must be a JSON object, got {type(data).__name__}")

        return cls(
            id=data.get("id"),
            content=data.get("content") or "",
            idea_id=data.get("idea_id", idea_id),
            author=data.get("author") or None,
            created_at=parse_timestamp(data.get("created_at")),
        )

    def __str__(self) -> str:
        return f"{self.display_author}: {self.content}"
