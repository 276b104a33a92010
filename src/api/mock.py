"""
In-memory idea board backend.

Use this when no API server is available (IDEA_BOARD_USE_MOCK=true) or for
testing. Data is stored in memory and lost when the process ends.

Every call is recorded in `requests` with the method, path, query parameters
and body the HTTP client would have sent, so callers can assert on request
ordering without a network.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from src.models.idea import Comment, Idea, Period, SortKey
from src.api.base import IdeaBoardAPI, build_list_params


PERIOD_WINDOWS = {
    Period.WEEK: timedelta(days=7),
    Period.MONTH: timedelta(days=30),
}


@dataclass
class RecordedRequest:
    """One request as it would have gone over the wire."""
    method: str
    path: str
    params: Dict[str, str] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


class MockIdeaBoardAPI(IdeaBoardAPI):
    """
    In-memory API that behaves like the idea board server.

    Assigns ids and timestamps, filters by period, orders by votes or
    comments (newest first on ties), and keeps the comment count of each
    idea in step with its thread.
    """

    def __init__(self):
        self._ideas: Dict[int, Dict[str, Any]] = {}
        self._comments: Dict[int, List[Dict[str, Any]]] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self.requests: List[RecordedRequest] = []

    @property
    def name(self) -> str:
        return "mock"

    def _record(self, method: str, path: str, params: Dict[str, str] = None, body: Dict[str, Any] = None) -> None:
        self.requests.append(RecordedRequest(method, path, dict(params or {}), body))

    def _allocate_id(self) -> int:
        with self._lock:
            new_id = self._next_id
            self._next_id += 1
        return new_id

    def _lookup(self, idea_id: Any) -> Dict[str, Any]:
        try:
            return self._ideas[int(idea_id)]
        except (KeyError, TypeError, ValueError):
            raise KeyError(f"Unknown idea: {idea_id}")

    # =========================================================================
    # Seeding (development and tests)
    # =========================================================================

    def seed_idea(
        self,
        title: str,
        description: str,
        author: str = None,
        link: str = None,
        tags: List[str] = None,
        votes: int = 0,
        created_at: datetime = None,
    ) -> int:
        """Insert an idea directly without recording a request. Returns its id."""
        idea_id = self._allocate_id()
        record = {
            "id": idea_id,
            "title": title,
            "description": description,
            "tags": list(tags or []),
            "votes": votes,
            "comments": 0,
            "created_at": (created_at or datetime.now()).isoformat(),
        }
        if author:
            record["author"] = author
        if link:
            record["link"] = link
        self._ideas[idea_id] = record
        self._comments[idea_id] = []
        return idea_id

    def seed_comment(self, idea_id: int, content: str, author: str = None) -> int:
        """Insert a comment directly without recording a request. Returns its id."""
        idea = self._lookup(idea_id)
        comment_id = self._allocate_id()
        comment = {
            "id": comment_id,
            "idea_id": idea["id"],
            "content": content,
            "created_at": datetime.now().isoformat(),
        }
        if author:
            comment["author"] = author
        self._comments[idea["id"]].append(comment)
        idea["comments"] = len(self._comments[idea["id"]])
        return comment_id

    def seed_samples(self) -> "MockIdeaBoardAPI":
        """Insert a small demo board (two ideas, one comment). Returns self."""
        first = self.seed_idea(
            "Standup summarizer",
            "Turn a team's async standup notes into a two-line digest.",
            author="Sam",
            tags=["AI", "Productivity"],
            votes=3,
        )
        self.seed_comment(first, "Would use this every day.")
        self.seed_idea(
            "Plant watering reminders",
            "Snap a photo of a plant and get a watering schedule.",
            tags=["Mobile"],
        )
        return self

    def clear(self) -> None:
        """Clear all records and the request log (for testing)."""
        self._ideas.clear()
        self._comments.clear()
        self.requests.clear()

    def count(self) -> int:
        """Return number of stored ideas (for testing)."""
        return len(self._ideas)

    # =========================================================================
    # IdeaBoardAPI
    # =========================================================================

    def list_ideas(self, period: Period = Period.ALL, sort: SortKey = SortKey.VOTES) -> List[Idea]:
        params = build_list_params(period, sort)
        self._record("GET", "/api/ideas", params=params)

        records = list(self._ideas.values())

        window = PERIOD_WINDOWS.get(Period(period))
        if window:
            cutoff = datetime.now() - window
            records = [
                r for r in records
                if datetime.fromisoformat(r["created_at"]) >= cutoff
            ]

        key = SortKey(sort).value
        records.sort(key=lambda r: r["created_at"], reverse=True)
        records.sort(key=lambda r: r[key], reverse=True)

        return [Idea.from_dict(dict(r)) for r in records]

    def get_comments(self, idea_id: Any) -> List[Comment]:
        self._record("GET", f"/api/ideas/{idea_id}")
        idea = self._lookup(idea_id)
        return [
            Comment.from_dict(dict(c), idea_id=idea["id"])
            for c in self._comments[idea["id"]]
        ]

    def create_idea(self, payload: Dict[str, Any]) -> None:
        self._record("POST", "/api/ideas", body=dict(payload))
        self.seed_idea(
            title=payload["title"],
            description=payload["description"],
            author=payload.get("author"),
            link=payload.get("link"),
            tags=payload.get("tags"),
        )

    def upvote(self, idea_id: Any) -> None:
        self._record("POST", "/api/votes", body={"idea_id": idea_id})
        idea = self._lookup(idea_id)
        idea["votes"] += 1

    def add_comment(self, idea_id: Any, content: str, author: Optional[str] = None) -> None:
        body = {"idea_id": idea_id, "content": content}
        if author is not None:
            body["author"] = author
        self._record("POST", "/api/comments", body=body)
        self.seed_comment(idea_id, content, author)
