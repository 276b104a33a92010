"""
Base API abstraction for Vibe Hunt.

Defines the interface the board controllers use to talk to the idea board
backend. This allows swapping the HTTP client for the in-memory API used in
development and tests.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from src.models.idea import Comment, Idea, Period, SortKey


def build_list_params(period: Period, sort: SortKey) -> Dict[str, str]:
    """
    Build the query parameters for the idea list read.

    "sort" is always present; "period" only when it narrows the list
    (i.e. not "all").
    """
    params = {}
    if Period(period) is not Period.ALL:
        params["period"] = Period(period).value
    params["sort"] = SortKey(sort).value
    return params


class IdeaBoardAPI(ABC):
    """
    Abstract base class for idea board backends.

    Implementations must provide the two reads (idea list, idea comments)
    and the three writes (create idea, upvote, add comment).

    Writes return nothing: callers treat any call that does not raise as
    success and refetch afterwards.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the name of this backend.

        Used for logging and debugging.
        """
        pass

    @abstractmethod
    def list_ideas(self, period: Period = Period.ALL, sort: SortKey = SortKey.VOTES) -> List[Idea]:
        """
        Fetch the idea collection filtered and ordered by the server.

        Args:
            period: Time window filter.
            sort: Ordering key.

        Returns:
            Ideas in server order.

        Raises:
            requests.RequestException: On network failure.
            ValueError: If the response cannot be decoded.
        """
        pass

    @abstractmethod
    def get_comments(self, idea_id: Any) -> List[Comment]:
        """
        Fetch the comment thread of one idea (from the idea detail record).

        Returns:
            Comments in server order (empty list when the idea has none).
        """
        pass

    @abstractmethod
    def create_idea(self, payload: Dict[str, Any]) -> None:
        """Submit a new idea. Payload: title, description, author?, link?, tags."""
        pass

    @abstractmethod
    def upvote(self, idea_id: Any) -> None:
        """Register one vote for an idea."""
        pass

    @abstractmethod
    def add_comment(self, idea_id: Any, content: str, author: Optional[str] = None) -> None:
        """Attach a comment to an idea. A None author is left out of the request."""
        pass

    def __str__(self) -> str:
        return f"IdeaBoardAPI({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
