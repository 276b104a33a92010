"""
Idea list controller.

Owns the period/sort selection and the displayed idea collection. The
collection is replaced wholesale by every fetch; the server decides both the
filtering and the order.
"""

from typing import List, Optional
import requests

from src.api.base import IdeaBoardAPI
from src.models.idea import Idea, Period, SortKey


LIST_ERROR_MESSAGE = "Failed to load ideas"


class IdeaListView:
    """
    Fetches and holds the filtered/sorted idea collection.

    Refetch-on-write: every upvote is followed by a full re-read of the list
    with the then-current period and sort. Nothing is patched locally.

    Attributes:
        ideas: Ideas in server order from the last successful fetch.
        loading: True only while a list read is in flight.
        error: LIST_ERROR_MESSAGE after a failed read, "" otherwise.
    """

    def __init__(
        self,
        api: IdeaBoardAPI,
        period: Period = Period.ALL,
        sort: SortKey = SortKey.VOTES,
    ):
        self.api = api
        self.period = Period(period)
        self.sort = SortKey(sort)
        self.ideas: List[Idea] = []
        self.loading = False
        self.error = ""

    def mount(self) -> bool:
        """Initial fetch when the page is first shown."""
        return self.refresh()

    def refresh(self) -> bool:
        """
        Re-read the idea list with the current period and sort.

        A network or decoding failure sets the error message and keeps the
        previous list. Nothing is retried.

        Returns:
            True if the list was replaced, False if the read failed.
        """
        self.loading = True
        self.error = ""
        try:
            ideas = self.api.list_ideas(self.period, self.sort)
        except (requests.RequestException, ValueError, TypeError) as e:
            print(f"[board] {LIST_ERROR_MESSAGE}: {e}")
            self.error = LIST_ERROR_MESSAGE
            return False
        finally:
            self.loading = False

        self.ideas = ideas
        return True

    def set_period(self, period: Period) -> bool:
        """Select a time window. Refetches only when the selection changes."""
        period = Period(period)
        if period == self.period:
            return False
        self.period = period
        self.refresh()
        return True

    def set_sort(self, sort: SortKey) -> bool:
        """Select an ordering. Refetches only when the selection changes."""
        sort = SortKey(sort)
        if sort == self.sort:
            return False
        self.sort = sort
        self.refresh()
        return True

    def upvote(self, idea: Idea) -> None:
        """
        Vote for an idea, then refetch the list.

        Failures of the vote request propagate; the refetch only runs after
        the vote request returns. Repeated clicks are separate votes.
        """
        self.api.upvote(idea.id)
        self.refresh()

    def find(self, idea_id) -> Optional[Idea]:
        """Return the listed idea with this id (compared as text), or None."""
        for idea in self.ideas:
            if str(idea.id) == str(idea_id):
                return idea
        return None
