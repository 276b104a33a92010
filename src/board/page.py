"""
Top-level UI state holder for one board page.

An IdeaBoardPage composes the list, the creation form and the detail view
and owns the two transient toggles of the page: the creation modal and the
active idea. One instance exists per page (per browser session in the web
dashboard, per invocation in the CLI); nothing here is module-global.
"""

from typing import Any, Dict, Optional

from src.api.base import IdeaBoardAPI
from src.board.creation_form import IdeaCreationForm
from src.board.detail_view import IdeaDetailView
from src.board.idea_list import IdeaListView
from src.models.idea import Idea, Period, SortKey


class IdeaBoardPage:
    """
    One instance of the idea board page.

    Attributes:
        idea_list: The filtered/sorted idea collection.
        creation_form: Fields of the "new idea" modal.
        detail: The active idea overlay and its comment thread.
        modal_open: Whether the creation modal is shown.
    """

    def __init__(
        self,
        api: IdeaBoardAPI,
        period: Period = Period.ALL,
        sort: SortKey = SortKey.VOTES,
    ):
        self.api = api
        self.idea_list = IdeaListView(api, period=period, sort=sort)
        self.creation_form = IdeaCreationForm(api, on_created=self._on_idea_created)
        self.detail = IdeaDetailView(api, self.idea_list)
        self.modal_open = False
        self.mounted = False

    def mount(self) -> None:
        """First render: load the list once."""
        if not self.mounted:
            self.mounted = True
            self.idea_list.mount()

    # =========================================================================
    # Selection toggles
    # =========================================================================

    @property
    def active_idea(self) -> Optional[Idea]:
        return self.detail.idea

    def open_creation(self) -> None:
        self.modal_open = True

    def close_creation(self) -> None:
        self.modal_open = False

    def find_idea(self, idea_id: Any) -> Optional[Idea]:
        """Look an idea up in the current list, falling back to the active idea."""
        idea = self.idea_list.find(idea_id)
        if idea is None and self.active_idea is not None and str(self.active_idea.id) == str(idea_id):
            idea = self.active_idea
        return idea

    def open_idea(self, idea_id: Any) -> bool:
        """Make a listed idea active. Returns False if it is not listed."""
        idea = self.idea_list.find(idea_id)
        if idea is None:
            return False
        self.detail.open(idea)
        return True

    def close_idea(self) -> None:
        self.detail.close()

    # =========================================================================
    # Actions
    # =========================================================================

    def set_period(self, period: Period) -> bool:
        return self.idea_list.set_period(period)

    def set_sort(self, sort: SortKey) -> bool:
        return self.idea_list.set_sort(sort)

    def upvote(self, idea_id: Any) -> bool:
        """Upvote a listed (or the active) idea. Returns False if unknown."""
        idea = self.find_idea(idea_id)
        if idea is None:
            return False
        self.idea_list.upvote(idea)
        return True

    def submit_idea(self, **fields: str) -> bool:
        """Fill the creation form and submit it."""
        self.creation_form.update(**fields)
        return self.creation_form.submit()

    def _on_idea_created(self) -> None:
        self.close_creation()
        self.idea_list.refresh()

    def submit_comment(self, content: str, author: str = "") -> bool:
        """Post a comment on the active idea."""
        if self.detail.thread is None:
            raise RuntimeError("No active idea to comment on")
        return self.detail.thread.submit(content=content, author=author)

    # =========================================================================
    # Serialization
    # =========================================================================

    def snapshot(self) -> Dict[str, Any]:
        """JSON-serializable view of the page state."""
        thread = self.detail.thread
        return {
            "period": self.idea_list.period.value,
            "sort": self.idea_list.sort.value,
            "loading": self.idea_list.loading,
            "error": self.idea_list.error,
            "ideas": [idea.to_dict() for idea in self.idea_list.ideas],
            "modal_open": self.modal_open,
            "active_idea": self.active_idea.to_dict() if self.active_idea else None,
            "comments": [c.to_dict() for c in thread.comments] if thread else [],
        }
