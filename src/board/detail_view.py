"""
Detail overlay for the active idea.
"""

from typing import Optional

from src.api.base import IdeaBoardAPI
from src.board.comment_thread import CommentThread
from src.board.idea_list import IdeaListView
from src.models.idea import Idea


class IdeaDetailView:
    """
    Shows the active idea and its comment thread.

    The idea itself is the list entry captured at selection time; it is not
    fetched again, so its counts may lag behind the list. Only the comment
    thread performs its own fetch.
    """

    def __init__(self, api: IdeaBoardAPI, idea_list: IdeaListView):
        self.api = api
        self.idea_list = idea_list
        self.idea: Optional[Idea] = None
        self.thread: Optional[CommentThread] = None

    @property
    def is_open(self) -> bool:
        return self.idea is not None

    def open(self, idea: Idea) -> None:
        """Make an idea active and load its comments."""
        self.idea = idea
        if self.thread is None:
            self.thread = CommentThread(self.api, idea.id, on_added=self.idea_list.refresh)
            self.thread.mount()
        else:
            self.thread.set_idea_id(idea.id)

    def close(self) -> None:
        """Return the selection to none."""
        self.idea = None
        self.thread = None

    def upvote(self) -> None:
        """Upvote the active idea with the list's refetch-on-write policy."""
        if self.idea is None:
            raise RuntimeError("No active idea to upvote")
        self.idea_list.upvote(self.idea)
