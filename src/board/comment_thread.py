"""
Comment thread controller for the active idea.
"""

from typing import Any, Callable, List

from src.api.base import IdeaBoardAPI
from src.board.creation_form import optional_field
from src.models.idea import Comment


EMPTY_THREAD_MESSAGE = "No comments yet. Be the first!"


class CommentThread:
    """
    Loads and extends the comment thread of one idea.

    The thread is read from the idea detail record and kept in server order.
    After a comment is posted the parent list is refreshed (its comment
    counts change) and then the thread itself is re-read; the new comment is
    never appended locally.

    Fetch failures are not handled here and propagate to the caller.
    """

    def __init__(
        self,
        api: IdeaBoardAPI,
        idea_id: Any,
        on_added: Callable[[], None] = None,
    ):
        self.api = api
        self.idea_id = idea_id
        self.on_added = on_added
        self.comments: List[Comment] = []
        self.content = ""
        self.author = ""

    def mount(self) -> None:
        self.load()

    def load(self) -> None:
        """Replace the thread with the server's current comment list."""
        self.comments = self.api.get_comments(self.idea_id)

    def set_idea_id(self, idea_id: Any) -> bool:
        """
        Point the thread at another idea. Reloads only when the id changes.

        The previous idea's comments are dropped first, so a failed reload
        leaves an empty thread rather than another idea's comments.
        """
        if idea_id == self.idea_id:
            return False
        self.idea_id = idea_id
        self.comments = []
        self.load()
        return True

    @property
    def is_empty(self) -> bool:
        return not self.comments

    @property
    def placeholder(self) -> str:
        """Empty-state text, or "" when there are comments to show."""
        return EMPTY_THREAD_MESSAGE if self.is_empty else ""

    def submit(self, content: str = None, author: str = None) -> bool:
        """
        Post a comment.

        Args:
            content: Comment text. Defaults to the current draft.
            author: Optional name. Defaults to the current draft; a blank
                author is left out of the request.

        Returns:
            False if the content is blank (nothing sent), True otherwise.
        """
        if content is not None:
            self.content = content
        if author is not None:
            self.author = author

        if not self.content.strip():
            return False

        self.api.add_comment(self.idea_id, self.content, optional_field(self.author))
        self.content = ""
        self.author = ""

        if self.on_added:
            self.on_added()
        self.load()
        return True
