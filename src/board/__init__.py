"""
Board module.

Per-page UI controllers: idea list, creation form, detail view and comment
thread, composed by IdeaBoardPage.
"""

from src.board.idea_list import IdeaListView, LIST_ERROR_MESSAGE
from src.board.creation_form import IdeaCreationForm, parse_tags
from src.board.comment_thread import CommentThread, EMPTY_THREAD_MESSAGE
from src.board.detail_view import IdeaDetailView
from src.board.page import IdeaBoardPage

__all__ = [
    "IdeaListView",
    "LIST_ERROR_MESSAGE",
    "IdeaCreationForm",
    "parse_tags",
    "CommentThread",
    "EMPTY_THREAD_MESSAGE",
    "IdeaDetailView",
    "IdeaBoardPage",
]
