"""
API module.

Talks to the idea board backend over HTTP, or to an in-memory stand-in.
"""

from src.api.base import IdeaBoardAPI, build_list_params
from src.api.client import HttpIdeaBoardAPI
from src.api.mock import MockIdeaBoardAPI, RecordedRequest

__all__ = [
    "IdeaBoardAPI",
    "build_list_params",
    "HttpIdeaBoardAPI",
    "MockIdeaBoardAPI",
    "RecordedRequest",
]
