"""
HTTP backend for Vibe Hunt.

Implements the IdeaBoardAPI interface against the idea board's JSON API.

=============================================================================
ENDPOINTS
=============================================================================

| Operation       | Request                                   | Response used |
|-----------------|-------------------------------------------|---------------|
| List ideas      | GET  /api/ideas?period=..&sort=..         | list of ideas |
| Idea detail     | GET  /api/ideas/{id}                      | comments_list |
| Create idea     | POST /api/ideas    {title, description,...}| ignored      |
| Upvote          | POST /api/votes    {idea_id}              | ignored       |
| Add comment     | POST /api/comments {idea_id, content, ...}| ignored       |

Writes are fire-and-refetch: their status code and body are not inspected.
Only the two reads decode the response body.
=============================================================================
"""

from typing import Any, Dict, List, Optional
import requests

from src.config import DEBUG, IDEA_BOARD_API_URL, REQUEST_TIMEOUT
from src.models.idea import Comment, Idea, Period, SortKey
from src.api.base import IdeaBoardAPI, build_list_params


class HttpIdeaBoardAPI(IdeaBoardAPI):
    """
    requests-backed idea board client.

    Configuration is pulled from environment variables via src.config:
    - IDEA_BOARD_API_URL: Base URL of the API (scheme and host)
    - REQUEST_TIMEOUT: Transport timeout in seconds
    """

    JSON_HEADERS = {"Content-Type": "application/json"}

    def __init__(
        self,
        base_url: str = None,
        timeout: int = None,
        verbose: bool = None,
    ):
        """
        Initialize HttpIdeaBoardAPI.

        Args:
            base_url: API base URL. Defaults to config.IDEA_BOARD_API_URL.
            timeout: Request timeout in seconds. Defaults to config.REQUEST_TIMEOUT.
            verbose: Print every request. Defaults to config.DEBUG.
        """
        # Use provided values, or fall back to config if None (not empty string)
        base_url = base_url if base_url is not None else IDEA_BOARD_API_URL
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else REQUEST_TIMEOUT
        self.verbose = verbose if verbose is not None else DEBUG

    @property
    def name(self) -> str:
        return "http"

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _trace(self, method: str, url: str, detail: Any = None) -> None:
        if self.verbose:
            suffix = f" {detail}" if detail else ""
            print(f"[api] {method} {url}{suffix}")

    def _get_json(self, path: str, params: Dict[str, str] = None) -> Any:
        url = self._url(path)
        self._trace("GET", url, params)
        response = requests.get(url, params=params, timeout=self.timeout)
        # Raises ValueError (requests' JSONDecodeError) on a non-JSON body
        return response.json()

    def _post_json(self, path: str, body: Dict[str, Any]) -> None:
        url = self._url(path)
        self._trace("POST", url, body)
        requests.post(
            url,
            json=body,
            headers=self.JSON_HEADERS,
            timeout=self.timeout,
        )

    # =========================================================================
    # Reads
    # =========================================================================

    def list_ideas(self, period: Period = Period.ALL, sort: SortKey = SortKey.VOTES) -> List[Idea]:
        data = self._get_json("/api/ideas", params=build_list_params(period, sort))

        if not isinstance(data, list):
            raise ValueError(f"Expected a list of ideas, got {type(data).__name__}")

        return [Idea.from_dict(entry) for entry in data]

    def get_comments(self, idea_id: Any) -> List[Comment]:
        data = self._get_json(f"/api/ideas/{idea_id}")

        if not isinstance(data, dict):
            raise ValueError(f"Expected an idea object, got {type(data).__name__}")

        return [
            Comment.from_dict(entry, idea_id=idea_id)
            for entry in data.get("comments_list") or []
        ]

    # =========================================================================
    # Writes
    # =========================================================================

    def create_idea(self, payload: Dict[str, Any]) -> None:
        self._post_json("/api/ideas", payload)

    def upvote(self, idea_id: Any) -> None:
        self._post_json("/api/votes", {"idea_id": idea_id})

    def add_comment(self, idea_id: Any, content: str, author: Optional[str] = None) -> None:
        body = {"idea_id": idea_id, "content": content}
        if author is not None:
            body["author"] = author
        self._post_json("/api/comments", body)
