"""
Vibe Hunt - Web Dashboard

A simple Flask-based idea board: browse, filter and upvote ideas, post new
ones, and discuss them in comment threads. All data lives behind the idea
board API; this app only keeps per-session UI state.

Run with: python -m web.app
Or: cd web && python app.py
"""

import os
import re
import sys
import threading
import uuid
from collections import OrderedDict
from datetime import datetime
from pathlib import Path
from typing import Dict

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import requests
from flask import Flask, abort, jsonify, redirect, render_template, request, session, url_for

from src.api import HttpIdeaBoardAPI, IdeaBoardAPI, MockIdeaBoardAPI
from src.board import EMPTY_THREAD_MESSAGE, IdeaBoardPage
from src.config import (
    FLASK_SECRET_KEY,
    IDEA_BOARD_API_URL,
    IDEA_BOARD_USE_MOCK,
    WEB_PORT,
    print_config_summary,
    validate_config,
)
from src.models import Period, SortKey

app = Flask(__name__)
app.secret_key = FLASK_SECRET_KEY or os.urandom(24)


# =============================================================================
# Page Tracking
# =============================================================================

# One board page per browser session (simple in-memory tracking).
# Least recently used pages are dropped beyond MAX_PAGES; their sessions
# get a fresh page on the next request.
MAX_PAGES = 256
_pages: Dict[str, IdeaBoardPage] = OrderedDict()
_pages_lock = threading.Lock()

_mock_api = None


def get_mock_api() -> MockIdeaBoardAPI:
    """Shared in-memory API, seeded with a few ideas on first use."""
    global _mock_api
    if _mock_api is None:
        _mock_api = MockIdeaBoardAPI().seed_samples()
    return _mock_api


def get_api() -> IdeaBoardAPI:
    """API for the current request: configured URL, or this page's own origin."""
    if IDEA_BOARD_USE_MOCK:
        return get_mock_api()
    base_url = IDEA_BOARD_API_URL or request.host_url.rstrip("/")
    return HttpIdeaBoardAPI(base_url=base_url)


def get_page() -> IdeaBoardPage:
    """Return this session's board page, creating it on first visit."""
    page_id = session.get("page_id")

    with _pages_lock:
        page = _pages.get(page_id) if page_id else None
        if page is None:
            page_id = uuid.uuid4().hex
            session["page_id"] = page_id
            page = IdeaBoardPage(get_api())
            _pages[page_id] = page
            while len(_pages) > MAX_PAGES:
                _pages.popitem(last=False)
        else:
            _pages.move_to_end(page_id)

    return page


def back_to_board():
    return redirect(url_for("index"))


# =============================================================================
# Board Routes
# =============================================================================

@app.route("/")
def index():
    """Main board page."""
    page = get_page()
    page.mount()

    return render_template(
        "index.html",
        page=page,
        periods=list(Period),
        sorts=list(SortKey),
        empty_thread_message=EMPTY_THREAD_MESSAGE,
    )


@app.route("/period/<period>", methods=["POST"])
def select_period(period):
    """Change the time window filter."""
    if period not in {p.value for p in Period}:
        abort(404)
    get_page().set_period(Period(period))
    return back_to_board()


@app.route("/sort/<sort>", methods=["POST"])
def select_sort(sort):
    """Change the list ordering."""
    if sort not in {s.value for s in SortKey}:
        abort(404)
    get_page().set_sort(SortKey(sort))
    return back_to_board()


@app.route("/ideas/new", methods=["POST"])
def open_creation():
    get_page().open_creation()
    return back_to_board()


@app.route("/ideas/new/cancel", methods=["POST"])
def close_creation():
    get_page().close_creation()
    return back_to_board()


@app.route("/ideas", methods=["POST"])
def create_idea():
    """Submit the new idea form."""
    page = get_page()
    page.submit_idea(
        title=request.form.get("title", ""),
        description=request.form.get("description", ""),
        author=request.form.get("author", ""),
        link=request.form.get("link", ""),
        tags=request.form.get("tags", ""),
    )
    return back_to_board()


@app.route("/ideas/<idea_id>/upvote", methods=["POST"])
def upvote(idea_id):
    """Upvote from a card or from the detail overlay."""
    if not get_page().upvote(idea_id):
        abort(404)
    return back_to_board()


@app.route("/ideas/<idea_id>/open", methods=["POST"])
def open_idea(idea_id):
    """Make an idea active and show its detail overlay."""
    if not get_page().open_idea(idea_id):
        abort(404)
    return back_to_board()


@app.route("/ideas/close", methods=["POST"])
def close_idea():
    get_page().close_idea()
    return back_to_board()


@app.route("/ideas/<idea_id>/comments", methods=["POST"])
def add_comment(idea_id):
    """Post a comment on the active idea."""
    page = get_page()
    active = page.active_idea

    if active is None or str(active.id) != str(idea_id):
        abort(404)

    page.submit_comment(
        content=request.form.get("content", ""),
        author=request.form.get("author", ""),
    )
    return back_to_board()


@app.route("/api/board")
def api_board():
    """JSON snapshot of this session's board state."""
    return jsonify(get_page().snapshot())


@app.errorhandler(requests.RequestException)
def handle_request_error(error):
    """A failed create/vote/comment leaves the board as it was."""
    print(f"[web] Request to idea board API failed: {error}")
    return back_to_board()


# =============================================================================
# Template Filters
# =============================================================================

@app.template_filter("tag_class")
def tag_class(tag):
    """Return a CSS class for a tag badge."""
    slug = re.sub(r"[^a-z0-9]+", "-", str(tag).lower()).strip("-")
    return f"tag-{slug}" if slug else "tag"


@app.template_filter("format_date")
def format_date(dt):
    """Format a creation date for an idea card (missing -> today)."""
    if isinstance(dt, str):
        return dt
    return (dt or datetime.now()).strftime("%b %d, %Y")


@app.template_filter("format_datetime")
def format_datetime(dt):
    """Format a comment timestamp (missing -> now)."""
    if isinstance(dt, str):
        return dt
    return (dt or datetime.now()).strftime("%b %d, %Y %H:%M")


if __name__ == "__main__":
    errors = validate_config()
    print("=" * 50)
    print("💡 Vibe Hunt")
    print("=" * 50)
    print_config_summary()
    for error in errors:
        print(f"  ⚠️  {error}")
    print(f"Open http://localhost:{WEB_PORT} in your browser")
    print("Press Ctrl+C to stop")
    print("=" * 50)
    app.run(debug=True, port=WEB_PORT)
