#!/usr/bin/env python3
"""
Vibe Hunt - Idea board command-line client.

Drives the same board page as the web dashboard from a terminal:
  - List ideas filtered by period and sorted by votes or comments
  - Show one idea with its comment thread
  - Post new ideas, upvote, and comment

Usage:
    python main.py list                          # All-time ideas by votes
    python main.py list --period week --sort comments
    python main.py show 42                       # Idea 42 and its comments
    python main.py new --title T --description D --tags "AI, Productivity"
    python main.py upvote 42
    python main.py comment 42 --content "nice!"

The API location comes from IDEA_BOARD_API_URL (see .env).
"""

import argparse
import sys
from typing import List

from src.api import HttpIdeaBoardAPI, IdeaBoardAPI, MockIdeaBoardAPI
from src.board import EMPTY_THREAD_MESSAGE, IdeaBoardPage
from src.config import (
    IDEA_BOARD_API_URL,
    IDEA_BOARD_USE_MOCK,
    print_config_summary,
    validate_config,
)
from src.models import Comment, Idea, Period, SortKey


PERIOD_CHOICES = [p.value for p in Period]
SORT_CHOICES = [s.value for s in SortKey]


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="vibe-hunt",
        description="Browse, post, upvote and discuss ideas on the idea board.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              All-time ideas, most votes first
  %(prog)s list --period week --sort comments
  %(prog)s show 42                           One idea and its comments
  %(prog)s new --title "Standup bot" --description "Summarize standups"
  %(prog)s upvote 42                         Vote and show the updated list
  %(prog)s comment 42 --content "nice!"      Comment as Anonymous
        """,
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print every API request",
    )

    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # Selection options shared by commands that show the list afterwards
    selection = argparse.ArgumentParser(add_help=False)
    selection.add_argument(
        "--period", "-p",
        choices=PERIOD_CHOICES,
        default=Period.ALL.value,
        help="Time window (default: all)",
    )
    selection.add_argument(
        "--sort", "-s",
        choices=SORT_CHOICES,
        default=SortKey.VOTES.value,
        help="Order by votes or comments (default: votes)",
    )

    subparsers.add_parser("list", parents=[selection], help="List ideas")

    show = subparsers.add_parser("show", help="Show one idea and its comments")
    show.add_argument("idea_id", metavar="ID")

    new = subparsers.add_parser("new", parents=[selection], help="Post a new idea")
    new.add_argument("--title", "-t", default="", help="Idea title (required)")
    new.add_argument("--description", "-d", default="", help="Short description (required)")
    new.add_argument("--author", "-a", default="", help="Your name (optional)")
    new.add_argument("--link", "-l", default="", help="Link (optional)")
    new.add_argument("--tags", default="", help='Comma-separated tags, e.g. "AI, Productivity"')

    upvote = subparsers.add_parser("upvote", parents=[selection], help="Upvote an idea")
    upvote.add_argument("idea_id", metavar="ID")

    comment = subparsers.add_parser("comment", help="Comment on an idea")
    comment.add_argument("idea_id", metavar="ID")
    comment.add_argument("--content", "-c", default="", help="Comment text (required)")
    comment.add_argument("--author", "-a", default="", help="Your name (optional)")

    return parser


def show_config() -> None:
    """Display current configuration."""
    print("=" * 60)
    print("Vibe Hunt Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration warnings:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)


def build_api(verbose: bool = False) -> IdeaBoardAPI:
    """Create the API client from configuration (None if no API is configured)."""
    if IDEA_BOARD_USE_MOCK:
        # Nothing persists between runs; start from the demo board
        return MockIdeaBoardAPI().seed_samples()
    if not IDEA_BOARD_API_URL:
        return None
    return HttpIdeaBoardAPI(verbose=verbose)


# =============================================================================
# Output
# =============================================================================

def format_tags(tags: List[str]) -> str:
    return " ".join(f"[{tag}]" for tag in tags)


def format_idea_line(idea: Idea) -> str:
    """One-line summary of an idea for list output."""
    line = f"▲ {idea.votes:>4}  💬 {idea.comments:>3}  #{idea.id}  {idea.title}"
    if idea.author:
        line += f"  by {idea.author}"
    if idea.tags:
        line += f"  {format_tags(idea.tags)}"
    return line


def print_ideas(page: IdeaBoardPage) -> None:
    """Print the page's idea list with its selection header."""
    idea_list = page.idea_list
    print(f"Ideas ({idea_list.period.label}, by {idea_list.sort.label}):")
    if not idea_list.ideas:
        print("  (no ideas)")
    for idea in idea_list.ideas:
        print(f"  {format_idea_line(idea)}")


def format_comment(comment: Comment) -> str:
    when = comment.created_at.strftime("%Y-%m-%d %H:%M") if comment.created_at else ""
    return f"{comment.display_author} • {when}\n    {comment.content}"


def print_detail(page: IdeaBoardPage) -> None:
    """Print the active idea and its comment thread."""
    idea = page.active_idea
    thread = page.detail.thread

    print("=" * 60)
    print(idea.title)
    print("=" * 60)
    print(idea.description)
    if idea.tags:
        print(format_tags(idea.tags))
    print(f"Votes: {idea.votes}")
    if idea.author:
        print(f"By: {idea.author}")
    if idea.link:
        print(f"Link: {idea.link}")

    print("\nComments:")
    if thread.is_empty:
        print(f"  {EMPTY_THREAD_MESSAGE}")
    for comment in thread.comments:
        print(f"  {format_comment(comment)}")


# =============================================================================
# Commands
# =============================================================================

def run_command(args: argparse.Namespace, api: IdeaBoardAPI) -> int:
    """Execute one subcommand against a fresh board page."""
    page = IdeaBoardPage(
        api,
        period=Period(getattr(args, "period", Period.ALL.value)),
        sort=SortKey(getattr(args, "sort", SortKey.VOTES.value)),
    )
    page.mount()

    if page.idea_list.error:
        print(f"❌ {page.idea_list.error}")
        return 1

    if args.command == "list":
        print_ideas(page)
        return 0

    if args.command == "new":
        page.open_creation()
        if not page.submit_idea(
            title=args.title,
            description=args.description,
            author=args.author,
            link=args.link,
            tags=args.tags,
        ):
            print("❌ Title and description are required")
            return 1
        print("✓ Idea posted\n")
        print_ideas(page)
        return 0

    if args.command == "upvote":
        if not page.upvote(args.idea_id):
            print(f"❌ Idea not found: {args.idea_id}")
            return 1
        print("✓ Upvoted\n")
        print_ideas(page)
        return 0

    # show / comment need the idea to be active
    if not page.open_idea(args.idea_id):
        print(f"❌ Idea not found: {args.idea_id}")
        return 1

    if args.command == "comment":
        if not page.submit_comment(content=args.content, author=args.author):
            print("❌ Comment cannot be empty")
            return 1
        print("✓ Comment posted\n")

    print_detail(page)
    return 0


def main(argv: list = None, api: IdeaBoardAPI = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).
        api: Backend to use instead of the configured one.

    Returns:
        Exit code (0 = success, 1 = error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.show_config:
        show_config()
        return 0

    if not args.command:
        parser.print_help()
        return 1

    if api is None:
        api = build_api(verbose=args.verbose)
        if api is None:
            print("❌ IDEA_BOARD_API_URL is not configured")
            return 1

    try:
        return run_command(args, api)

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130
    except Exception as e:
        print(f"\n❌ Request failed: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
