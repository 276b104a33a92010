"""
New idea form.

Holds the five text fields of the creation modal and turns them into the
create-idea payload.
"""

from typing import Any, Callable, Dict, List, Optional

from src.api.base import IdeaBoardAPI


def parse_tags(text: str) -> List[str]:
    """
    Parse comma-separated tags.

    Segments are trimmed and empty segments dropped; order is preserved.
    "AI, , Productivity" -> ["AI", "Productivity"]
    """
    if not text:
        return []
    return [segment.strip() for segment in text.split(",") if segment.strip()]


def optional_field(value: str) -> Optional[str]:
    """Return the value, or None when it is blank after trimming."""
    if value is None or not value.strip():
        return None
    return value


class IdeaCreationForm:
    """
    Collects and submits a new idea.

    Submitting with a blank title or description is silently ignored.
    There is no duplicate-submission guard: two submits create two ideas.
    """

    FIELDS = ("title", "description", "author", "link", "tags")

    def __init__(self, api: IdeaBoardAPI, on_created: Callable[[], None] = None):
        """
        Args:
            api: Backend to submit to.
            on_created: Called after the create request returns (the page
                closes the modal and refreshes the list here).
        """
        self.api = api
        self.on_created = on_created
        self.reset()

    def reset(self) -> None:
        """Clear all fields."""
        self.title = ""
        self.description = ""
        self.author = ""
        self.link = ""
        self.tags = ""

    def update(self, **values: str) -> None:
        """Set field values by name (unknown names raise TypeError)."""
        for name, value in values.items():
            if name not in self.FIELDS:
                raise TypeError(f"Unknown form field: {name}")
            setattr(self, name, value if value is not None else "")

    def is_valid(self) -> bool:
        return bool(self.title.strip()) and bool(self.description.strip())

    def build_payload(self) -> Optional[Dict[str, Any]]:
        """
        Build the create-idea request body.

        Returns:
            The payload, or None if the form is not valid. Blank author and
            link are left out; tags are always present.
        """
        if not self.is_valid():
            return None

        payload = {
            "title": self.title,
            "description": self.description,
        }

        author = optional_field(self.author)
        if author is not None:
            payload["author"] = author

        link = optional_field(self.link)
        if link is not None:
            payload["link"] = link

        payload["tags"] = parse_tags(self.tags)
        return payload

    def submit(self) -> bool:
        """
        Submit the form.

        Returns:
            False if nothing was sent (invalid form), True after the create
            request and the follow-up callback completed.
        """
        payload = self.build_payload()
        if payload is None:
            return False

        self.api.create_idea(payload)
        if self.on_created:
            self.on_created()
        self.reset()
        return True

    def values(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in self.FIELDS}
