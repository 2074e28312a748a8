"""Read the pull request context from the GitHub Actions event payload."""

import json
import os
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from jira_links.models import PullRequestContext


class EventError(Exception):
    """Raised when the event payload is missing or not a pull request event."""

    pass


def context_from_payload(payload: Dict[str, Any], repository: str | None = None) -> PullRequestContext:
    """Build the context from a ``pull_request`` / ``pull_request_target`` payload."""
    pr = payload.get("pull_request")
    if not isinstance(pr, dict):
        raise EventError("Event payload has no pull_request; run on pull_request events")
    base = pr.get("base") or {}
    repo = repository or (payload.get("repository") or {}).get("full_name")
    if not repo:
        raise EventError("Repository unknown: set GITHUB_REPOSITORY")
    try:
        return PullRequestContext(
            title=pr.get("title") or "",
            base_ref=base.get("ref") or "",
            number=pr["number"],
            repository=repo,
        )
    except (KeyError, ValidationError) as e:
        raise EventError(f"Malformed pull_request payload: {e}") from e


def load_context(event_path: Path | None = None) -> PullRequestContext:
    """Load the context from ``event_path`` or ``$GITHUB_EVENT_PATH``."""
    path = event_path or (Path(os.environ["GITHUB_EVENT_PATH"]) if os.environ.get("GITHUB_EVENT_PATH") else None)
    if path is None or not path.is_file():
        raise EventError(f"GitHub event file not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise EventError(f"Failed to read GitHub event {path}: {e}") from e
    return context_from_payload(payload, repository=os.environ.get("GITHUB_REPOSITORY"))
