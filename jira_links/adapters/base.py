"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List

from jira_links.models import Comment


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Comment operations the publisher needs from a Git hosting platform."""

    @abstractmethod
    def list_issue_comments(self, repo: str, issue_number: int) -> List[Comment]:
        """Fetch all comments on an issue or PR, oldest first."""
        ...

    @abstractmethod
    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        """Post a comment on an issue or PR."""
        ...

    @abstractmethod
    def update_comment(self, repo: str, comment_id: int, body: str) -> Comment:
        """Replace the body of an existing comment."""
        ...
