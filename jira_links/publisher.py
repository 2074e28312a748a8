"""Post or update the single status comment on a pull request."""

import logging

from jira_links.adapters.base import GitPlatformAdapter
from jira_links.models import Comment, PullRequestContext

logger = logging.getLogger(__name__)


class CommentPublisher:
    """Keeps exactly one comment starting with ``header`` on the PR.

    The first comment (in listing order) whose body starts with the header
    is overwritten; otherwise a new one is created. Concurrent runs are not
    coordinated.
    """

    def __init__(self, adapter: GitPlatformAdapter, context: PullRequestContext, header: str) -> None:
        self._adapter = adapter
        self._context = context
        self._header = header

    def render(self, body: str) -> str:
        return f"{self._header}\n{body}"

    def find_existing(self) -> Comment | None:
        comments = self._adapter.list_issue_comments(self._context.repository, self._context.number)
        logger.debug("PR #%s has %d comments", self._context.number, len(comments))
        return next((c for c in comments if c.body.startswith(self._header)), None)

    def publish(self, body: str) -> Comment:
        text = self.render(body)
        existing = self.find_existing()
        if existing is not None:
            comment = self._adapter.update_comment(self._context.repository, existing.id, text)
            logger.info("Updated comment %s on PR #%s", comment.id, self._context.number)
            return comment
        comment = self._adapter.create_comment(self._context.repository, self._context.number, text)
        logger.info("Created comment %s on PR #%s", comment.id, self._context.number)
        return comment


class DryRunPublisher:
    """Prints the comment instead of posting it."""

    def __init__(self, header: str) -> None:
        self._header = header

    def publish(self, body: str) -> None:
        print(f"{self._header}\n{body}", flush=True)
