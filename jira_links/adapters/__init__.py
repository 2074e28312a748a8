"""Git platform adapters (base and implementations)."""

from jira_links.adapters.base import GitPlatformAdapter, GitPlatformError
from jira_links.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
