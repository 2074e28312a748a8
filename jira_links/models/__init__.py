"""Data models for pull requests, comments, Jira issues and evaluation results (Pydantic)."""

from jira_links.models.comment import Comment
from jira_links.models.evaluation import EvaluationResult, Verdict
from jira_links.models.jira_issue import JiraIssue, JiraIssueFields
from jira_links.models.pull_request import PullRequestContext

__all__ = [
    "Comment",
    "EvaluationResult",
    "JiraIssue",
    "JiraIssueFields",
    "PullRequestContext",
    "Verdict",
]
