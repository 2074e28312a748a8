"""Evaluation result and verdict of one policy run."""

from typing import List

from pydantic import BaseModel, Field

from jira_links.models.jira_issue import JiraIssue


class EvaluationResult(BaseModel):
    """Issue keys found in the title and what Jira said about them.

    ``valid_issues`` and ``invalid_keys`` together cover ``issue_keys``
    exactly, in title order.
    """

    issue_keys: List[str] = Field(default_factory=list)
    valid_issues: List[JiraIssue] = Field(default_factory=list)
    invalid_keys: List[str] = Field(default_factory=list)
    missing_approval_keys: List[str] = Field(default_factory=list)
    requires_approval: bool = False
    target_version: str | None = None


class Verdict(BaseModel):
    """Terminal output of the evaluator: pass/fail, comment body and log line."""

    passed: bool
    comment: str
    message: str
    result: EvaluationResult = Field(default_factory=EvaluationResult)
