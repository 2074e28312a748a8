"""Jira issue model (subset of the REST issue resource)."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JiraIssueFields(BaseModel):
    """Issue fields requested from Jira."""

    model_config = ConfigDict(extra="ignore")

    summary: str = ""
    labels: List[str] = Field(default_factory=list)

    @field_validator("summary", "labels", mode="before")
    @classmethod
    def _null_as_empty(cls, value, info):
        # Jira sends null for fields that were never set
        if value is None:
            return "" if info.field_name == "summary" else []
        return value


class JiraIssue(BaseModel):
    """Jira issue as returned by GET /rest/api/2/issue/{key}."""

    model_config = ConfigDict(extra="ignore")

    key: str
    fields: JiraIssueFields = Field(default_factory=JiraIssueFields)

    def has_label(self, label: str) -> bool:
        """Exact, case-sensitive label match."""
        return label in self.fields.labels
