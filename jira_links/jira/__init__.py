"""Jira REST client."""

from jira_links.jira.client import JiraClient, JiraError

__all__ = ["JiraClient", "JiraError"]
