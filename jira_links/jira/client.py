"""Jira REST client: project keys, issue lookup and browse links."""

import logging
from typing import Any, Dict, List

import requests
from pydantic import ValidationError

from jira_links.models import JiraIssue

logger = logging.getLogger(__name__)

ISSUE_FIELDS = "summary,labels"


class JiraError(RuntimeError):
    """Raised when a Jira API call fails for any reason other than a missing issue."""


class JiraClient:
    """Read-only access to the Jira projects and issues the policy needs."""

    def __init__(
        self,
        base_url: str,
        email: str | None = None,
        token: str | None = None,
        timeout: float = 30,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers["Accept"] = "application/json"
        if email and token:
            self._session.auth = (email, token)

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug("%s %s", method, url)
        try:
            return self._session.request(method, url, params=params, timeout=self._timeout)
        except requests.Timeout as exc:
            raise JiraError(f"Jira {method} {path} timed out after {self._timeout}s") from exc
        except requests.RequestException as exc:
            raise JiraError(f"Jira {method} {path} request failed: {exc}") from exc

    @staticmethod
    def _raise_for_status(resp: requests.Response) -> None:
        if resp.status_code >= 400:
            raise JiraError(f"{resp.status_code}: {resp.text or resp.reason}")

    def get_project_keys(self) -> List[str]:
        """Keys of all projects visible to the client, in Jira's order."""
        resp = self._request("GET", "/rest/api/2/project")
        self._raise_for_status(resp)
        data = resp.json() or []
        return [p["key"] for p in data if isinstance(p, dict) and p.get("key")]

    def get_issue(self, key: str) -> JiraIssue | None:
        """Fetch an issue by key. Returns None when Jira does not know it."""
        resp = self._request("GET", f"/rest/api/2/issue/{key}", params={"fields": ISSUE_FIELDS})
        if resp.status_code == 404:
            return None
        self._raise_for_status(resp)
        try:
            return JiraIssue.model_validate(resp.json())
        except ValidationError as exc:
            raise JiraError(f"Malformed issue {key}: {exc}") from exc

    def issue_link(self, key: str) -> str:
        """Browser URL of an issue."""
        return f"{self._base_url}/browse/{key}"
