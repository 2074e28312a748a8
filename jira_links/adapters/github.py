"""GitHub API adapter."""

import logging
from typing import Any, Dict, List

import requests

from jira_links.adapters.base import GitPlatformAdapter, GitPlatformError
from jira_links.models import Comment

logger = logging.getLogger(__name__)

PER_PAGE = 100


def _comment_from_api(data: Dict[str, Any]) -> Comment:
    user = data.get("user") or {}
    return Comment(
        id=data["id"],
        body=data.get("body") or "",
        author=user.get("login", ""),
    )


class GitHubAdapter(GitPlatformAdapter):
    """GitHub API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = path if path.startswith("http") else f"{self._api_url}/{path.lstrip('/')}"
        logger.debug("%s %s", method, url)
        resp = self._session.request(method, url, params=params, json=json, timeout=30)
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                data = resp.json()
            except ValueError:
                data = None
            if isinstance(data, dict):
                msg = data.get("message", msg)
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def list_issue_comments(self, repo: str, issue_number: int) -> List[Comment]:
        path = f"/repos/{repo}/issues/{issue_number}/comments"
        params: Dict[str, Any] | None = {"per_page": PER_PAGE}
        comments: List[Comment] = []
        while path:
            resp = self._request("GET", path, params=params)
            comments.extend(_comment_from_api(d) for d in resp.json() or [])
            # The "next" link already carries the query string
            path = (resp.links or {}).get("next", {}).get("url")
            params = None
        return comments

    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        resp = self._request(
            "POST",
            f"/repos/{repo}/issues/{issue_number}/comments",
            json={"body": body},
        )
        return _comment_from_api(resp.json())

    def update_comment(self, repo: str, comment_id: int, body: str) -> Comment:
        resp = self._request(
            "PATCH",
            f"/repos/{repo}/issues/comments/{comment_id}",
            json={"body": body},
        )
        return _comment_from_api(resp.json())
