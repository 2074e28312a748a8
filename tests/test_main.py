"""Tests for the jira-links CLI entry point."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from jira_links.main import main, parse_args


@pytest.fixture
def event_file(tmp_path: Path) -> Path:
    path = tmp_path / "event.json"
    payload = {
        "pull_request": {"number": 4, "title": "[DHIS2-1] fix", "base": {"ref": "master"}},
        "repository": {"full_name": "dhis2/core"},
    }
    path.write_text(json.dumps(payload))
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "GITHUB_TOKEN",
        "INPUT_GITHUB_TOKEN",
        "GITHUB_TOKEN_FILE",
        "GITHUB_REPOSITORY",
        "GITHUB_STEP_SUMMARY",
        "GITHUB_API_URL",
        "JIRA_TOKEN",
        "JIRA_TOKEN_FILE",
        "GITHUB_ACTIONS",
    ):
        monkeypatch.delenv(key, raising=False)


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.config == Path("config.yaml")
    assert args.event_path is None
    assert not args.dry_run
    assert not args.check


def test_check_only(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--check", "--config", str(tmp_path / "none.yaml")]) == 0
    assert "Config OK" in capsys.readouterr().out


def test_missing_event_fails(tmp_path: Path) -> None:
    assert main(["--config", str(tmp_path / "none.yaml"), "--event-path", str(tmp_path / "no.json")]) == 1


def test_missing_token_fails(tmp_path: Path, event_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--config", str(tmp_path / "none.yaml"), "--event-path", str(event_file)]) == 1
    assert "GitHub token missing" in capsys.readouterr().out


def test_dry_run_prints_comment(tmp_path: Path, event_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with patch("jira_links.main.JiraClient") as client_cls:
        client = client_cls.return_value
        client.get_project_keys.return_value = ["DHIS2"]
        client.get_issue.return_value = None
        code = main(["--config", str(tmp_path / "none.yaml"), "--event-path", str(event_file), "--dry-run"])
    assert code == 1
    out = capsys.readouterr().out
    assert out.startswith("### DHIS2 Jira Links\n")
    assert "`DHIS2-1` appears to be invalid" in out


def test_posts_comment_with_token(
    tmp_path: Path, event_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "ghs_test")
    with patch("jira_links.main.JiraClient") as client_cls, patch("jira_links.main.GitHubAdapter") as adapter_cls:
        client = client_cls.return_value
        client.get_project_keys.return_value = ["DHIS2"]
        client.get_issue.return_value = None
        client.issue_link.side_effect = lambda key: key
        adapter = adapter_cls.return_value
        adapter.list_issue_comments.return_value = []
        code = main(["--config", str(tmp_path / "none.yaml"), "--event-path", str(event_file)])
    assert code == 1
    adapter_cls.assert_called_once_with(token="ghs_test", api_url="https://api.github.com")
    repo, number, body = adapter.create_comment.call_args[0]
    assert (repo, number) == ("dhis2/core", 4)
    assert body.startswith("### DHIS2 Jira Links\n")


@pytest.mark.parametrize("env_key", ["GITHUB_TOKEN_FILE", "JIRA_TOKEN_FILE"])
def test_unreadable_secret_file_fails(
    tmp_path: Path,
    event_file: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    env_key: str,
) -> None:
    """A secret file that cannot be read is reported, not raised."""
    monkeypatch.setenv(env_key, str(tmp_path / "nope"))
    code = main(["--config", str(tmp_path / "none.yaml"), "--event-path", str(event_file)])
    assert code == 1
    assert "::error::Cannot read secret file:" in capsys.readouterr().out
