"""Tests for jira_links.logging (root logger setup and Actions annotations)."""

import logging
from typing import Iterator

import pytest

from jira_links.config import LoggingConfig
from jira_links.logging import (
    DEFAULT_FORMAT,
    AnnotationHandler,
    JiraLinksLogging,
    _resolve_level,
    running_in_actions,
)


@pytest.fixture
def restore_root() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    old_level, old_handlers = root.level, list(root.handlers)
    yield root
    root.handlers = old_handlers
    root.setLevel(old_level)


def _annotation_handlers(root: logging.Logger) -> list:
    return [h for h in root.handlers if isinstance(h, AnnotationHandler)]


def test_default_format_has_no_timestamp() -> None:
    """The runner timestamps lines, so the format does not."""
    assert "asctime" not in DEFAULT_FORMAT
    assert "asctime" not in LoggingConfig().format


def test_resolve_level() -> None:
    assert _resolve_level(" warning\t") == logging.WARNING
    assert _resolve_level("TRACE") == logging.INFO


def test_running_in_actions(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    assert running_in_actions()
    monkeypatch.delenv("GITHUB_ACTIONS")
    assert not running_in_actions()


def test_annotation_handler_emits_warning(capsys: pytest.CaptureFixture[str]) -> None:
    log = logging.getLogger("jira_links.test.annotations")
    log.propagate = False
    log.setLevel(logging.DEBUG)
    handler = AnnotationHandler()
    log.addHandler(handler)
    try:
        log.info("Found key DHIS2-1")
        log.warning("Issue key %s not found in Jira", "DHIS2-9999")
        log.error("already annotated by set_failed")
    finally:
        log.removeHandler(handler)
        log.propagate = True
    assert capsys.readouterr().out == "::warning::Issue key DHIS2-9999 not found in Jira\n"


def test_setup_adds_annotations_in_actions(
    restore_root: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    JiraLinksLogging(LoggingConfig(level="DEBUG")).setup()
    assert restore_root.level == logging.DEBUG
    assert len(_annotation_handlers(restore_root)) == 1


def test_setup_without_actions(restore_root: logging.Logger, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    JiraLinksLogging(LoggingConfig()).setup()
    assert restore_root.level == logging.INFO
    assert _annotation_handlers(restore_root) == []


def test_setup_annotations_disabled(restore_root: logging.Logger, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    JiraLinksLogging(LoggingConfig(annotations=False)).setup()
    assert _annotation_handlers(restore_root) == []


def test_repeated_setup_keeps_one_annotation_handler(
    restore_root: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    JiraLinksLogging(LoggingConfig()).setup()
    JiraLinksLogging(LoggingConfig()).setup()
    assert len(_annotation_handlers(restore_root)) == 1
