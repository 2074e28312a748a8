"""Logging for a single CI step run.

Log lines go to stderr without timestamps; the Actions runner adds its
own. Under GitHub Actions (``GITHUB_ACTIONS=true``) WARNING records, such
as issue keys Jira does not know, are also emitted as ``::warning::``
annotations so they show up on the workflow summary. ERROR records are
annotated by ``actions.set_failed`` and are not repeated here.

Configure via config.yaml (logging.level, logging.format,
logging.annotations) or env (LOGGING_LEVEL, LOGGING_FORMAT,
LOGGING_ANNOTATIONS).
"""

import logging
import os

from jira_links import actions
from jira_links.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _resolve_level(level: str) -> int:
    """Map level name to logging constant, INFO if unknown."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


def running_in_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


class AnnotationHandler(logging.Handler):
    """Turns WARNING records into ``::warning::`` workflow commands."""

    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)
        self.setFormatter(logging.Formatter("%(message)s"))

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno == logging.WARNING

    def emit(self, record: logging.LogRecord) -> None:
        try:
            actions.annotate("warning", self.format(record))
        except Exception:
            self.handleError(record)


class JiraLinksLogging:
    """Configures root logger from LoggingConfig (YAML + env LOGGING_*)."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT
        self._annotations = config.annotations

    def setup(self) -> None:
        """Apply level and format to the root logger, plus annotations in Actions."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            force=True,
        )
        if self._annotations and running_in_actions():
            logging.getLogger().addHandler(AnnotationHandler())
