"""GitHub Actions runner facilities: failure annotations and step summary."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def annotate(command: str, message: str) -> None:
    """Emit a workflow command such as ``::warning::message``."""
    print(f"::{command}::{_escape_data(message)}", flush=True)


def set_failed(message: str) -> None:
    """Log the failure and emit an ``::error::`` workflow command."""
    logger.error(message)
    annotate("error", message)


def write_step_summary(markdown: str) -> bool:
    """Append markdown to the job summary. Returns False outside Actions."""
    summary = os.environ.get("GITHUB_STEP_SUMMARY")
    if not summary:
        return False
    with Path(summary).open("a", encoding="utf-8") as f:
        f.write(markdown.rstrip("\n") + "\n")
    return True
