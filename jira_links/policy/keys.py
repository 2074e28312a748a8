"""Issue key extraction from PR titles.

Keys are written in brackets, e.g. ``[DHIS2-12345] [LIBS-24680] Fix login``.
Only keys of projects that exist in Jira are recognized.
"""

import re
from typing import Iterable, List


def build_key_pattern(project_keys: Iterable[str]) -> re.Pattern[str] | None:
    """Compile ``[<KEY>-<digits>]`` for any of the given project keys.

    Matching is case-sensitive. Returns None when there are no keys.
    """
    keys = [re.escape(k) for k in project_keys if k]
    if not keys:
        return None
    return re.compile(r"\[((?:" + "|".join(keys) + r")-[0-9]+)\]")


def extract_issue_keys(project_keys: Iterable[str], title: str) -> List[str]:
    """Return bracketed issue keys in title order, duplicates kept."""
    pattern = build_key_pattern(project_keys)
    if pattern is None:
        return []
    return [m.group(1) for m in pattern.finditer(title or "")]
