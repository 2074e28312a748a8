"""Markdown bodies of the status comment.

The comment header is added by the publisher, not here.
"""

from typing import Callable, Iterable, List

from jira_links.models import JiraIssue

APPROVAL_REQUIRED_BANNER = "### 🛑 RELEASE CONTROL BOARD APPROVAL REQUIRED 👮"
APPROVED_BANNER = "### ✅ Approved by the Release Control Board 🚀"
ERROR_COMMENT = "💣 An unknown error occured, check the Github Action logs"


def missing_issue_key_comment(escape_hatch: str) -> str:
    return f"""
❌ **A JIRA issue must be specified in the PR title**

Some hints:
- Use the format `[DHIS2-12345]`
- Multiple issues can be specified, i.e. `[DHIS2-12345] [LIBS-24680]`
- In the **very rare case** where no Jira issue can be associated with this PR, use `{escape_hatch}`
"""


def no_jira_comment(escape_hatch: str) -> str:
    return f"""
❓ **{escape_hatch}** Are you sure this PR shouldn't be linked to a Jira issue?
"""


def escape_hatch_forbidden_comment(escape_hatch: str) -> str:
    return f"✋ The escape hatch `{escape_hatch}` cannot be used when merging to an RCB-protected branch."


def invalid_issues_text(keys: Iterable[str]) -> str:
    return "\n".join(f"- ❓ Issue key `{key}` appears to be invalid" for key in keys)


def missing_or_invalid_comment(escape_hatch: str, invalid_keys: Iterable[str]) -> str:
    return f"{missing_issue_key_comment(escape_hatch)}\n\n{invalid_issues_text(invalid_keys)}"


def success_comment(
    issues: List[JiraIssue],
    issue_link: Callable[[str], str],
    requires_approval: bool,
    missing_approvals: List[str],
    invalid_keys: List[str],
) -> str:
    """Issue list, invalid key warnings, then at most one approval banner."""
    issue_lines = "\n".join(
        f"\n- [{issue.key}]({issue_link(issue.key)}) - {issue.fields.summary}" for issue in issues
    )
    if missing_approvals:
        banner = APPROVAL_REQUIRED_BANNER
    elif requires_approval:
        banner = APPROVED_BANNER
    else:
        banner = ""
    return f"""{issue_lines}
{invalid_issues_text(invalid_keys)}

{banner}
"""
