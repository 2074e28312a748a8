"""Evaluate a pull request against the Jira linking policy.

Every PR title must reference at least one existing Jira issue, or carry the
escape hatch marker. PRs into RCB-protected branches (``patch/<version>``)
additionally need every linked issue labelled ``APPROVED-<version>``, and may
not use the escape hatch.
"""

import logging
from typing import Callable, Iterable

from jira_links.config import PolicyConfig
from jira_links.models import EvaluationResult, JiraIssue, PullRequestContext, Verdict
from jira_links.policy import comments
from jira_links.policy.keys import extract_issue_keys

logger = logging.getLogger(__name__)

IssueLookup = Callable[[str], JiraIssue | None]


def approval_target(base_ref: str, rcb_branch_prefix: str) -> str | None:
    """Version the RCB must approve for, or None if the branch is not protected."""
    if rcb_branch_prefix and base_ref.startswith(rcb_branch_prefix):
        return base_ref[len(rcb_branch_prefix) :]
    return None


class PolicyEvaluator:
    """Turns a PR context and the Jira project keys into a Verdict.

    Issues are looked up one at a time through ``fetch_issue``; a None
    return marks the key invalid, any exception propagates to the caller.
    """

    def __init__(
        self,
        policy: PolicyConfig,
        fetch_issue: IssueLookup,
        issue_link: Callable[[str], str],
    ) -> None:
        self._policy = policy
        self._fetch_issue = fetch_issue
        self._issue_link = issue_link

    def evaluate(self, context: PullRequestContext, project_keys: Iterable[str]) -> Verdict:
        escape_hatch = self._policy.escape_hatch
        target_version = approval_target(context.base_ref, self._policy.rcb_branch_prefix)
        result = EvaluationResult(
            requires_approval=target_version is not None,
            target_version=target_version,
            issue_keys=extract_issue_keys(project_keys, context.title),
        )

        if not result.issue_keys:
            if escape_hatch and escape_hatch in context.title:
                if result.requires_approval:
                    return Verdict(
                        passed=False,
                        comment=comments.escape_hatch_forbidden_comment(escape_hatch),
                        message=f"Found escape hatch {escape_hatch} but the current base branch is RCB-protected.",
                        result=result,
                    )
                return Verdict(
                    passed=True,
                    comment=comments.no_jira_comment(escape_hatch),
                    message=f"Found escape hatch {escape_hatch}",
                    result=result,
                )
            return Verdict(
                passed=False,
                comment=comments.missing_issue_key_comment(escape_hatch),
                message="Jira Issue Key missing in PR title.",
                result=result,
            )

        approval_label = f"{self._policy.approval_label_prefix}{target_version}"
        for key in result.issue_keys:
            logger.info("Found key %s", key)
            issue = self._fetch_issue(key)
            if issue is None:
                logger.warning("Issue key %s not found in Jira", key)
                result.invalid_keys.append(key)
                continue
            result.valid_issues.append(issue)
            if result.requires_approval and not issue.has_label(approval_label):
                result.missing_approval_keys.append(key)

        if result.invalid_keys and not result.valid_issues:
            return Verdict(
                passed=False,
                comment=comments.missing_or_invalid_comment(escape_hatch, result.invalid_keys),
                message="No valid Jira issue keys found in PR title.",
                result=result,
            )

        comment = comments.success_comment(
            result.valid_issues,
            self._issue_link,
            result.requires_approval,
            result.missing_approval_keys,
            result.invalid_keys,
        )
        if result.missing_approval_keys:
            return Verdict(
                passed=False,
                comment=comment,
                message=(
                    f"Some linked issues ({', '.join(result.missing_approval_keys)}) "
                    "have not been approved by the Release Control Board"
                ),
                result=result,
            )
        linked = ", ".join(issue.key for issue in result.valid_issues)
        return Verdict(passed=True, comment=comment, message=f"Linked Jira issues: {linked}", result=result)
