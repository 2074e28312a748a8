"""One check run: evaluate the PR, publish the comment, report pass/fail."""

import logging
from typing import Protocol

from jira_links import actions
from jira_links.config import PolicyConfig
from jira_links.jira import JiraClient
from jira_links.models import PullRequestContext, Verdict
from jira_links.policy import PolicyEvaluator
from jira_links.policy.comments import ERROR_COMMENT

logger = logging.getLogger(__name__)


class Publisher(Protocol):
    def publish(self, body: str) -> object: ...


def evaluate_pull_request(context: PullRequestContext, jira: JiraClient, policy: PolicyConfig) -> Verdict:
    """Fetch project keys and evaluate the PR (no publishing)."""
    project_keys = jira.get_project_keys()
    logger.debug("Jira projects: %s", ", ".join(project_keys))
    evaluator = PolicyEvaluator(policy, fetch_issue=jira.get_issue, issue_link=jira.issue_link)
    return evaluator.evaluate(context, project_keys)


def run_check(
    context: PullRequestContext,
    jira: JiraClient,
    publisher: Publisher,
    policy: PolicyConfig,
) -> bool:
    """Run the policy check for one PR. Returns True if the check passed.

    The comment is published whatever the verdict; any error along the way
    is reported with the generic error comment and fails the check.
    """
    try:
        verdict = evaluate_pull_request(context, jira, policy)
        publisher.publish(verdict.comment)
    except Exception as e:
        logger.exception("Jira link check failed for PR #%s: %s", context.number, e)
        try:
            publisher.publish(ERROR_COMMENT)
        except Exception as publish_error:
            logger.error("Could not post error comment: %s", publish_error)
        actions.set_failed("Failed to link Jira issues")
        return False

    actions.write_step_summary(verdict.comment)
    if not verdict.passed:
        actions.set_failed(verdict.message)
        return False
    logger.info(verdict.message)
    return True
