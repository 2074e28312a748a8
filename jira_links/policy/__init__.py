"""Linking policy: issue key extraction, evaluation and comment rendering."""

from jira_links.policy.evaluator import PolicyEvaluator, approval_target
from jira_links.policy.keys import build_key_pattern, extract_issue_keys

__all__ = ["PolicyEvaluator", "approval_target", "build_key_pattern", "extract_issue_keys"]
