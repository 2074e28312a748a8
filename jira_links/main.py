"""jira-links entry point.

Runs as a step of a pull_request workflow: reads the PR from the event
payload, checks its title against Jira and posts a status comment.
Usage: jira-links [--config config.yaml] [--dry-run].
"""

import argparse
import logging
import sys
from pathlib import Path

from jira_links import actions
from jira_links.adapters import GitHubAdapter
from jira_links.check import run_check
from jira_links.config import load_config
from jira_links.event import EventError, load_context
from jira_links.jira import JiraClient
from jira_links.logging import JiraLinksLogging
from jira_links.publisher import CommentPublisher, DryRunPublisher


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="jira-links",
        description="Link pull requests to Jira issues and enforce RCB approval",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--event-path",
        type=Path,
        default=None,
        help="GitHub event payload (default: $GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the comment instead of posting it",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: returns the process exit code (0 pass, 1 fail)."""
    args = parse_args(argv)
    config = load_config(args.config)
    JiraLinksLogging(config.logging).setup()
    log = logging.getLogger("jira_links")

    if args.check:
        print("Config OK:", config.jira.url, config.policy.rcb_branch_prefix)
        return 0

    try:
        context = load_context(args.event_path)
    except EventError as e:
        actions.set_failed(str(e))
        return 1
    log.info("Checking PR #%s (%s -> %s)", context.number, context.title, context.base_ref)

    try:
        jira_token = config.jira_token_resolved
        github_token = None if args.dry_run else config.github_token_resolved
    except OSError as e:
        actions.set_failed(f"Cannot read secret file: {e}")
        return 1

    jira = JiraClient(
        config.jira.url,
        email=config.jira.email,
        token=jira_token,
        timeout=config.jira.timeout,
    )
    if args.dry_run:
        publisher = DryRunPublisher(config.policy.comment_header)
    else:
        if not github_token:
            actions.set_failed("GitHub token missing: set GITHUB_TOKEN or the GITHUB_TOKEN input")
            return 1
        adapter = GitHubAdapter(token=github_token, api_url=config.github.api_url)
        publisher = CommentPublisher(adapter, context, config.policy.comment_header)

    return 0 if run_check(context, jira, publisher, config.policy) else 1


if __name__ == "__main__":
    sys.exit(main())
