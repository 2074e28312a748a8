"""Link pull requests to Jira issues and enforce RCB approval on release branches."""

__version__ = "0.1.0"
