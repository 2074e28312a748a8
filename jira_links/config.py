"""Configuration loading from YAML and environment.

Secrets (tokens) are taken from environment variables or from files
(Docker secrets). Never put real tokens in config files committed to the
repo.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _read_secret(env_keys: tuple[str, ...], file_env_key: str) -> str | None:
    """Read secret from the first set env var or from file path in env
    (e.g. Docker secrets)."""
    for env_key in env_keys:
        value = _current_env.get(env_key)
        if value:
            return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so properties can read env/file
_current_env: dict[str, str] = {}


def _is_placeholder(value: str | None) -> bool:
    return not value or value.startswith("${")


class GitHubConfig(BaseSettings):
    """GitHub API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="Workflow token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")


class JiraConfig(BaseSettings):
    """Jira REST settings. Credentials are optional for public projects."""

    model_config = SettingsConfigDict(env_prefix="JIRA_", extra="ignore")

    url: str = Field(default="https://dhis2.atlassian.net", description="Jira base URL")
    email: str | None = Field(default=None, description="Account email for basic auth")
    token: str | None = Field(default=None, description="API token; use env or secret file")
    timeout: float = Field(default=30, gt=0, description="Request timeout in seconds")


class PolicyConfig(BaseSettings):
    """Linking policy literals."""

    model_config = SettingsConfigDict(env_prefix="POLICY_", extra="ignore")

    comment_header: str = Field(default="### DHIS2 Jira Links", description="Identifies the status comment")
    escape_hatch: str = Field(default="[NO JIRA]", description="Title marker for PRs without an issue")
    rcb_branch_prefix: str = Field(default="patch/", description="Base branches that need RCB approval")
    approval_label_prefix: str = Field(default="APPROVED-", description="Prefix of the RCB approval label")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(levelname)s %(name)s: %(message)s",
        description="Log format (the runner timestamps each line)",
    )
    annotations: bool = Field(
        default=True,
        description="Turn WARNING records into ::warning:: annotations under GitHub Actions",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    jira: JiraConfig = Field(default_factory=JiraConfig)
    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, env, action input or Docker
        secret file."""
        t = self.github.token
        if not _is_placeholder(t):
            return t
        return _read_secret(("GITHUB_TOKEN", "INPUT_GITHUB_TOKEN"), "GITHUB_TOKEN_FILE")

    @property
    def jira_token_resolved(self) -> str | None:
        """Resolve Jira API token from config, env or Docker secret file."""
        t = self.jira.token
        if not _is_placeholder(t):
            return t
        return _read_secret(("JIRA_TOKEN", "INPUT_JIRA_TOKEN"), "JIRA_TOKEN_FILE")


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    Secrets: GITHUB_TOKEN, INPUT_GITHUB_TOKEN or GITHUB_TOKEN_FILE;
    JIRA_TOKEN or JIRA_TOKEN_FILE.
    """
    global _current_env
    import os

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(raw)

    return AppConfig(
        github=GitHubConfig(**(raw.get("github") or {})),
        jira=JiraConfig(**(raw.get("jira") or {})),
        policy=PolicyConfig(**(raw.get("policy") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
