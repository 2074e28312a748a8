"""Pull request context read once from the CI event payload."""

from pydantic import BaseModel, ConfigDict


class PullRequestContext(BaseModel):
    """Pull request being checked. Immutable for the whole run."""

    model_config = ConfigDict(frozen=True)

    title: str
    base_ref: str
    number: int
    repository: str
