"""Pydantic schema for the pull request template used by StepSecurity PRs."""

from pydantic import Field

from stepsecurity_ops_manager.schemas.base import WireModel


class GitHubPRTemplate(WireModel):
    """Pydantic model for a pull request template."""

    omit_empty = frozenset({"labels"})

    title: str = ""
    summary: str = ""
    commit_message: str = ""
    labels: list[str] = Field(default_factory=list)
