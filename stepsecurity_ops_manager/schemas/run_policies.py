"""Pydantic schemas for workflow run policies."""

from datetime import datetime
from typing import Any

from pydantic import Field, field_serializer, field_validator

from stepsecurity_ops_manager.schemas.base import WireModel


class RunPolicyConfig(WireModel):
    """Pydantic model for the constraints a run policy enforces."""

    omit_empty = frozenset(
        {
            "enable_action_policy",
            "allowed_actions",
            "enable_runs_on_policy",
            "disallowed_runner_labels",
            "enable_secrets_policy",
            "enable_compromised_actions_policy",
            "is_dry_run",
        }
    )

    owner: str = ""
    name: str = ""
    enable_action_policy: bool = False
    allowed_actions: dict[str, str] = Field(default_factory=dict)
    enable_runs_on_policy: bool = False
    # Sent as an object keyed by label with empty-object values.
    disallowed_runner_labels: list[str] = Field(default_factory=list)
    enable_secrets_policy: bool = False
    enable_compromised_actions_policy: bool = False
    is_dry_run: bool = False

    @field_validator("disallowed_runner_labels", mode="before")
    @classmethod
    def _labels_from_object(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return list(value)
        return value

    @field_serializer("disallowed_runner_labels")
    def _labels_to_object(self, labels: list[str]) -> dict[str, dict[str, Any]]:
        return {label: {} for label in labels}


class RunPolicy(WireModel):
    """Pydantic model for a run policy as stored by the API."""

    omit_empty = frozenset(
        {
            "owner",
            "customer",
            "policy_id",
            "name",
            "created_by",
            "created_at",
            "last_updated_by",
            "last_updated_at",
            "all_repos",
            "all_orgs",
            "repositories",
        }
    )

    owner: str = ""
    customer: str = ""
    policy_id: str = ""
    name: str = ""
    created_by: str = ""
    # Left out of the document when unset instead of sent as the zero timestamp.
    created_at: datetime | None = None
    last_updated_by: str = ""
    last_updated_at: datetime | None = None
    policy_config: RunPolicyConfig = Field(default_factory=RunPolicyConfig)
    all_repos: bool = False
    all_orgs: bool = False
    repositories: list[str] = Field(default_factory=list)


class RunPolicyRequest(WireModel):
    """Pydantic model for the body of a run policy creation or update."""

    name: str
    policy_config: RunPolicyConfig = Field(default_factory=RunPolicyConfig)
    all_repos: bool = False
    all_orgs: bool = False
    repositories: list[str] = Field(default_factory=list)


CreateRunPolicyRequest = RunPolicyRequest
UpdateRunPolicyRequest = RunPolicyRequest
